# cardslot

A small slot machine game with a deck-building twist, played with the mouse.

The reels form a 3×3 grid. Each spin scatters the symbols you hold over the
grid at random; if you hold more than nine, random ones sit the spin out.
Cells are then scored:

- **Blue** hexagons earn one coin for every neighbouring blue hexagon.
- **Black** hexagons earn two coins, and every empty (white) cell earns one
  coin for each black hexagon next to it.
- **Red** hexagons earn five coins, but are used up once they appear.

You start with one of each coloured symbol. After every spin two different
symbol cards slide in and you pick one to add to your collection. After five
spins your coins are checked against the quota ("Norma"): if you have more,
the quota is paid out of your coins, the quota grows to
`norma + norma // 2 + 10` and a new round of five spins begins; if you have
fewer, the game is over.

## Installing

```
pip install .
```

This installs the game and its one dependency, pygame.

## Playing

```
cardslot
```

A 1280×720 window opens on the title screen. Hold the mouse button on
**Start** to begin. Hold the button on **Push** to set the reels turning;
they turn for 100 frames and then stop and score. When the two cards have
slid in, hover over one and click it to add that symbol. On the game-over
screen, hold the button on **Restart** to go back to the title. Press Escape
or close the window to quit.

The game loads its images from a `Resource/` directory in the current working
directory. If an image is missing, the command prints the error and exits
with a failure status. Missing sounds are skipped, and a missing font falls
back to pygame's default font.

## Using it from Python

The board can be driven without a window, which is handy for tests or
experiments:

```python
import random

from cardslot.slot import Slot

slot = Slot(rng=random.Random(1))
slot.spin()
earned = slot.add_coins()
print(earned, slot.coin, slot.board)
```

Other pieces:

- `cardslot.slot.Slot` — the board: `spin()`, `add_coins()`,
  `set_add_symbol()` / `add_symbol(index)`, `search_symbol(x, y, kind)`.
- `cardslot.symbols.SymbolType` — the symbol codes stored on the board.
- `cardslot.mouse.Mouse` — pointer state with `button_down()`, `button()`
  and `button_up()` edges; `update(x, y, buttons)` feeds it by hand.
- `cardslot.resources.ResourceManager` — cached image loading, including
  cutting a sprite sheet into cells; raises `ResourceError` on failure.
- `cardslot.scenes.GameMainScene` — the title, play and result screens.
- `cardslot.app.SceneManager` and `cardslot.app.main` — the window and the
  60-frames-per-second game loop.

## What it does not do

Only the main scene exists: there is no separate help screen, and
`SceneManager.create_scene` returns `None` for any scene type other than
`SceneType.MAIN`. Scores are not saved between games.

## Running the tests

```
pip install .[test]
pytest
```