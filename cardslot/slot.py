"""The 3x3 slot board: spinning, coin scoring and symbol rewards."""

import random

import pygame

from .symbols import SymbolType
from .utility import SCREEN_HEIGHT, SLOT_X, SLOT_Y, SYMBOL

YELLOW = (255, 255, 0)
MAGENTA = (255, 0, 255)

BOARD_SIZE = SLOT_X * SLOT_Y
INITIAL_SYMBOLS = (0, 1, 1, 1)

BLACK_COINS = 2
RED_COINS = 5

SYMBOL_IMAGE_PATHS = (
    "Resource/Images/Symbol/hexagon-60.png",
    "Resource/Images/Symbol/hexagon-B60.png",
    "Resource/Images/Symbol/hexagon-Black60.png",
    "Resource/Images/Symbol/hexagon-R60.png",
)
SLOT_IMAGE_PATHS = (
    "Resource/Images/coin.png",
    "Resource/Images/frame001a.png",
    "Resource/Images/framebg003g.png",
)
CARD_IMAGE_PATHS = (
    "Resource/Images/SymbolCard/symbol_card_blue.png",
    "Resource/Images/SymbolCard/symbol_card_black.png",
    "Resource/Images/SymbolCard/symbol_card_red.png",
)
COIN_ANIMATION_PATH = "Resource/images/CoinAnimation/pipo-btleffect142.png"
COIN_ANIMATION_DIVISION = (30, 5, 6, 240, 240)
COIN_SPLASH_FRAMES = COIN_ANIMATION_DIVISION[0]
SPLASH_DURATION = 50

# Direction towards the board's interior for each column/row index.
_INWARD = {0: 1, 1: 0, 2: -1}


def _grid(value):
    return [[value] * SLOT_Y for _ in range(SLOT_X)]


def _neighbour_offsets(dx, dy):
    if dx and dy:
        return ((dx, 0), (0, dy), (dx, dy))
    if dx:
        return ((0, 1), (0, -1), (dx, 0), (dx, 1), (dx, -1))
    if dy:
        return ((-1, 0), (-1, dy), (1, 0), (1, dy), (0, dy))
    # The centre looks at the cell to its left twice and never at (0, -1).
    return ((1, 0), (-1, 0), (1, 1), (-1, -1), (-1, 1), (1, -1), (0, 1), (-1, 0))


class Slot:
    """Board state, held symbols and coin count for one game."""

    def __init__(self, rng=None):
        self._rng = rng or random.Random()
        self.coin = 0
        self.symbol_images = []
        self.slot_images = []
        self.add_symbol_images = []
        self.coin_animation_images = ()
        self.symbols = list(INITIAL_SYMBOLS)
        self.add_symbol_flag = True
        self.add_animation_y = SCREEN_HEIGHT
        self.coin_a_cnt = 5
        self.animation_num = [0] * (SYMBOL + 1)
        self.select_card = 0
        self.board = _grid(SymbolType.NONE.value)
        self.offered = [0, 0]
        self.slot_coins = _grid(0)
        self.symbol_hit = _grid(False)
        self.img_num = 0
        self.splash = False
        self.animation_time = SPLASH_DURATION

    def _rand(self, upper):
        """Random integer from 0 to ``upper`` inclusive."""
        return self._rng.randint(0, upper)

    def _cells(self):
        for x in range(SLOT_X):
            for y in range(SLOT_Y):
                yield x, y

    def initialize(self, resources):
        """Load images and give the starting set of symbols."""
        self.symbol_images = [resources.get_images(p)[0] for p in SYMBOL_IMAGE_PATHS]
        self.slot_images = [resources.get_images(p)[0] for p in SLOT_IMAGE_PATHS]
        self.add_symbol_images = [resources.get_images(p)[0] for p in CARD_IMAGE_PATHS]
        self.coin_animation_images = tuple(
            resources.get_images(COIN_ANIMATION_PATH, *COIN_ANIMATION_DIVISION)
        )
        self.symbols = list(INITIAL_SYMBOLS)

    def restart_game(self):
        """Clear the board and return to the starting symbols and no coins."""
        self.board = _grid(SymbolType.NONE.value)
        self.symbols = list(INITIAL_SYMBOLS)
        self.coin = 0
        self.add_symbol_flag = True

    def update(self):
        """Per-frame update: advance the coin splash while it is showing."""
        if self.splash:
            self.animation_count()

    def finalize(self):
        """Drop image references and stop any running splash."""
        self.symbol_images = []
        self.slot_images = []
        self.add_symbol_images = []
        self.coin_animation_images = ()
        self.splash = False
        self.img_num = 0
        self.animation_time = SPLASH_DURATION

    def draw(self, surface, font):
        """Draw the frame, board, coin count and held symbol counts."""
        surface.blit(self.slot_images[2], (100, 20))
        surface.blit(self.slot_images[1], (40, 0))
        for x, y in self._cells():
            code = self.board[x][y]
            if 0 <= code <= SYMBOL:
                surface.blit(self.symbol_images[code], (110 + 500 * x, 30 + 150 * y))

        self._text(surface, font, f"Coin : {self.coin}", (100, 650))

        for kind, top in zip(range(1, SYMBOL + 1), (500, 550, 600)):
            surface.blit(self.symbol_images[kind], (900, top))
            self._text(surface, font, f"  {self.symbols[kind]}", (920, top))

    @staticmethod
    def _text(surface, font, text, position):
        surface.blit(font.render(text, True, YELLOW), position)

    def spin(self):
        """Scatter the held symbols randomly over the board.

        When more than nine symbols are held, random ones sit this spin out.
        """
        pool = list(self.symbols)
        total = sum(pool[1:])
        self.board = _grid(SymbolType.NONE.value)

        while total > BOARD_SIZE:
            kind = self._rand(SYMBOL)
            if pool[kind] > 0:
                pool[kind] -= 1
                total -= 1

        for kind in range(1, SYMBOL + 1):
            while pool[kind] > 0:
                x = self._rand(SLOT_X - 1)
                y = self._rand(SLOT_Y - 1)
                if self.board[x][y] == SymbolType.NONE:
                    self.board[x][y] = kind
                    pool[kind] -= 1

    def set_add_symbol(self):
        """Draw two different non-empty symbol kinds to offer as cards."""
        first = 0
        while first == 0:
            first = self._rand(SYMBOL)
        second = 0
        while second == 0 or second == first:
            second = self._rand(SYMBOL)
        self.offered = [first, second]

    def add_symbol(self, index):
        """Take the offered card at ``index`` (0 or 1) into the held symbols."""
        self.symbols[self.offered[index]] += 1
        self.add_symbol_flag = True

    def add_coins(self):
        """Score the board, add the coins and return how many were earned.

        Empty cells earn one per neighbouring black, blue cells one per
        neighbouring blue, black cells two, and red cells five before they
        are used up.
        """
        earned = 0
        for x, y in self._cells():
            code = self.board[x][y]
            if code == SymbolType.NONE:
                gained = self.search_symbol(x, y, SymbolType.HEX_BLACK)
            elif code == SymbolType.HEX_BLUE:
                gained = self.search_symbol(x, y, SymbolType.HEX_BLUE)
            elif code == SymbolType.HEX_BLACK:
                gained = BLACK_COINS
            elif code == SymbolType.HEX_RED:
                gained = RED_COINS
                self.symbols[SymbolType.HEX_RED] -= 1
            else:
                continue
            if gained or code in (SymbolType.HEX_BLACK, SymbolType.HEX_RED):
                self.coin += gained
                earned += gained
                self.slot_coins[x][y] = gained
                self.animation_num[code] = 1

        self.symbol_hit = _grid(False)
        if earned >= 1:
            self.splash = True
        return earned

    def add_coins_animation(self, surface, font, coin_num):
        """Draw the coins earned by cells holding symbol ``coin_num``."""
        if self.animation_num[coin_num] != 1:
            return
        for x, y in self._cells():
            if self.board[x][y] != coin_num:
                continue
            if coin_num == SymbolType.NONE and self.slot_coins[x][y] == 0:
                continue
            surface.blit(self.slot_images[0], (500 * x + 100, 150 * y + self.coin_a_cnt))
            self._text(
                surface, font, str(self.slot_coins[x][y]),
                (500 * x + 150, 150 * y + self.coin_a_cnt),
            )

    def coin_splash(self, surface):
        """Draw the current frame of the coin splash effect."""
        surface.blit(self.coin_animation_images[self.img_num], (2, 300))

    def draw_add_symbol_animation(self, surface):
        """Draw the two offered cards and a border round the hovered one."""
        top = self.add_animation_y
        surface.blit(self.add_symbol_images[self.offered[0] - 1], (256, top + 10))
        surface.blit(self.add_symbol_images[self.offered[1] - 1], (768, top + 10))

        left = {1: 256, 2: 768}.get(self.select_card)
        if left is None:
            return
        for k in range(4):
            x1, y1 = left - 3 + k, top + 13 - k
            x2, y2 = left + 261 - k, top + 417 - k
            pygame.draw.rect(surface, MAGENTA, pygame.Rect(x1, y1, x2 - x1, y2 - y1), 1)

    def search_symbol(self, slot_x, slot_y, symbol_num):
        """Count the neighbours of a cell that hold ``symbol_num``."""
        if slot_x not in _INWARD or slot_y not in _INWARD:
            raise ValueError(f"cell ({slot_x}, {slot_y}) is not on the board")
        hits = 0
        for ox, oy in _neighbour_offsets(_INWARD[slot_x], _INWARD[slot_y]):
            nx, ny = slot_x + ox, slot_y + oy
            if self.board[nx][ny] == symbol_num:
                self.symbol_hit[nx][ny] = True
                hits += 1
        return hits

    def init_coins(self):
        """Forget the coins shown per cell and the animation markers."""
        self.slot_coins = _grid(0)
        self.animation_num = [0] * (SYMBOL + 1)
        self.splash = False

    def animation_count(self):
        """Advance the splash frame counter, one frame every two ticks.

        When the splash runs out of time or frames it stops and rewinds.
        """
        self.animation_time -= 1
        if self.animation_time % 2 == 0:
            self.img_num += 1
        frames = len(self.coin_animation_images) or COIN_SPLASH_FRAMES
        if self.animation_time <= 0 or self.img_num >= frames:
            self.animation_time = SPLASH_DURATION
            self.img_num = 0
            self.splash = False