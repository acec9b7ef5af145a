"""Scenes of the game: the common scene interface and the main slot scene."""

import abc
import random
from enum import Enum

import pygame

from .mouse import Mouse
from .resources import ResourceManager
from .slot import Slot
from .utility import SCREEN_HEIGHT, SYMBOL

RED = (255, 0, 0)
BLUE = (0, 0, 255)
YELLOW = (255, 255, 0)

BUTTON_RECT = pygame.Rect(540, 550, 200, 100)
LEFT_CARD = (256, 110, 512, 510)
RIGHT_CARD = (768, 110, 1024, 510)

BUTTON_IMAGE_PATHS = (
    "Resource/Images/framebg001b.png",
    "Resource/Images/frame003i.png",
)
BACKGROUND_PATH = "Resource/images/sakaba0331_800b.jpg"
FONT_PATH = "Resource/font/KH-Dot-Dougenzaka-16.ttf"
BGM_PATH = "Resource/sounds/BGM.wav"
SPIN_SE_PATH = "Resource/sounds/ルーレット.wav"
COIN_SE_PATHS = (
    "Resource/sounds/1コンボ.wav",
    "Resource/sounds/2コンボ.wav",
    "Resource/sounds/3コンボ.wav",
    "Resource/sounds/4コンボ.wav",
)

INITIAL_NORMA = 5
SPINS_PER_ROUND = 5
SPIN_FRAMES = 100
CARD_TOP = 100
CARD_STEP = 10
COIN_ANIMATION_TIME = 50
COIN_ANIMATION_STEPS = 5


class SceneType(Enum):
    """Scenes the manager can switch between."""

    TITLE = 0
    MAIN = 1
    HELP = 2
    END = 3


class GameState(Enum):
    """Phases of the main scene."""

    TITLE = 0
    PLAYGAME = 1
    RESULT = 2


def _load_sound(path):
    if not pygame.mixer.get_init():
        return None
    try:
        return pygame.mixer.Sound(path)
    except (pygame.error, OSError):
        return None


def _play_if_idle(sound, loops=0):
    if sound is not None and sound.get_num_channels() == 0:
        sound.play(loops=loops)


def _inside(x, y, area):
    left, top, right, bottom = area
    return left < x < right and top < y < bottom


_BUTTON_AREA = (BUTTON_RECT.left, BUTTON_RECT.top, BUTTON_RECT.right, BUTTON_RECT.bottom)


class SceneBase(abc.ABC):
    """Interface every scene provides to the scene manager."""

    def initialize(self):
        """Prepare the scene; nothing by default."""

    def update(self):
        """Advance one frame and return the scene to show next."""
        return self.now_scene()

    def draw(self, surface):
        """Draw the scene onto ``surface``; nothing by default."""

    def finalize(self):
        """Release the scene; nothing by default."""

    @abc.abstractmethod
    def now_scene(self):
        """Return the SceneType this scene stands for."""


class GameMainScene(SceneBase):
    """Title screen, slot play with quota rounds, and game-over screen."""

    def __init__(self, mouse=None, resources=None, rng=None, sound_loader=None,
                 poll_mouse=True):
        self.mouse = mouse if mouse is not None else Mouse()
        self.resources = resources if resources is not None else ResourceManager()
        self.slot = Slot(rng if rng is not None else random.Random())
        self._sound_loader = sound_loader or _load_sound
        self._poll_mouse = poll_mouse

        self.state = GameState.TITLE
        self.spin_count = 0
        self.spinning = False
        self.spin_time = 0
        self.coin_animation = False
        self.coin_a_time = COIN_ANIMATION_TIME
        self.coin_num = 0
        self.norma = INITIAL_NORMA
        self.active = False

        self.background = None
        self.button_images = []
        self.bgm = None
        self.spin_se = None
        self.coin_count_se = [None] * (SYMBOL + 1)
        self._fonts = {}

    def initialize(self):
        """Load images and sounds for the slot and the scene."""
        self.slot.initialize(self.resources)
        self.button_images = [self.resources.get_images(p)[0] for p in BUTTON_IMAGE_PATHS]
        self.background = self.resources.get_images(BACKGROUND_PATH)[0]
        self.bgm = self._sound_loader(BGM_PATH)
        self.spin_se = self._sound_loader(SPIN_SE_PATH)
        self.coin_count_se = [self._sound_loader(p) for p in COIN_SE_PATHS]
        self.active = True

    def restart_game(self):
        """Start a fresh game: starting symbols, no coins, first quota."""
        self.slot.restart_game()
        self.norma = INITIAL_NORMA
        self.spinning = False
        self.spin_count = 0

    def update(self):
        """Read input, keep the music going and run the current phase."""
        if self._poll_mouse:
            self.mouse.poll()
        _play_if_idle(self.bgm, loops=-1)

        if self.state is GameState.TITLE:
            self.update_title()
        elif self.state is GameState.PLAYGAME:
            self.update_game_play()
        elif self.state is GameState.RESULT:
            self.update_result()
        return SceneType.MAIN

    def _on_button(self):
        return _inside(self.mouse.x, self.mouse.y, _BUTTON_AREA)

    def update_title(self):
        """Start the game when the button is held."""
        if self._on_button() and self.mouse.button():
            self.restart_game()
            self.state = GameState.PLAYGAME

    def update_result(self):
        """Return to the title when the button is held."""
        if self._on_button() and self.mouse.button():
            self.state = GameState.TITLE

    def update_game_play(self):
        """Run one frame of spinning, card choice and coin counting."""
        slot = self.slot
        mouse = self.mouse

        if not self.spinning:
            slot.update()
            if slot.add_animation_y >= SCREEN_HEIGHT:
                if self._on_button() or self.spin_time != 0:
                    if mouse.button() or 0 < self.spin_time < SPIN_FRAMES:
                        _play_if_idle(self.spin_se)
                        slot.spin()
                        self.spin_time += 1
                    elif self.spin_time >= SPIN_FRAMES or mouse.button_up():
                        self._stop_spin()
            else:
                slot.add_animation_y += CARD_STEP

        if self.spinning:
            if not slot.add_symbol_flag and not self.coin_animation:
                if slot.add_animation_y <= CARD_TOP:
                    self._choose_card()
                else:
                    slot.add_animation_y -= CARD_STEP
            if slot.add_symbol_flag and slot.add_animation_y < SCREEN_HEIGHT:
                self.spinning = False

        if self.coin_animation:
            self._advance_coin_animation()

    def _stop_spin(self):
        slot = self.slot
        slot.select_card = 0
        self.spin_count += 1
        self.spinning = True
        self.coin_animation = True
        slot.add_coins()
        slot.set_add_symbol()
        slot.add_symbol_flag = False
        self.spin_time = 0

    def _choose_card(self):
        slot = self.slot
        x, y = self.mouse.x, self.mouse.y
        for index, area in enumerate((LEFT_CARD, RIGHT_CARD)):
            if _inside(x, y, area):
                slot.select_card = index + 1
                if self.mouse.button_down():
                    slot.add_symbol(index)
                return
        slot.select_card = 0

    def _advance_coin_animation(self):
        slot = self.slot
        self.coin_a_time -= 1

        if slot.animation_num[self.coin_num] != 1:
            slot.coin_a_cnt = 0
        if slot.coin_a_cnt == COIN_ANIMATION_STEPS and self.coin_a_time == COIN_ANIMATION_TIME - 1:
            sound = self.coin_count_se[self.coin_num]
            if sound is not None:
                sound.play()
        if slot.coin_a_cnt > 0 and self.coin_a_time % 10 == 0:
            slot.coin_a_cnt -= 1

        if slot.coin_a_cnt > 0:
            return
        if self.coin_num >= SYMBOL:
            self.coin_animation = False
            self.coin_num = 0
            slot.init_coins()
            self._check_norma()
        else:
            self.coin_num += 1
        self.coin_a_time = COIN_ANIMATION_TIME
        slot.coin_a_cnt = COIN_ANIMATION_STEPS

    def _check_norma(self):
        if self.spin_count < SPINS_PER_ROUND:
            return
        slot = self.slot
        if slot.coin > self.norma:
            slot.coin -= self.norma
            self.norma = self.norma + self.norma // 2 + 10
            self.spin_count = 0
        elif slot.coin < self.norma:
            self.state = GameState.RESULT

    def _font(self, size):
        font = self._fonts.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            try:
                font = pygame.font.Font(FONT_PATH, size)
            except (OSError, pygame.error):
                font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return font

    def _text(self, surface, size, text, position, colour):
        surface.blit(self._font(size).render(text, True, colour), position)

    def _draw_button(self, surface):
        pygame.draw.rect(surface, RED, BUTTON_RECT)
        surface.blit(self.button_images[1], BUTTON_RECT.topleft)

    def draw(self, surface):
        """Draw the board, the counters and any overlay for the phase."""
        slot = self.slot
        dim = (
            (slot.add_animation_y < SCREEN_HEIGHT and not self.coin_animation)
            or self.state in (GameState.TITLE, GameState.RESULT)
        )
        layer = pygame.Surface(surface.get_size()) if dim else surface

        layer.blit(self.background, (0, 0))
        slot.draw(layer, self._font(64))
        self._draw_button(layer)
        self._text(layer, 64, "Push", (575, 565), BLUE)
        self._text(layer, 64, f"Norma : {self.norma}", (100, 550), YELLOW)
        self._text(layer, 64, f"Spin : {self.spin_count}/5", (900, 650), YELLOW)

        if dim:
            layer.set_alpha(128)
            surface.blit(layer, (0, 0))

        if self.coin_animation:
            slot.add_coins_animation(surface, self._font(64), self.coin_num)

        if slot.add_animation_y < SCREEN_HEIGHT and not self.coin_animation:
            slot.draw_add_symbol_animation(surface)

        if self.state is GameState.TITLE:
            self._text(surface, 128, "CardSlot", (400, 130), RED)
            self._draw_button(surface)
            self._text(surface, 50, "Start", (580, 570), BLUE)
        elif self.state is GameState.RESULT:
            self._text(surface, 128, "GameOver", (400, 330), RED)
            self._draw_button(surface)
            self._text(surface, 50, "Restart", (555, 565), BLUE)

    def finalize(self):
        """Stop sounds and release the slot."""
        for sound in (self.bgm, self.spin_se, *self.coin_count_se):
            if sound is not None:
                sound.stop()
        self.slot.finalize()
        self.active = False

    def now_scene(self):
        return SceneType.MAIN