"""Mouse state tracking with press, hold and release edges."""

import pygame

MOUSE_INPUT_LEFT = 0x1
MOUSE_INPUT_RIGHT = 0x2
MOUSE_INPUT_MIDDLE = 0x4


class Mouse:
    """Holds the pointer position and left-button state across frames."""

    def __init__(self):
        self.x = 0
        self.y = 0
        self.buttons = 0
        self.left = False
        self.previous_left = False

    def update(self, x, y, buttons):
        """Record a new frame of input; ``buttons`` is a MOUSE_INPUT_* mask."""
        self.x = x
        self.y = y
        self.buttons = buttons
        self.previous_left = self.left
        self.left = bool(buttons & MOUSE_INPUT_LEFT)

    def poll(self):
        """Read the current pointer state from pygame and record it."""
        x, y = pygame.mouse.get_pos()
        pressed = pygame.mouse.get_pressed()
        buttons = 0
        if pressed[0]:
            buttons |= MOUSE_INPUT_LEFT
        if len(pressed) > 1 and pressed[1]:
            buttons |= MOUSE_INPUT_MIDDLE
        if len(pressed) > 2 and pressed[2]:
            buttons |= MOUSE_INPUT_RIGHT
        self.update(x, y, buttons)

    @property
    def _left_now(self):
        return bool(self.buttons & MOUSE_INPUT_LEFT)

    def button_down(self):
        """True on the frame the left button was pressed."""
        return self._left_now and not self.previous_left

    def button(self):
        """True while the left button stays held after the first frame."""
        return self._left_now and self.previous_left

    def button_up(self):
        """True on the frame the left button was released."""
        return not self._left_now and self.previous_left

    def end_requested(self):
        """The mouse never asks the game to end."""
        return False