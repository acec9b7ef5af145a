"""Screen and board constants plus small numeric helpers."""

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
SCREEN_LEFT_MARGIN = 240
SCREEN_RIGHT_MARGIN = SCREEN_WIDTH - 240

SLOT_X = 3  # columns on the board
SLOT_Y = 3  # rows on the board
SYMBOL = 3  # number of coloured symbol kinds


def abs_value(value):
    """Return the magnitude of ``value``."""
    return value if value > 0 else -value


def max_of(a, b):
    """Return the larger of two values, preferring ``a`` on a tie."""
    return b if a < b else a


def min_of(a, b):
    """Return the smaller of two values, preferring ``a`` on a tie."""
    return b if a > b else a