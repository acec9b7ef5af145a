"""Symbol kinds that can appear on the slot board."""

from enum import IntEnum


class SymbolType(IntEnum):
    """Kinds of symbol; the value is the code stored on the board."""

    NONE = 0
    HEX_BLUE = 1
    HEX_BLACK = 2
    HEX_RED = 3


class SymbolBase:
    """Common base for board symbols."""

    kind = SymbolType.NONE

    def __init__(self, coins=0):
        self.coins = coins
        self.in_play = False

    def initialize(self):
        """Mark the symbol as in play."""
        self.in_play = True

    def finalize(self):
        """Mark the symbol as out of play."""
        self.in_play = False

    def symbol_effect(self):
        """Return the coins this symbol yields."""
        return self.coins


class HexBlue(SymbolBase):
    """Blue hexagon, worth one coin."""

    kind = SymbolType.HEX_BLUE

    def __init__(self):
        super().__init__(coins=1)


class SymbolNone(SymbolBase):
    """Empty cell."""

    kind = SymbolType.NONE