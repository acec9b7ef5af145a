import pytest

from cardslot.symbols import HexBlue, SymbolBase, SymbolNone, SymbolType


@pytest.mark.parametrize(
    "code, member",
    [
        (0, SymbolType.NONE),
        (1, SymbolType.HEX_BLUE),
        (2, SymbolType.HEX_BLACK),
        (3, SymbolType.HEX_RED),
    ],
)
def test_symbol_type_codes(code, member):
    assert SymbolType(code) is member
    assert int(member) == code


def test_unknown_symbol_code_rejected():
    with pytest.raises(ValueError):
        SymbolType(4)


def test_hex_blue_is_worth_one_coin():
    symbol = HexBlue()
    assert symbol.coins == 1
    assert symbol.kind is SymbolType.HEX_BLUE


def test_hex_blue_hooks_keep_coins():
    symbol = HexBlue()
    symbol.initialize()
    symbol.symbol_effect()
    symbol.finalize()
    assert symbol.coins == 1


def test_symbol_none_is_empty_cell():
    symbol = SymbolNone()
    assert symbol.kind is SymbolType.NONE
    assert symbol.coins == 0


def test_base_accepts_coins():
    symbol = SymbolBase(coins=4)
    symbol.symbol_effect()
    assert symbol.coins == 4