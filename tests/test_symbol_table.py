import pytest

from langlab.symbol_table import (
    Symbol,
    SymbolTable,
    SymbolType,
    string_to_type,
    type_to_string,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("int", SymbolType.INTEGER),
        ("Integer", SymbolType.INTEGER),
        ("FLOAT", SymbolType.FLOAT),
        ("double", SymbolType.DOUBLE),
        ("char", SymbolType.CHAR),
        ("String", SymbolType.STRING),
        ("bool", SymbolType.BOOLEAN),
        ("boolean", SymbolType.BOOLEAN),
        ("void", SymbolType.VOID),
        ("long", SymbolType.UNKNOWN),
    ],
)
def test_string_to_type(text, expected):
    assert string_to_type(text) is expected


@pytest.mark.parametrize(
    "symbol_type, expected",
    [
        (SymbolType.INTEGER, "int"),
        (SymbolType.BOOLEAN, "bool"),
        (SymbolType.FUNCTION, "function"),
        (SymbolType.UNKNOWN, "unknown"),
    ],
)
def test_type_to_string(symbol_type, expected):
    assert type_to_string(symbol_type) == expected


def test_type_round_trip():
    for symbol_type in SymbolType:
        if symbol_type in (SymbolType.FUNCTION, SymbolType.UNKNOWN):
            continue
        assert string_to_type(type_to_string(symbol_type)) is symbol_type


def test_symbol_str_variants():
    plain = Symbol("x", SymbolType.INTEGER)
    assert str(plain) == "x : int"
    assert plain.type_string() == "int"

    initialised = Symbol("x", SymbolType.INTEGER, value="10", is_initialized=True)
    assert str(initialised) == "x : int = 10"

    constant = Symbol("pi", SymbolType.DOUBLE, value="3.14", is_initialized=True, is_constant=True)
    assert str(constant) == "pi : double = 3.14 [const]"


def test_value_hidden_when_not_initialised():
    symbol = Symbol("y", SymbolType.FLOAT, value="2.0")
    assert str(symbol) == "y : float"


def test_add_and_lookup_sets_scope():
    table = SymbolTable()
    table.enter_scope()
    stored = table.add_symbol(Symbol("a", SymbolType.INTEGER, scope=7))
    assert stored.scope == 1
    assert table.lookup("a").scope == 1
    assert table.exists("a")
    assert table.lookup("missing") is None


def test_duplicate_in_same_scope_raises():
    table = SymbolTable()
    table.add_symbol(Symbol("a", SymbolType.INTEGER))
    with pytest.raises(ValueError):
        table.add_symbol(Symbol("a", SymbolType.FLOAT))


def test_shadowing_in_inner_scope():
    table = SymbolTable()
    table.add_symbol(Symbol("a", SymbolType.INTEGER))
    table.enter_scope()
    table.add_symbol(Symbol("a", SymbolType.STRING))
    assert table.lookup("a").type is SymbolType.STRING
    table.exit_scope()
    assert table.lookup("a").type is SymbolType.INTEGER


def test_exit_scope_drops_inner_symbols_but_keeps_discovered():
    table = SymbolTable()
    table.enter_scope()
    table.add_symbol(Symbol("inner", SymbolType.CHAR))
    table.exit_scope()
    assert table.current_scope == 0
    assert not table.exists("inner")
    assert [s.name for s in table.discovered_symbols] == ["inner"]
    table.enter_scope()
    assert table.symbols_in_scope(1) == []


def test_exit_global_scope_is_noop():
    table = SymbolTable()
    table.add_symbol(Symbol("g", SymbolType.INTEGER))
    table.exit_scope()
    assert table.current_scope == 0
    assert table.exists("g")


def test_exists_in_current_scope():
    table = SymbolTable()
    table.add_symbol(Symbol("g", SymbolType.INTEGER))
    table.enter_scope()
    assert table.exists("g")
    assert not table.exists_in_current_scope("g")


def test_update_symbol_updates_lookup_and_discovered():
    table = SymbolTable()
    table.add_symbol(Symbol("x", SymbolType.INTEGER))
    table.update_symbol("x", "42")
    symbol = table.lookup("x")
    assert symbol.value == "42"
    assert symbol.is_initialized
    discovered = table.discovered_symbols[0]
    assert discovered.value == "42"
    assert discovered.is_initialized


def test_update_missing_symbol_raises():
    table = SymbolTable()
    with pytest.raises(KeyError):
        table.update_symbol("nope", "1")


def test_symbols_in_scope_sorted_and_out_of_range():
    table = SymbolTable()
    for name in ["c", "a", "b"]:
        table.add_symbol(Symbol(name, SymbolType.INTEGER))
    assert [s.name for s in table.symbols_in_scope(0)] == ["a", "b", "c"]
    assert table.symbols_in_scope(5) == []
    assert table.symbols_in_scope(-1) == []


def test_clear_resets_everything():
    table = SymbolTable()
    table.enter_scope()
    table.add_symbol(Symbol("x", SymbolType.INTEGER))
    table.clear()
    assert table.current_scope == 0
    assert not table.exists("x")
    assert table.discovered_symbols == []


def test_str_of_empty_table():
    assert str(SymbolTable()) == "Symbol Table:\n\nScope 0:\n  (empty)\n\n"


def test_str_lists_scopes():
    table = SymbolTable()
    table.add_symbol(Symbol("x", SymbolType.INTEGER))
    table.enter_scope()
    text = str(table)
    assert text.startswith("Symbol Table:\n\nScope 0:\n  x : int\n\nScope 1:\n")
    assert text.endswith("Scope 1:\n  (empty)\n\n")