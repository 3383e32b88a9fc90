"""Scoped symbol table used during semantic analysis."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Optional


class SymbolType(enum.Enum):
    """Type of a declared symbol; the value is its source-level spelling."""

    INTEGER = "int"
    FLOAT = "float"
    DOUBLE = "double"
    CHAR = "char"
    STRING = "string"
    BOOLEAN = "bool"
    VOID = "void"
    FUNCTION = "function"
    UNKNOWN = "unknown"


_TYPE_NAMES = {
    "int": SymbolType.INTEGER,
    "integer": SymbolType.INTEGER,
    "float": SymbolType.FLOAT,
    "double": SymbolType.DOUBLE,
    "char": SymbolType.CHAR,
    "string": SymbolType.STRING,
    "bool": SymbolType.BOOLEAN,
    "boolean": SymbolType.BOOLEAN,
    "void": SymbolType.VOID,
}


def string_to_type(text: str) -> SymbolType:
    """Map a type name (case-insensitive) to a SymbolType, UNKNOWN if unrecognised."""
    return _TYPE_NAMES.get(text.lower(), SymbolType.UNKNOWN)


def type_to_string(symbol_type: SymbolType) -> str:
    """Source-level spelling of ``symbol_type``."""
    return symbol_type.value


@dataclass
class Symbol:
    """A declared name with its type, value and where it was declared."""

    name: str = ""
    type: SymbolType = SymbolType.UNKNOWN
    scope: int = 0
    line: int = 0
    value: str = ""
    is_initialized: bool = False
    is_constant: bool = False

    def type_string(self) -> str:
        return type_to_string(self.type)

    def __str__(self) -> str:
        text = f"{self.name} : {self.type_string()}"
        if self.is_initialized and self.value:
            text += f" = {self.value}"
        if self.is_constant:
            text += " [const]"
        return text


@dataclass
class SymbolTable:
    """A stack of scopes mapping names to symbols.

    Every symbol ever added is also remembered in ``discovered_symbols``,
    even after its scope has been left.
    """

    _scopes: list = field(default_factory=lambda: [{}], repr=False)
    current_scope: int = 0
    _discovered: list = field(default_factory=list, repr=False)

    @property
    def discovered_symbols(self) -> list:
        return list(self._discovered)

    def enter_scope(self) -> None:
        self.current_scope += 1
        if self.current_scope >= len(self._scopes):
            self._scopes.append({})

    def exit_scope(self) -> None:
        """Leave the current scope, dropping its symbols; the global scope stays."""
        if self.current_scope > 0:
            self._scopes[self.current_scope].clear()
            self.current_scope -= 1

    def add_symbol(self, symbol: Symbol) -> Symbol:
        """Declare ``symbol`` in the current scope and return the stored copy.

        Raises ValueError if the name is already declared in this scope.
        """
        if self.exists_in_current_scope(symbol.name):
            raise ValueError(
                f"Symbol '{symbol.name}' is already declared in scope {self.current_scope}"
            )
        stored = replace(symbol, scope=self.current_scope)
        self._scopes[self.current_scope][symbol.name] = stored
        self._discovered.append(replace(stored))
        return stored

    def update_symbol(self, name: str, value: str) -> None:
        """Assign ``value`` to the innermost visible ``name``; KeyError if undeclared."""
        symbol = self.lookup(name)
        if symbol is None:
            raise KeyError(name)
        symbol.value = value
        symbol.is_initialized = True
        for discovered in self._discovered:
            if discovered.name == name and discovered.scope == symbol.scope:
                discovered.value = value
                discovered.is_initialized = True
                break

    def lookup(self, name: str) -> Optional[Symbol]:
        """The innermost visible symbol called ``name``, or None."""
        for scope in reversed(self._scopes[: self.current_scope + 1]):
            if name in scope:
                return scope[name]
        return None

    def exists(self, name: str) -> bool:
        return self.lookup(name) is not None

    def exists_in_current_scope(self, name: str) -> bool:
        return name in self._scopes[self.current_scope]

    def symbols_in_scope(self, scope: int) -> list:
        """Symbols of scope level ``scope`` ordered by name; empty if out of range."""
        if not 0 <= scope < len(self._scopes):
            return []
        table = self._scopes[scope]
        return [table[name] for name in sorted(table)]

    def clear(self) -> None:
        self._scopes = [{}]
        self.current_scope = 0
        self._discovered.clear()

    def __str__(self) -> str:
        parts = ["Symbol Table:\n\n"]
        for level in range(self.current_scope + 1):
            parts.append(f"Scope {level}:\n")
            symbols = self.symbols_in_scope(level)
            if symbols:
                parts.extend(f"  {symbol}\n" for symbol in symbols)
            else:
                parts.append("  (empty)\n")
            parts.append("\n")
        return "".join(parts)