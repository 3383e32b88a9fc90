"""Labelled transitions between automaton states."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Union

EPSILON_SYMBOLS = frozenset({"E", "ε", "epsilon", ""})


def is_epsilon_symbol(symbol: str) -> bool:
    """Return True if ``symbol`` denotes the empty (epsilon) move."""
    return symbol in EPSILON_SYMBOLS


@dataclass
class Transition:
    """A transition from one state to another on a set of symbols.

    ``symbols`` may be given as a single symbol string (an empty string
    means no symbol) or as any iterable of symbols.
    """

    source: str = ""
    target: str = ""
    symbols: Union[set, str, Iterable] = field(default_factory=set)

    def __post_init__(self) -> None:
        if isinstance(self.symbols, str):
            self.symbols = {self.symbols} if self.symbols else set()
        else:
            self.symbols = set(self.symbols)

    def add_symbol(self, symbol: str) -> None:
        self.symbols.add(symbol)

    def remove_symbol(self, symbol: str) -> None:
        self.symbols.discard(symbol)

    def is_epsilon(self) -> bool:
        """Return True if any of the symbols is an epsilon symbol."""
        return not EPSILON_SYMBOLS.isdisjoint(self.symbols)

    def symbols_string(self) -> str:
        """Sorted, comma separated symbols, with ``E`` shown as ``ε``."""
        shown = sorted("ε" if sym == "E" else sym for sym in self.symbols)
        return ", ".join(shown)

    def has_symbol(self, symbol: str) -> bool:
        """Return True if the transition fires on ``symbol``.

        Every epsilon spelling matches any other epsilon spelling.
        """
        if is_epsilon_symbol(symbol):
            return self.is_epsilon()
        return symbol in self.symbols