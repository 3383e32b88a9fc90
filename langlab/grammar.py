"""Context-free grammars and a few ready-made examples."""

from __future__ import annotations

from dataclasses import dataclass, field

from langlab.production import Production

_SKIPPED_SYMBOLS = frozenset({"ε", "epsilon"})


def _looks_non_terminal(symbol: str) -> bool:
    return bool(symbol) and symbol[0].isupper()


@dataclass
class Grammar:
    """A named grammar with a start symbol and a list of productions."""

    name: str = "Untitled"
    start_symbol: str = "S"
    productions: list = field(default_factory=list)
    terminals: set = field(default_factory=set)
    non_terminals: set = field(default_factory=set)

    def add_production(self, production: Production) -> None:
        """Append ``production`` and classify the symbols it uses.

        Symbols starting with an upper-case letter count as
        non-terminals, everything else except epsilon as terminals.
        """
        self.productions.append(production)
        if production.non_terminal:
            self.non_terminals.add(production.non_terminal)
        for symbol in production.symbols:
            if symbol in _SKIPPED_SYMBOLS:
                continue
            if _looks_non_terminal(symbol):
                self.non_terminals.add(symbol)
            else:
                self.terminals.add(symbol)

    def remove_production(self, index: int) -> None:
        """Remove the production at ``index``; raise IndexError if out of range."""
        if not 0 <= index < len(self.productions):
            raise IndexError(f"No production at index {index}")
        del self.productions[index]

    def clear(self) -> None:
        self.productions.clear()
        self.terminals.clear()
        self.non_terminals.clear()

    def add_terminal(self, terminal: str) -> None:
        self.terminals.add(terminal)

    def add_non_terminal(self, non_terminal: str) -> None:
        self.non_terminals.add(non_terminal)

    def productions_for(self, non_terminal: str) -> list:
        return [p for p in self.productions if p.non_terminal == non_terminal]

    def is_terminal(self, symbol: str) -> bool:
        return symbol in self.terminals

    def is_non_terminal(self, symbol: str) -> bool:
        return symbol in self.non_terminals

    def __str__(self) -> str:
        lines = [
            f"Grammar: {self.name}",
            f"Start Symbol: {self.start_symbol}",
            "",
            "Productions:",
        ]
        lines.extend(f"  {production}" for production in self.productions)
        return "\n".join(lines) + "\n"


def _build(name: str, start: str, rules: list) -> Grammar:
    grammar = Grammar(name, start)
    for lhs, rhs in rules:
        grammar.add_production(Production(lhs, rhs))
    return grammar


def arithmetic_grammar() -> Grammar:
    """Left-recursive grammar of arithmetic expressions."""
    return _build("Arithmetic Expression Grammar", "E", [
        ("E", ["E", "+", "T"]),
        ("E", ["E", "-", "T"]),
        ("E", ["T"]),
        ("T", ["T", "*", "F"]),
        ("T", ["T", "/", "F"]),
        ("T", ["F"]),
        ("F", ["(", "E", ")"]),
        ("F", ["id"]),
        ("F", ["num"]),
    ])


def simple_statement_grammar() -> Grammar:
    """Grammar of if/while/assignment statements."""
    return _build("Simple Statement Grammar", "S", [
        ("S", ["if", "E", "then", "S", "else", "S"]),
        ("S", ["while", "E", "do", "S"]),
        ("S", ["id", "=", "E"]),
        ("S", [";"]),
        ("E", ["E", "+", "E"]),
        ("E", ["E", "*", "E"]),
        ("E", ["(", "E", ")"]),
        ("E", ["id"]),
        ("E", ["num"]),
    ])


def expression_grammar() -> Grammar:
    """LL(1) expression grammar without left recursion."""
    return _build("Expression Grammar (LL)", "E", [
        ("E", ["T", "E'"]),
        ("E'", ["+", "T", "E'"]),
        ("E'", ["ε"]),
        ("T", ["F", "T'"]),
        ("T'", ["*", "F", "T'"]),
        ("T'", ["ε"]),
        ("F", ["(", "E", ")"]),
        ("F", ["id"]),
    ])