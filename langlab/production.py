"""Grammar productions (rewrite rules)."""

from __future__ import annotations

from dataclasses import dataclass, field

EPSILON = "ε"
_EPSILON_SPELLINGS = frozenset({EPSILON, "epsilon", ""})


@dataclass
class Production:
    """A rule ``non_terminal → symbols``."""

    non_terminal: str = ""
    symbols: list = field(default_factory=list)

    def __post_init__(self) -> None:
        self.symbols = list(self.symbols)

    def __str__(self) -> str:
        if not self.symbols or self.is_epsilon():
            rhs = EPSILON
        else:
            rhs = " ".join(self.symbols)
        return f"{self.non_terminal} → {rhs}"

    def is_empty(self) -> bool:
        """Return True if the right-hand side has no symbols at all."""
        return not self.symbols

    def is_epsilon(self) -> bool:
        """Return True if the right-hand side is a single epsilon symbol."""
        return len(self.symbols) == 1 and self.symbols[0] in _EPSILON_SPELLINGS


def parse_production(text: str) -> Production:
    """Parse ``"A → B C"`` or ``"A -> B C"`` into a Production.

    An empty or epsilon right-hand side becomes ``["ε"]``. Raises
    ValueError when the text has no arrow, more than one arrow of the
    kind used, or no left-hand side.
    """
    cleaned = text.strip()
    if "→" in cleaned:
        parts = cleaned.split("→")
    elif "->" in cleaned:
        parts = cleaned.split("->")
    else:
        raise ValueError(f"Production has no arrow: {text!r}")

    if len(parts) != 2:
        raise ValueError(f"Production must have exactly one arrow: {text!r}")

    lhs = parts[0].strip()
    rhs = parts[1].strip()
    if not lhs:
        raise ValueError(f"Production has no left-hand side: {text!r}")

    if rhs in _EPSILON_SPELLINGS:
        symbols = [EPSILON]
    else:
        symbols = rhs.split()
    return Production(lhs, symbols)