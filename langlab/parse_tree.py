"""Parse trees produced by a parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class ParseTreeNode:
    """A node of a parse tree.

    ``value`` holds the matched text of a terminal and defaults to the
    symbol itself. Nodes compare and hash by identity.
    """

    symbol: str
    value: Optional[str] = None
    is_terminal: bool = False
    children: list = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.value is None:
            self.value = self.symbol

    def add_child(self, child: ParseTreeNode) -> None:
        self.children.append(child)

    def render(self, indent: int = 0) -> str:
        """Indented text form of the subtree, one node per line."""
        pad = "  " * indent
        if self.is_terminal:
            line = f"{pad}Terminal: {self.symbol}"
            if self.value != self.symbol:
                line += f" ({self.value})"
            return line + "\n"
        text = f"{pad}NonTerminal: {self.symbol}\n"
        return text + "".join(child.render(indent + 1) for child in self.children)

    def __str__(self) -> str:
        return self.render()


@dataclass
class ParseTree:
    """A parse tree with the name of the grammar that produced it."""

    grammar_name: str = ""
    root: Optional[ParseTreeNode] = None

    def is_empty(self) -> bool:
        return self.root is None

    def render(self) -> str:
        if self.root is None:
            return "Empty parse tree"
        return f"Parse Tree for: {self.grammar_name}\n\n" + self.root.render()

    def __str__(self) -> str:
        return self.render()