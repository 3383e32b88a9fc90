"""Abstract syntax tree nodes."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional


class ASTNodeType(enum.Enum):
    """Kind of an AST node; the value is its display name."""

    PROGRAM = "Program"
    DECLARATION = "Declaration"
    ASSIGNMENT = "Assignment"
    EXPRESSION = "Expression"
    IDENTIFIER = "Identifier"
    LITERAL = "Literal"
    BINARY_OP = "Binary Operation"
    FUNCTION_DECL = "Function Declaration"
    FUNCTION_CALL = "Function Call"
    IF_STATEMENT = "If Statement"
    BLOCK = "Block"
    UNKNOWN = "Unknown"


@dataclass(eq=False)
class ASTNode:
    """A node of an abstract syntax tree. Nodes compare by identity."""

    type: ASTNodeType
    value: str = ""
    line: int = 0
    children: list = field(default_factory=list)
    parent: Optional[ASTNode] = field(default=None, repr=False)

    @property
    def child_count(self) -> int:
        return len(self.children)

    def add_child(self, child: ASTNode) -> None:
        self.children.append(child)
        child.parent = self

    def remove_child(self, child: ASTNode) -> None:
        """Detach ``child``; a node that is not a child is only unparented."""
        if child in self.children:
            self.children.remove(child)
        child.parent = None

    def type_string(self) -> str:
        return self.type.value

    def __str__(self) -> str:
        text = self.type_string()
        if self.value:
            text += f" ({self.value})"
        if self.line > 0:
            text += f" [Line {self.line}]"
        return text

    def render(self, indent: int = 0) -> str:
        """Indented text of the subtree, one node per line."""
        text = f"{'  ' * indent}{self}\n"
        return text + "".join(child.render(indent + 1) for child in self.children)

    def dump(self, indent: int = 0) -> None:
        """Print the subtree to standard output."""
        print(self.render(indent), end="")