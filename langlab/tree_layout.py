"""Layout of a parse tree for drawing: leaves side by side, parents centred."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from langlab.parse_tree import ParseTreeNode

Point = tuple[float, float]
Rect = tuple[float, float, float, float]

_ORIGIN = (50.0, 50.0)
_MIN_WIDTH = 1000
_MIN_HEIGHT = 600
_EMPTY_SIZE = (800, 600)


def max_depth(node: Optional[ParseTreeNode], current_depth: int = 0) -> int:
    """Depth of the deepest node below ``node``, counting ``node`` as ``current_depth``."""
    if node is None:
        return current_depth
    return max(
        (max_depth(child, current_depth + 1) for child in node.children),
        default=current_depth,
    )


def count_leaves(node: Optional[ParseTreeNode]) -> int:
    if node is None:
        return 0
    if not node.children:
        return 1
    return sum(count_leaves(child) for child in node.children)


@dataclass
class TreeLayout:
    """Positions of parse-tree nodes as top-left corners of their boxes."""

    node_width: float = 100.0
    node_height: float = 50.0
    horizontal_spacing: float = 30.0
    vertical_spacing: float = 80.0
    positions: dict = field(default_factory=dict)
    bounds: dict = field(default_factory=dict)

    def compute(self, root: Optional[ParseTreeNode]) -> tuple:
        """Lay out the tree under ``root`` and return the canvas size (width, height)."""
        self.positions.clear()
        self.bounds.clear()
        if root is None:
            return _EMPTY_SIZE
        tree_width = self._layout(root, *_ORIGIN)
        depth = max_depth(root)
        width = max(_MIN_WIDTH, int(tree_width + 100))
        height = max(_MIN_HEIGHT, depth * int(self.node_height + self.vertical_spacing) + 150)
        return width, height

    def _place(self, node: ParseTreeNode, position: Point) -> None:
        self.positions[node] = position
        self.bounds[node] = self.node_rect(position)

    def _layout(self, node: ParseTreeNode, x: float, y: float) -> float:
        if not node.children:
            self._place(node, (x, y))
            return x + self.node_width + self.horizontal_spacing

        child_y = y + self.node_height + self.vertical_spacing
        next_x = x
        for child in node.children:
            next_x = self._layout(child, next_x, child_y)

        leftmost = self.positions[node.children[0]][0]
        rightmost = self.positions[node.children[-1]][0]
        self._place(node, ((leftmost + rightmost) / 2.0, y))
        return next_x

    def node_rect(self, position: Point) -> Rect:
        """Box (x, y, width, height) of a node placed at ``position``."""
        return (position[0], position[1], self.node_width, self.node_height)

    def edges(self, root: Optional[ParseTreeNode]) -> list:
        """Line segments from each parent's bottom centre to each child's top centre."""
        segments: list = []
        if root is None or root not in self.positions:
            return segments
        px, py = self.positions[root]
        parent_anchor = (px + self.node_width / 2, py + self.node_height)
        for child in root.children:
            if child in self.positions:
                cx, cy = self.positions[child]
                segments.append((parent_anchor, (cx + self.node_width / 2, cy)))
                segments.extend(self.edges(child))
        return segments

    def display_text(self, node: ParseTreeNode) -> str:
        """The value of a node when it differs from its symbol, else the symbol."""
        if node.value and node.value != node.symbol:
            return node.value
        return node.symbol