"""States of a finite automaton as drawn on a canvas."""

from __future__ import annotations

from dataclasses import dataclass

Point = tuple[float, float]

DEFAULT_RADIUS = 30.0


@dataclass
class State:
    """A single automaton state with its drawing position and flags."""

    id: str = ""
    label: str = ""
    position: Point = (0.0, 0.0)
    is_initial: bool = False
    is_final: bool = False
    radius: float = DEFAULT_RADIUS

    def __post_init__(self) -> None:
        if not self.label:
            self.label = self.id
        self.position = (float(self.position[0]), float(self.position[1]))

    def contains_point(self, point: Point) -> bool:
        """Return True if ``point`` lies inside or on the state's circle."""
        dx = point[0] - self.position[0]
        dy = point[1] - self.position[1]
        return dx * dx + dy * dy <= self.radius * self.radius