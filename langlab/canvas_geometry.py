"""Geometry used to draw and hit-test automata on a canvas."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Optional

from langlab.automaton import Automaton
from langlab.state import DEFAULT_RADIUS, State

Point = tuple[float, float]
Rect = tuple[float, float, float, float]

ARROW_SIZE = 12.0
_CURVE_FACTOR = 0.35
_LABEL_WIDTH = 60.0
_LABEL_HEIGHT = 20.0


class DrawMode(enum.Enum):
    """What a click on the canvas does."""

    SELECT = "select"
    ADD_STATE = "add_state"
    ADD_TRANSITION = "add_transition"
    DELETE = "delete"


@dataclass(frozen=True)
class CurvedEdge:
    """A quadratic curve between two states, with its arrow head and label box."""

    start: Point
    control: Point
    end: Point
    arrow: tuple
    label_rect: Rect


def angle_between(start: Point, end: Point) -> float:
    """Angle in radians of the direction from ``start`` to ``end``."""
    return math.atan2(end[1] - start[1], end[0] - start[0])


def edge_point(center: Point, target: Point, radius: float) -> Point:
    """Point on the circle around ``center`` that faces ``target``."""
    angle = angle_between(center, target)
    return (center[0] + radius * math.cos(angle), center[1] + radius * math.sin(angle))


def arrow_head(start: Point, end: Point, size: float = ARROW_SIZE) -> tuple:
    """Triangle (tip, left, right) of an arrow pointing from ``start`` to ``end``."""
    angle = angle_between(start, end)
    left = (
        end[0] - size * math.cos(angle - math.pi / 6),
        end[1] - size * math.sin(angle - math.pi / 6),
    )
    right = (
        end[0] - size * math.cos(angle + math.pi / 6),
        end[1] - size * math.sin(angle + math.pi / 6),
    )
    return (end, left, right)


def cubic_bezier_point(t: float, p0: Point, p1: Point, p2: Point, p3: Point) -> Point:
    """Point at parameter ``t`` on the cubic Bézier curve p0..p3."""
    u = 1 - t
    a = u * u * u
    b = 3 * u * u * t
    c = 3 * u * t * t
    d = t * t * t
    return (
        a * p0[0] + b * p1[0] + c * p2[0] + d * p3[0],
        a * p0[1] + b * p1[1] + c * p2[1] + d * p3[1],
    )


def _quadratic_point(t: float, p0: Point, p1: Point, p2: Point) -> Point:
    u = 1 - t
    return (
        u * u * p0[0] + 2 * u * t * p1[0] + t * t * p2[0],
        u * u * p0[1] + 2 * u * t * p1[1] + t * t * p2[1],
    )


def _distance(a: Point, b: Point) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def curved_transition(
    actual_start: Point,
    actual_end: Point,
    ref_start: Point,
    ref_end: Point,
    curve_up: bool = True,
    state_radius: float = DEFAULT_RADIUS,
) -> Optional[CurvedEdge]:
    """Curve for one of a pair of opposite transitions.

    Both directions bend away from the reference line ``ref_start`` →
    ``ref_end``; ``curve_up`` picks the side. The curve is trimmed so that
    it starts and ends outside the state circles. Returns None when the
    reference or trimmed curve is too short to draw.
    """
    ref_dx = ref_end[0] - ref_start[0]
    ref_dy = ref_end[1] - ref_start[1]
    ref_dist = math.hypot(ref_dx, ref_dy)
    if ref_dist < 1.0:
        return None

    perp_x = -ref_dy / ref_dist
    perp_y = ref_dx / ref_dist
    if not curve_up:
        perp_x, perp_y = -perp_x, -perp_y

    mid_x = (actual_start[0] + actual_end[0]) / 2.0
    mid_y = (actual_start[1] + actual_end[1]) / 2.0
    height = _distance(actual_start, actual_end) * _CURVE_FACTOR
    control = (mid_x + perp_x * height, mid_y + perp_y * height)

    curve_start = actual_start
    t = 0.0
    while t <= 0.3:
        point = _quadratic_point(t, actual_start, control, actual_end)
        if _distance(point, actual_start) >= state_radius:
            curve_start = point
            break
        t += 0.01

    curve_end = actual_end
    t = 1.0
    while t >= 0.7:
        point = _quadratic_point(t, actual_start, control, actual_end)
        if _distance(point, actual_end) >= state_radius:
            curve_end = point
            break
        t -= 0.01

    trim_dist = _distance(curve_start, curve_end)
    if trim_dist < 1.0:
        return None

    trim_height = trim_dist * _CURVE_FACTOR
    trim_control = (
        (curve_start[0] + curve_end[0]) / 2.0 + perp_x * trim_height,
        (curve_start[1] + curve_end[1]) / 2.0 + perp_y * trim_height,
    )

    before_end = _quadratic_point(0.95, curve_start, trim_control, curve_end)
    arrow = arrow_head(before_end, curve_end, ARROW_SIZE)
    label_rect = (
        trim_control[0] - _LABEL_WIDTH / 2,
        trim_control[1] - _LABEL_HEIGHT / 2,
        _LABEL_WIDTH,
        _LABEL_HEIGHT,
    )
    return CurvedEdge(curve_start, trim_control, curve_end, arrow, label_rect)


def transition_key(source: str, target: str) -> str:
    """Key naming the transition between two states, as used for highlighting."""
    return f"{source}|{target}"


def has_reverse_transition(automaton: Optional[Automaton], source: str, target: str) -> bool:
    """Return True if the automaton has a transition from ``target`` back to ``source``."""
    if automaton is None:
        return False
    return any(t.source == target and t.target == source for t in automaton.transitions)


def next_state_id(automaton: Optional[Automaton]) -> str:
    """First free id of the form ``q<n>``, counting up from the number of states."""
    if automaton is None:
        return "q0"
    count = automaton.state_count
    while automaton.get_state(f"q{count}") is not None:
        count += 1
    return f"q{count}"


def state_at(automaton: Optional[Automaton], point: Point) -> Optional[State]:
    """The first state whose circle contains ``point``, or None."""
    if automaton is None:
        return None
    return next((s for s in automaton.states if s.contains_point(point)), None)