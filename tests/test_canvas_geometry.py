import math

import pytest

from langlab.automaton import Automaton
from langlab.canvas_geometry import (
    CurvedEdge,
    DrawMode,
    angle_between,
    arrow_head,
    cubic_bezier_point,
    curved_transition,
    edge_point,
    has_reverse_transition,
    next_state_id,
    state_at,
    transition_key,
)
from langlab.state import State
from langlab.transition import Transition


def _automaton(*ids):
    automaton = Automaton()
    for index, state_id in enumerate(ids):
        automaton.add_state(State(state_id, position=(index * 100.0, 0.0)))
    return automaton


def test_angle_between_horizontal_and_vertical():
    assert angle_between((0, 0), (5, 0)) == pytest.approx(0.0)
    assert angle_between((0, 0), (0, 5)) == pytest.approx(math.pi / 2)


def test_edge_point_lies_on_circle_towards_target():
    point = edge_point((10.0, 10.0), (100.0, 10.0), 30.0)
    assert point == pytest.approx((40.0, 10.0))
    diagonal = edge_point((0.0, 0.0), (50.0, 70.0), 30.0)
    assert math.hypot(*diagonal) == pytest.approx(30.0)


def test_arrow_head_tip_and_side_lengths():
    tip, left, right = arrow_head((0.0, 0.0), (100.0, 40.0), 12.0)
    assert tip == (100.0, 40.0)
    assert math.dist(tip, left) == pytest.approx(12.0)
    assert math.dist(tip, right) == pytest.approx(12.0)
    assert math.dist(left, right) == pytest.approx(12.0)


def test_arrow_head_points_back_along_direction():
    _, left, right = arrow_head((0.0, 0.0), (100.0, 0.0))
    assert left[0] < 100.0 and right[0] < 100.0
    assert left[1] == pytest.approx(-right[1])


def test_cubic_bezier_endpoints():
    p0, p1, p2, p3 = (0.0, 0.0), (10.0, 20.0), (30.0, 20.0), (40.0, 0.0)
    assert cubic_bezier_point(0.0, p0, p1, p2, p3) == pytest.approx(p0)
    assert cubic_bezier_point(1.0, p0, p1, p2, p3) == pytest.approx(p3)
    mid = cubic_bezier_point(0.5, p0, p1, p2, p3)
    assert mid[0] == pytest.approx(20.0)


def test_curved_transition_trims_outside_state_circles():
    start, end = (0.0, 0.0), (200.0, 0.0)
    edge = curved_transition(start, end, start, end, True, 30.0)
    assert isinstance(edge, CurvedEdge)
    assert math.dist(edge.start, start) >= 30.0
    assert math.dist(edge.end, end) >= 30.0
    assert edge.arrow[0] == edge.end


def test_curved_transition_sides_are_opposite():
    start, end = (0.0, 0.0), (200.0, 0.0)
    up = curved_transition(start, end, start, end, True)
    down = curved_transition(start, end, start, end, False)
    assert up.control[1] > 0
    assert down.control[1] < 0
    assert up.control[1] == pytest.approx(-down.control[1])


def test_opposite_transitions_do_not_overlap():
    a, b = (0.0, 0.0), (200.0, 0.0)
    forward = curved_transition(a, b, a, b, True)
    backward = curved_transition(b, a, a, b, False)
    assert forward.control[1] * backward.control[1] > 0 or forward.control != backward.control
    assert forward.end[0] > forward.start[0]
    assert backward.end[0] < backward.start[0]


def test_curved_transition_label_rect_centred_on_control():
    a, b = (0.0, 0.0), (200.0, 0.0)
    edge = curved_transition(a, b, a, b)
    x, y, w, h = edge.label_rect
    assert (w, h) == (60.0, 20.0)
    assert (x + w / 2, y + h / 2) == pytest.approx(edge.control)


def test_curved_transition_degenerate_reference_returns_none():
    assert curved_transition((0, 0), (100, 0), (5, 5), (5, 5)) is None
    assert curved_transition((0, 0), (0, 0), (0, 0), (100, 0)) is None


def test_transition_key_joins_ids():
    assert transition_key("q0", "q1") == "q0|q1"


def test_has_reverse_transition():
    automaton = _automaton("q0", "q1")
    automaton.add_transition(Transition("q0", "q1", "a"))
    assert not has_reverse_transition(automaton, "q0", "q1")
    automaton.add_transition(Transition("q1", "q0", "b"))
    assert has_reverse_transition(automaton, "q0", "q1")
    assert not has_reverse_transition(None, "q0", "q1")


def test_next_state_id_counts_and_skips_taken():
    assert next_state_id(None) == "q0"
    assert next_state_id(Automaton()) == "q0"
    assert next_state_id(_automaton("q0", "q1")) == "q2"
    assert next_state_id(_automaton("q1")) == "q2"


def test_state_at_hit_and_miss():
    automaton = _automaton("q0", "q1")
    assert state_at(automaton, (100.0, 10.0)).id == "q1"
    assert state_at(automaton, (50.0, 0.0)) is None
    assert state_at(None, (0.0, 0.0)) is None


def test_draw_modes_are_distinct():
    assert len({mode.value for mode in DrawMode}) == 4
    assert DrawMode("add_state") is DrawMode.ADD_STATE