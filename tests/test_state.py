import pytest

from langlab.state import DEFAULT_RADIUS, State


def test_label_defaults_to_id():
    state = State("q0")
    assert state.label == "q0"


def test_explicit_label_is_kept():
    state = State("q1", "start")
    assert state.label == "start"
    assert state.id == "q1"


def test_defaults():
    state = State("q0")
    assert state.radius == DEFAULT_RADIUS == 30.0
    assert state.position == (0.0, 0.0)
    assert not state.is_initial
    assert not state.is_final


def test_position_is_normalised_to_floats():
    state = State("q0", position=(3, 4))
    assert state.position == (3.0, 4.0)
    assert all(isinstance(c, float) for c in state.position)


@pytest.mark.parametrize(
    "point, inside",
    [
        ((100.0, 100.0), True),
        ((130.0, 100.0), True),
        ((100.0, 70.0), True),
        ((131.0, 100.0), False),
        ((125.0, 125.0), False),
    ],
)
def test_contains_point(point, inside):
    state = State("q0", position=(100.0, 100.0))
    assert state.contains_point(point) is inside


def test_contains_point_respects_radius():
    state = State("q0", position=(0.0, 0.0))
    state.radius = 5.0
    assert state.contains_point((5.0, 0.0))
    assert not state.contains_point((6.0, 0.0))