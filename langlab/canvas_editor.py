"""Interactive editing of an automaton, independent of any drawing toolkit.

A ``CanvasEditor`` receives pointer events (press, move, release) in canvas
coordinates and edits the automaton it holds according to the current
``DrawMode``. Whatever a dialog would ask the user is supplied by the caller
through ``finish_transition`` and ``edit_state``. Changes are reported to an
optional callback as ``on_event(name, *args)``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Optional

from langlab.automaton import Automaton, AutomatonError
from langlab.canvas_geometry import DrawMode, next_state_id, state_at
from langlab.state import DEFAULT_RADIUS, Point, State
from langlab.transition import Transition

EventCallback = Callable[..., None]

STATE_RADIUS = DEFAULT_RADIUS
FINAL_STATE_INNER_RADIUS = 24.0


@dataclass(frozen=True)
class StateStyle:
    """Colours and border width used to draw a state."""

    border_color: str
    border_width: int
    fill_color: str


_SIMULATION_STYLE = StateStyle("#ffc107", 4, "#fff8e1")
_PROPERTIES_STYLE = StateStyle("#0078d7", 3, "#e3f2fd")
_HIGHLIGHT_STYLE = StateStyle("blue", 2, "white")
_PLAIN_STYLE = StateStyle("black", 2, "white")


class CanvasEditor:
    """Editing state machine behind an automaton drawing canvas."""

    def __init__(
        self,
        automaton: Optional[Automaton] = None,
        on_event: Optional[EventCallback] = None,
    ) -> None:
        self.on_event = on_event
        self.automaton: Optional[Automaton] = None
        self.mode = DrawMode.SELECT
        self.selected_state_id = ""
        self.hover_state_id = ""
        self.properties_state_id = ""
        self.temp_transition_end: Point = (0.0, 0.0)
        self.drawing_transition = False
        self.dragged_state_id = ""
        self.dragging = False
        self.active_state_ids: set = set()
        self.active_transition_keys: set = set()
        if automaton is not None:
            self.set_automaton(automaton)

    def _emit(self, name: str, *args: str) -> None:
        if self.on_event is not None:
            self.on_event(name, *args)

    def _require_state(self, state_id: str) -> State:
        if self.automaton is None:
            raise AutomatonError("No automaton loaded.")
        state = self.automaton.get_state(state_id)
        if state is None:
            raise AutomatonError(f"State '{state_id}' does not exist.")
        return state

    def set_automaton(self, automaton: Optional[Automaton]) -> None:
        """Edit ``automaton`` from now on, forgetting every selection."""
        self.automaton = automaton
        self.selected_state_id = ""
        self.hover_state_id = ""
        self.properties_state_id = ""
        self.dragged_state_id = ""
        self.drawing_transition = False
        self.dragging = False
        self._emit("state_selected", "")
        self.clear_active_elements()

    def set_draw_mode(self, mode: DrawMode) -> None:
        self.mode = mode
        self.selected_state_id = ""
        self.drawing_transition = False
        self.dragging = False
        self.dragged_state_id = ""

    # Pointer events

    def press(self, point: Point) -> Optional[str]:
        """Handle a click at ``point`` according to the draw mode.

        Returns the id of the state that was clicked or created, or None.
        In transition mode a click on a second state leaves the transition
        pending until ``finish_transition`` or ``cancel_transition``.
        """
        if self.automaton is None:
            return None
        clicked = state_at(self.automaton, point)

        if self.mode is DrawMode.ADD_STATE:
            if clicked is not None:
                return None
            state_id = next_state_id(self.automaton)
            self.automaton.add_state(State(state_id, state_id, point, radius=STATE_RADIUS))
            self._emit("state_added", state_id)
            self._emit("automaton_modified")
            return state_id

        if self.mode is DrawMode.ADD_TRANSITION:
            if clicked is None:
                if self.drawing_transition:
                    self.cancel_transition()
                return None
            if not self.drawing_transition:
                self.selected_state_id = clicked.id
                self.drawing_transition = True
                self.temp_transition_end = point
            elif self.automaton.get_state(self.selected_state_id) is None:
                self.cancel_transition()
            return clicked.id

        if self.mode is DrawMode.DELETE:
            if clicked is None:
                return None
            self.delete_state(clicked.id)
            return clicked.id

        if clicked is not None:
            self.dragged_state_id = clicked.id
            self.dragging = True
            self.properties_state_id = clicked.id
            self._emit("state_selected", clicked.id)
            return clicked.id
        self.properties_state_id = ""
        self._emit("state_selected", "")
        return None

    def move(self, point: Point) -> None:
        """Track the pointer: hover, the rubber-band line and dragging."""
        hovered = state_at(self.automaton, point)
        self.hover_state_id = hovered.id if hovered is not None else ""

        if self.drawing_transition:
            self.temp_transition_end = point

        if self.dragging and self.dragged_state_id:
            dragged = self.automaton.get_state(self.dragged_state_id) if self.automaton else None
            if dragged is not None:
                dragged.position = (float(point[0]), float(point[1]))
            else:
                self.dragged_state_id = ""
                self.dragging = False

    def release(self) -> None:
        if self.dragging:
            self.dragging = False
            self.dragged_state_id = ""
            self._emit("automaton_modified")

    # Transitions

    def finish_transition(self, target_id: str, symbol: str) -> str:
        """Add the pending transition to ``target_id`` on ``symbol``.

        ``epsilon`` (any case) and ``ε`` are stored as ``E``. Returns a
        status message. Raises ValueError for an empty symbol and
        AutomatonError when no transition is pending or the automaton
        rejects it; the pending transition is dropped in every case.
        """
        try:
            if self.automaton is None or not self.drawing_transition:
                raise AutomatonError("No transition is being drawn.")
            source = self.automaton.get_state(self.selected_state_id)
            if source is None:
                raise AutomatonError("Source state no longer exists.")

            symbol = symbol.strip()
            if not symbol:
                raise ValueError("Symbol cannot be empty.\nUse 'E' for epsilon transitions.")
            if symbol.lower() == "epsilon" or symbol == "ε":
                symbol = "E"

            self.automaton.add_transition(Transition(source.id, target_id, symbol))
            target = self._require_state(target_id)
            self._emit("transition_added", source.id, target.id)
            self._emit("automaton_modified")
            shown = "ε (epsilon)" if symbol == "E" else symbol
            return f"Transition added: {source.label} --({shown})--> {target.label}"
        finally:
            self.cancel_transition()

    def cancel_transition(self) -> None:
        self.selected_state_id = ""
        self.drawing_transition = False

    # State editing

    def delete_state(self, state_id: str) -> bool:
        """Remove a state and its transitions; return True if it existed."""
        if self.automaton is None:
            return False
        if self.selected_state_id == state_id:
            self.selected_state_id = ""
        if self.hover_state_id == state_id:
            self.hover_state_id = ""
        if self.properties_state_id == state_id:
            self.properties_state_id = ""
        if self.dragged_state_id == state_id:
            self.dragged_state_id = ""
        if not self.automaton.remove_state(state_id):
            return False
        self._emit("state_removed", state_id)
        self._emit("automaton_modified")
        return True

    def toggle_initial(self, state_id: str) -> None:
        state = self._require_state(state_id)
        if state.is_initial:
            state.is_initial = False
            self.automaton.set_initial_state("")
        else:
            self.automaton.set_initial_state(state_id)
        self._emit("automaton_modified")

    def toggle_final(self, state_id: str) -> None:
        state = self._require_state(state_id)
        state.is_final = not state.is_final
        self._emit("automaton_modified")

    def edit_state(self, state_id: str, label: str, initial: bool, final: bool) -> None:
        """Apply the values of a state-properties form.

        A blank label keeps the current one.
        """
        state = self._require_state(state_id)
        new_label = label.strip()
        if new_label:
            state.label = new_label

        if initial and not state.is_initial:
            self.automaton.set_initial_state(state_id)
        elif not initial and state.is_initial:
            state.is_initial = False
            if self.automaton.initial_state_id == state_id:
                self.automaton.set_initial_state("")

        state.is_final = final
        self._emit("automaton_modified")

    # Simulation highlighting

    def set_active_states(self, state_ids: Iterable[str]) -> None:
        self.active_state_ids = set(state_ids)

    def set_active_transitions(self, keys: Iterable[str]) -> None:
        self.active_transition_keys = set(keys)

    def clear_active_elements(self) -> None:
        self.active_state_ids.clear()
        self.active_transition_keys.clear()

    def state_style(self, state_id: str) -> StateStyle:
        """How the state ``state_id`` is drawn given the current selections."""
        if state_id in self.active_state_ids:
            return _SIMULATION_STYLE
        if state_id == self.properties_state_id:
            return _PROPERTIES_STYLE
        if state_id in (self.hover_state_id, self.selected_state_id):
            return _HIGHLIGHT_STYLE
        return _PLAIN_STYLE