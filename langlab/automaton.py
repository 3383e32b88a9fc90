"""Finite automata (DFA and NFA) with editing and simulation."""

from __future__ import annotations

import enum
from collections import Counter, deque
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional

from langlab.state import State
from langlab.transition import Transition, is_epsilon_symbol


class AutomatonType(enum.Enum):
    DFA = "DFA"
    NFA = "NFA"


class AutomatonError(ValueError):
    """Raised when an edit would make the automaton inconsistent."""


@dataclass
class Automaton:
    """A finite automaton made of states, transitions and an alphabet."""

    id: str = ""
    name: str = "Untitled"
    type: AutomatonType = AutomatonType.NFA
    states: list = field(default_factory=list)
    transitions: list = field(default_factory=list)
    alphabet: set = field(default_factory=set)
    initial_state_id: str = ""

    @property
    def state_count(self) -> int:
        return len(self.states)

    @property
    def transition_count(self) -> int:
        return len(self.transitions)

    # States

    def add_state(self, state: State) -> None:
        """Add ``state``; raise AutomatonError if its id is already used."""
        if self.get_state(state.id) is not None:
            raise AutomatonError(f"State '{state.id}' already exists.")
        self.states.append(state)
        if state.is_initial:
            self.initial_state_id = state.id

    def remove_state(self, state_id: str) -> bool:
        """Remove a state and every transition touching it.

        Returns True if the state existed.
        """
        self.transitions = [
            t for t in self.transitions
            if t.source != state_id and t.target != state_id
        ]
        state = self.get_state(state_id)
        if state is None:
            return False
        if self.initial_state_id == state_id:
            self.initial_state_id = ""
        self.states.remove(state)
        return True

    def get_state(self, state_id: str) -> Optional[State]:
        return next((s for s in self.states if s.id == state_id), None)

    # Transitions

    def check_transition(self, transition: Transition) -> None:
        """Raise AutomatonError if ``transition`` may not be added."""
        if self.get_state(transition.source) is None or self.get_state(transition.target) is None:
            raise AutomatonError("Source or destination state does not exist.")

        if self.type is not AutomatonType.DFA:
            return

        if transition.is_epsilon():
            raise AutomatonError(
                "Cannot add epsilon (E) transition to a DFA!\n\n"
                "This automaton is defined as a DFA (Deterministic Finite Automaton).\n"
                "DFAs cannot have epsilon transitions.\n\n"
                "Solution: Create an NFA instead if you need epsilon transitions."
            )

        for existing in self.transitions_from(transition.source):
            for symbol in sorted(transition.symbols):
                if existing.has_symbol(symbol):
                    raise AutomatonError(
                        "DFA Violation!\n\n"
                        f"State '{transition.source}' already has a transition on symbol "
                        f"'{symbol}' going to state '{existing.target}'.\n\n"
                        "In a DFA, each state can have only ONE transition per symbol.\n\n"
                        "Solution: Create an NFA if you need multiple transitions per symbol."
                    )

    def can_add_transition(self, transition: Transition) -> bool:
        try:
            self.check_transition(transition)
        except AutomatonError:
            return False
        return True

    def add_transition(self, transition: Transition) -> None:
        """Add ``transition``, merging it with an existing one between the same states."""
        self.check_transition(transition)

        existing = next(
            (t for t in self.transitions
             if t.source == transition.source and t.target == transition.target),
            None,
        )
        if existing is not None:
            for symbol in transition.symbols:
                existing.add_symbol(symbol)
        else:
            self.transitions.append(
                Transition(transition.source, transition.target, set(transition.symbols))
            )

        for symbol in transition.symbols:
            self.add_to_alphabet(symbol)

    def remove_transition(self, source: str, target: str, symbol: str = "") -> bool:
        """Remove a symbol (or, with an empty symbol, the whole transition).

        A transition left without symbols is removed. Returns True if a
        transition between ``source`` and ``target`` was found.
        """
        for transition in self.transitions:
            if transition.source == source and transition.target == target:
                if symbol:
                    transition.remove_symbol(symbol)
                    if not transition.symbols:
                        self.transitions.remove(transition)
                else:
                    self.transitions.remove(transition)
                return True
        return False

    def transitions_from(self, state_id: str) -> list:
        return [t for t in self.transitions if t.source == state_id]

    def set_initial_state(self, state_id: str) -> None:
        """Make ``state_id`` the only initial state.

        Every initial flag is cleared first; an unknown id leaves no state
        flagged and the recorded initial id unchanged.
        """
        for state in self.states:
            state.is_initial = False
        state = self.get_state(state_id)
        if state is not None:
            state.is_initial = True
            self.initial_state_id = state_id

    def add_to_alphabet(self, symbol: str) -> None:
        if not is_epsilon_symbol(symbol):
            self.alphabet.add(symbol)

    # Properties

    def is_valid(self) -> bool:
        return (
            bool(self.states)
            and bool(self.initial_state_id)
            and self.get_state(self.initial_state_id) is not None
        )

    def is_dfa(self) -> bool:
        return self.type is AutomatonType.DFA

    def is_nfa(self) -> bool:
        return self.type is AutomatonType.NFA

    def detect_type(self) -> None:
        """Set the type to DFA unless an epsilon or duplicated symbol makes it an NFA."""
        if any(t.is_epsilon() for t in self.transitions):
            self.type = AutomatonType.NFA
            return

        for state in self.states:
            counts = Counter(
                symbol for t in self.transitions_from(state.id) for symbol in t.symbols
            )
            if any(n > 1 for n in counts.values()):
                self.type = AutomatonType.NFA
                return

        self.type = AutomatonType.DFA

    # Simulation

    def _closure_of(self, state_id: str) -> set:
        closure = {state_id}
        queue = deque([state_id])
        while queue:
            current = queue.popleft()
            for t in self.transitions:
                if t.source == current and t.is_epsilon() and t.target not in closure:
                    closure.add(t.target)
                    queue.append(t.target)
        return closure

    def epsilon_closure(self, state_ids: Iterable[str]) -> set:
        """All states reachable from ``state_ids`` through epsilon moves."""
        closure: set = set()
        for state_id in state_ids:
            closure |= self._closure_of(state_id)
        return closure

    def accepts(self, text: str) -> bool:
        """Return True if the automaton accepts ``text``, one symbol per character."""
        if not self.is_valid():
            return False
        if self.type is AutomatonType.DFA:
            return self._accepts_dfa(text)
        return self._accepts_nfa(text)

    def _is_final(self, state_id: str) -> bool:
        state = self.get_state(state_id)
        return state is not None and state.is_final

    def _accepts_dfa(self, text: str) -> bool:
        current = self.initial_state_id
        for symbol in text:
            step = next(
                (t for t in self.transitions
                 if t.source == current and t.has_symbol(symbol)),
                None,
            )
            if step is None:
                return False
            current = step.target
        return self._is_final(current)

    def _accepts_nfa(self, text: str) -> bool:
        current = self.epsilon_closure({self.initial_state_id})
        for symbol in text:
            following = {
                t.target
                for state_id in current
                for t in self.transitions
                if t.source == state_id and t.has_symbol(symbol)
            }
            current = self.epsilon_closure(following)
            if not current:
                return False
        return any(self._is_final(state_id) for state_id in current)

    def clear(self) -> None:
        self.states.clear()
        self.transitions.clear()
        self.alphabet.clear()
        self.initial_state_id = ""