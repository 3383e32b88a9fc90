# langlab

A small library for experimenting with the building blocks of a compiler:
finite automata, context-free grammars, parse trees, abstract syntax trees
and scoped symbol tables. It has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Finite automata

`langlab.automaton.Automaton` holds `langlab.state.State` and
`langlab.transition.Transition` objects and is either a DFA or an NFA
(`AutomatonType`). `add_state` raises `AutomatonError` for a state id that is
already used. Adding a transition that breaks determinism in a DFA is
refused: `check_transition` (and so `add_transition`) raises `AutomatonError`
with an explanation, while `can_add_transition` answers with a boolean. A
transition between two states that are already joined is merged into the
existing one.

```python
from langlab.automaton import Automaton, AutomatonType
from langlab.state import State
from langlab.transition import Transition

dfa = Automaton("a1", "ends in b", AutomatonType.DFA)
dfa.add_state(State("q0"))
dfa.add_state(State("q1"))
dfa.set_initial_state("q0")
dfa.get_state("q1").is_final = True

dfa.add_transition(Transition("q0", "q0", "a"))
dfa.add_transition(Transition("q0", "q1", "b"))
dfa.add_transition(Transition("q1", "q1", "b"))
dfa.add_transition(Transition("q1", "q0", "a"))

dfa.accepts("aab")   # True
dfa.accepts("aba")   # False
```

`accepts` reads its input one character per symbol and returns False for an
automaton without a valid initial state (`is_valid`). Epsilon transitions are
written with the symbol `E` (`ε`, `epsilon` and the empty string count too;
see `is_epsilon_symbol`). They are allowed only in an NFA, whose acceptance
runs over the epsilon closure of the current state set (`epsilon_closure`).
Epsilon symbols are never added to the `alphabet`. `detect_type` reclassifies
an automaton as an NFA if it has an epsilon transition or a state with two
moves on one symbol, and as a DFA otherwise.

## Grammars and parse trees

`langlab.production.parse_production` reads rules written as `A -> B c` or
`A → B c` and raises `ValueError` for text without exactly one arrow or
without a left-hand side; an empty right-hand side becomes `ε`.
`langlab.grammar.Grammar` collects productions and sorts their symbols into
terminals and non-terminals: a symbol starting with an upper-case letter is a
non-terminal. `remove_production` raises `IndexError` for an index out of
range. Three ready-made grammars are available: `arithmetic_grammar()`,
`simple_statement_grammar()` and `expression_grammar()`.

```python
from langlab.grammar import expression_grammar
from langlab.production import parse_production

g = expression_grammar()
g.add_production(parse_production("F -> num"))
[str(p) for p in g.productions_for("F")]
# ['F → ( E )', 'F → id', 'F → num']
```

`langlab.parse_tree.ParseTree` and `ParseTreeNode` describe a derivation and
`render` it as indented text. `langlab.tree_layout.TreeLayout` places the
nodes for drawing (leaves side by side, each parent centred over its
children): `compute` fills `positions` and `bounds` and returns the canvas
size, and `edges` lists the parent-to-child line segments. `max_depth` and
`count_leaves` measure a tree.

## Drawing and editing automata

`langlab.canvas_geometry` provides the geometry for drawing an automaton:
`edge_point`, `arrow_head`, `cubic_bezier_point`, `curved_transition` for two
states joined in both directions (`has_reverse_transition`), hit testing with
`state_at`, and `next_state_id` for naming new states `q0`, `q1`, ...

`langlab.canvas_editor.CanvasEditor` is the editing logic of an automaton
canvas, free of any drawing toolkit. It takes pointer events (`press`,
`move`, `release`) in canvas coordinates and acts according to its `DrawMode`:
selecting and dragging states, adding states, drawing transitions (completed
with `finish_transition` or dropped with `cancel_transition`) and deleting
states. `toggle_initial`, `toggle_final` and `edit_state` change state
properties, and `set_active_states` / `set_active_transitions` mark what a
simulation step highlights; `state_style` says how a state is to be drawn.
Changes are reported through an optional `on_event(name, *args)` callback.

## Semantic analysis

`langlab.symbol_table.SymbolTable` is a scoped symbol table with
`enter_scope`, `exit_scope`, `add_symbol` (which raises `ValueError` for a
name already declared in the current scope), `update_symbol` (which raises
`KeyError` for an undeclared name) and `lookup`. Every symbol added is kept
in `discovered_symbols`. `string_to_type` and `type_to_string` convert
between type names and `SymbolType`.

`langlab.ast_node.ASTNode` is an abstract syntax tree node with parent links,
an indented text rendering (`render`) and `dump`, which prints it.

## What it does not do

langlab is a library only. It has no lexer and no parser: parse trees, ASTs
and symbol tables are built by the calling code. It draws nothing on screen,
has no graphical interface and no command-line program, and it does not save
or load automata or grammars.