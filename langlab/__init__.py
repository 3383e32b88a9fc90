"""Finite automata, grammars, parse trees, AST nodes and symbol tables for compiler construction."""

__version__ = "1.0.0"