[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "langlab"
version = "1.0.0"
description = "Finite automata, context-free grammars, parse trees and symbol tables for teaching compiler construction"
requires-python = ">=3.10"
dependencies = []
keywords = ["automata", "dfa", "nfa", "grammar", "parse tree", "symbol table", "compilers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["langlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
