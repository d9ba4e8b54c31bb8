"""matrixpath: escapable paths, matrix parameters and wildcard matching.

A path is an immutable sequence of elements parsed from a ``/``-delimited
string in which reserved characters are escaped with a backslash. Matrix paths
add ``;key=value`` attributes to each segment, and the pattern variants accept
``*`` and ``?`` wildcards for whole-path matching.

Primary API:
    Path, PatternPath - plain string paths and their wildcard patterns
    MatrixPath, MatrixPathPattern - matrix paths and their wildcard patterns
    MatrixElement, MatrixElementPattern - matrix path elements
    escape_string() - render a value so that it parses back unchanged

Example:
    from matrixpath import MatrixPath, MatrixPathPattern

    path = MatrixPath.parse("abc;version=1/def;version=2;color=green/xyz")
    path.element(1).attrs["version"]  # "2"
    path.matches(MatrixPathPattern.parse("abc;version=?/def*;color=gr*/xyz"))
    str(path)  # "abc;version=1/def;version=2;color=green/xyz"
"""

from __future__ import annotations

from matrixpath import cli, logging
from matrixpath._version import __version__
from matrixpath.config import DEFAULT_SYNTAX, SyntaxConfig
from matrixpath.errors import PathSyntaxError
from matrixpath.escaping import escape_string
from matrixpath.matrix import (
    AttributeState,
    MatrixElement,
    MatrixElementPattern,
    MatrixPath,
    MatrixPathPattern,
    PathElement,
)
from matrixpath.path import Path, PatternPath, Predicate
from matrixpath.pattern import Pattern, compile_wildcard
from matrixpath.tokens import Token, TokenType, tokenize

__all__ = [
    # Version
    "__version__",
    # Paths
    "Path",
    "PatternPath",
    "MatrixPath",
    "MatrixPathPattern",
    "Predicate",
    # Elements
    "PathElement",
    "MatrixElement",
    "MatrixElementPattern",
    "AttributeState",
    # Patterns
    "Pattern",
    "compile_wildcard",
    # Tokens and escaping
    "Token",
    "TokenType",
    "tokenize",
    "escape_string",
    # Configuration and errors
    "SyntaxConfig",
    "DEFAULT_SYNTAX",
    "PathSyntaxError",
    # Utilities
    "cli",
    "logging",
]
