"""Wildcard pattern engine.

Usage:
    from matrixpath.pattern import compile_wildcard

    pattern = compile_wildcard("gr*")
    pattern.test("green")  # True
"""

from .builders import (
    PatternBuilder,
    RegexBuilder,
    SimplePatternBuilder,
    UnixWildcardBuilder,
)
from .wildcard import (
    AnyChar,
    AnyString,
    Literal,
    Pattern,
    compile_wildcard,
    parse_unix_wildcard,
)

__all__ = [
    # Model
    "Pattern",
    "Literal",
    "AnyChar",
    "AnyString",
    # Parsing
    "parse_unix_wildcard",
    "compile_wildcard",
    # Rendering
    "PatternBuilder",
    "UnixWildcardBuilder",
    "SimplePatternBuilder",
    "RegexBuilder",
]
