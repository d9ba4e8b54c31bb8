"""Renderers that turn a `Pattern` back into text.

Each builder receives the pattern parts one at a time and joins the pieces
in `finish`.
"""

from __future__ import annotations

import re
from typing import AbstractSet, List, Protocol

from ..constants import ANY_CHAR, ANY_STRING, UNIX_WILDCARD_OPERATORS
from ..escaping import escape_string

__all__ = [
    "PatternBuilder",
    "UnixWildcardBuilder",
    "SimplePatternBuilder",
    "RegexBuilder",
]


class PatternBuilder(Protocol):
    """Visitor interface used by `Pattern.build`."""

    def literal(self, text: str) -> str: ...

    def any_char(self) -> str: ...

    def any_string(self) -> str: ...

    def finish(self, pieces: List[str]) -> str: ...


class UnixWildcardBuilder:
    """Render wildcard syntax that `parse_unix_wildcard` reads back.

    Literal text is escaped against ``operators`` plus the wildcard
    characters, so a literal ``*`` never turns into a wildcard.

    With an empty ``escape`` nothing can be escaped: literal ``*``, ``?`` and
    operator characters are written as is and read back as wildcards or
    operators. Patterns with such literals only round-trip with an escape
    character.
    """

    def __init__(self, escape: str, operators: AbstractSet[str]) -> None:
        self.escape = escape
        self.operators = frozenset(operators) | UNIX_WILDCARD_OPERATORS

    def literal(self, text: str) -> str:
        return escape_string(text, self.escape, self.operators)

    def any_char(self) -> str:
        return ANY_CHAR

    def any_string(self) -> str:
        return ANY_STRING

    def finish(self, pieces: List[str]) -> str:
        return "".join(pieces)


class SimplePatternBuilder:
    """Render a pattern as plain unescaped text (used for attribute keys)."""

    def literal(self, text: str) -> str:
        return text

    def any_char(self) -> str:
        return ANY_CHAR

    def any_string(self) -> str:
        return ANY_STRING

    def finish(self, pieces: List[str]) -> str:
        return "".join(pieces)


class RegexBuilder:
    """Render a pattern as regular expression source for full matching."""

    def literal(self, text: str) -> str:
        return re.escape(text)

    def any_char(self) -> str:
        return "."

    def any_string(self) -> str:
        return ".*"

    def finish(self, pieces: List[str]) -> str:
        return "".join(pieces)
