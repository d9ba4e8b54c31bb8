"""Unix-style wildcard patterns.

A `Pattern` is a sequence of parts: literal text, ``?`` (exactly one
character) and ``*`` (any run of characters, possibly empty). Patterns are
immutable values with structural equality; `Pattern.test` performs a
whole-string match.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import cached_property
from typing import AbstractSet, Dict, List, Tuple, Union

from ..constants import ANY_CHAR, ANY_STRING, DEFAULT_ESCAPE, UNIX_WILDCARD_OPERATORS
from ..tokens import Tokenizer, TokenType
from .builders import PatternBuilder, RegexBuilder, UnixWildcardBuilder

__all__ = [
    "Literal",
    "AnyChar",
    "AnyString",
    "Pattern",
    "parse_unix_wildcard",
    "compile_wildcard",
]


@dataclass(frozen=True)
class Literal:
    """Literal text matched verbatim."""

    text: str

    def accept(self, builder: PatternBuilder) -> str:
        return builder.literal(self.text)


@dataclass(frozen=True)
class AnyChar:
    """Matches exactly one character (``?``)."""

    def accept(self, builder: PatternBuilder) -> str:
        return builder.any_char()


@dataclass(frozen=True)
class AnyString:
    """Matches any run of characters, including none (``*``)."""

    def accept(self, builder: PatternBuilder) -> str:
        return builder.any_string()


PatternPart = Union[Literal, AnyChar, AnyString]

_WILDCARD_PARTS: Dict[str, PatternPart] = {
    ANY_CHAR: AnyChar(),
    ANY_STRING: AnyString(),
}


def _normalize(parts: Tuple[PatternPart, ...]) -> Tuple[PatternPart, ...]:
    """Merge adjacent literals, drop empty ones and collapse repeated ``*``."""
    result: List[PatternPart] = []
    for part in parts:
        if isinstance(part, Literal):
            if not part.text:
                continue
            if result and isinstance(result[-1], Literal):
                result[-1] = Literal(result[-1].text + part.text)
                continue
        elif (
            isinstance(part, AnyString)
            and result
            and isinstance(result[-1], AnyString)
        ):
            continue
        result.append(part)
    return tuple(result)


@dataclass(frozen=True)
class Pattern:
    """Compiled wildcard expression.

    Attributes:
        parts: Normalized sequence of pattern parts. Equivalent spellings
            (``a**b`` and ``a*b``) normalize to equal patterns.
    """

    parts: Tuple[PatternPart, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "parts", _normalize(tuple(self.parts)))

    @classmethod
    def literal(cls, text: str) -> "Pattern":
        """Return a pattern that matches exactly ``text``."""
        return cls((Literal(text),))

    @cached_property
    def _regex(self) -> "re.Pattern[str]":
        return re.compile(self.build(RegexBuilder()), re.DOTALL)

    def test(self, candidate: str) -> bool:
        """Return True if the whole of ``candidate`` matches this pattern."""
        return self._regex.fullmatch(candidate) is not None

    def equals(self, other: object) -> bool:
        """Structural equality; same as ``==``."""
        return isinstance(other, Pattern) and self.parts == other.parts

    def is_literal(self) -> bool:
        """Return True if the pattern contains no wildcards."""
        return all(isinstance(part, Literal) for part in self.parts)

    def build(self, builder: PatternBuilder):
        """Render the pattern with ``builder``."""
        return builder.finish([part.accept(builder) for part in self.parts])

    def __str__(self) -> str:
        return self.build(UnixWildcardBuilder(DEFAULT_ESCAPE, UNIX_WILDCARD_OPERATORS))


def parse_unix_wildcard(
    tokenizer: Tokenizer,
    operators: AbstractSet[str] = UNIX_WILDCARD_OPERATORS,
) -> Pattern:
    """Read one wildcard pattern from ``tokenizer``.

    Consumes literal tokens and wildcard operator tokens. Stops without
    consuming at the first operator that is not a wildcard in ``operators``
    (for example a path delimiter), or at end of input.

    Args:
        tokenizer: Token cursor positioned at the start of the pattern.
        operators: Wildcard characters to recognise.

    Returns:
        The parsed pattern (possibly empty).
    """
    parts: List[PatternPart] = []
    while tokenizer.current is not None:
        token = tokenizer.current
        if token.type is TokenType.LITERAL:
            parts.append(Literal(token.data))
        elif token.data in operators and token.data in _WILDCARD_PARTS:
            parts.append(_WILDCARD_PARTS[token.data])
        else:
            break
        tokenizer.next()
    return Pattern(tuple(parts))


def compile_wildcard(text: str, escape: str = DEFAULT_ESCAPE) -> Pattern:
    """Compile a standalone wildcard string such as ``"gr*"`` into a Pattern."""
    return parse_unix_wildcard(Tokenizer(text, escape, UNIX_WILDCARD_OPERATORS))
