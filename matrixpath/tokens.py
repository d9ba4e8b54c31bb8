r"""Character tokenizer for escapable, operator-delimited strings.

Splits text into literal runs and single-character operator tokens. Escapes
are resolved while scanning, so literal tokens carry the decoded text.

Examples:
    >>> [t.data for t in tokenize("a\\/b/c", "\\", {"/"})]
    ["a/b", "/", "c"]
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import AbstractSet, Iterator, List, Optional

__all__ = [
    "TokenType",
    "Token",
    "tokenize",
    "Tokenizer",
]


class TokenType(Enum):
    """Classification of a token."""

    LITERAL = "literal"
    OPERATOR = "operator"


@dataclass(frozen=True)
class Token:
    """A single token.

    Attributes:
        type: Literal run or operator.
        data: Decoded text for literals; the operator character otherwise.
    """

    type: TokenType
    data: str

    def is_operator(self, char: Optional[str] = None) -> bool:
        """Return True if this is an operator token (optionally a specific one)."""
        if self.type is not TokenType.OPERATOR:
            return False
        return char is None or self.data == char


def tokenize(text: str, escape: str, operators: AbstractSet[str]) -> Iterator[Token]:
    """Yield literal and operator tokens from ``text``.

    An escape character makes the following character literal, whatever it
    is. An escape at the very end of the input is kept as a literal. An empty
    ``escape`` disables escaping. Literal tokens are never empty.

    Args:
        text: Input string.
        escape: Escape character, or ``""`` for none.
        operators: Characters that are yielded as operator tokens when unescaped.

    Yields:
        Tokens in input order.
    """
    run: List[str] = []
    chars = iter(text)
    for char in chars:
        if escape and char == escape:
            run.append(next(chars, escape))
        elif char in operators:
            if run:
                yield Token(TokenType.LITERAL, "".join(run))
                run = []
            yield Token(TokenType.OPERATOR, char)
        else:
            run.append(char)
    if run:
        yield Token(TokenType.LITERAL, "".join(run))


class Tokenizer:
    """Cursor over `tokenize` with one token of look-ahead.

    ``current`` is the token under the cursor, or None once the input is
    exhausted.
    """

    def __init__(self, text: str, escape: str, operators: AbstractSet[str]) -> None:
        self._tokens = tokenize(text, escape, operators)
        self.current: Optional[Token] = next(self._tokens, None)

    def next(self) -> Optional[Token]:
        """Advance the cursor and return the new current token."""
        self.current = next(self._tokens, None)
        return self.current
