"""Escaping codec: render a value so that it re-tokenizes to itself."""

from __future__ import annotations

from typing import AbstractSet

from .tokens import TokenType, tokenize

__all__ = ["escape_string"]


def escape_string(value: str, escape: str, operators: AbstractSet[str]) -> str:
    r"""Escape every reserved character in ``value``.

    The value is tokenized with escaping disabled and ``operators`` plus the
    escape character itself as the operator set. Literal runs are emitted as
    is and every operator character is prefixed with ``escape``. Tokenizing
    the result with the same ``escape`` and ``operators`` yields ``value`` as a
    single literal.

    Args:
        value: Raw text.
        escape: Escape character. An empty string disables escaping.
        operators: Characters that must not appear unescaped.

    Returns:
        The escaped text.

    Examples:
        >>> escape_string("a/b", "\\", {"/"})
        "a\\/b"
    """
    if not escape:
        return value
    reserved = frozenset(operators) | {escape}
    return "".join(
        escape + token.data if token.type is TokenType.OPERATOR else token.data
        for token in tokenize(value, "", reserved)
    )
