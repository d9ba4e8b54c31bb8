"""Matrix paths: ``name;key=value`` segments separated by ``/``.

`MatrixPath` holds concrete `MatrixElement` values; `MatrixPathPattern` holds
`MatrixElementPattern` predicates parsed from the same syntax with ``*`` and
``?`` wildcards. Both are built by `MatrixPathBuilder` and differ only in how a
raw value is read and turned into an attribute key.

Examples:
    >>> path = MatrixPath.parse("abc;version=1/def;version=2;color=green/xyz")
    >>> path.element(1).attrs["color"]
    "green"
    >>> path.matches(MatrixPathPattern.parse("abc/def;color=gr*/x?z"))
    True
"""

from __future__ import annotations

from typing import AbstractSet, List, Type, TypeVar

from ..constants import (
    DEFAULT_ESCAPE,
    MATRIX_PATH_OPERATORS,
    MATRIX_PATTERN_OPERATORS,
    PATH_DELIMITER,
)
from ..errors import PathSyntaxError
from ..logging import get_logger
from ..path import Path
from ..pattern import Pattern, SimplePatternBuilder, parse_unix_wildcard
from ..tokens import Tokenizer, TokenType, tokenize
from .builder import MatrixPathBuilder
from .element import MatrixElement, MatrixElementPattern

__all__ = [
    "MatrixPath",
    "MatrixPathPattern",
]

logger = get_logger(__name__)

M = TypeVar("M", bound="MatrixPath")
MP = TypeVar("MP", bound="MatrixPathPattern")


class MatrixPath(Path[MatrixElement]):
    """Path of `MatrixElement` values."""

    __slots__ = ()

    @classmethod
    def parse(cls: Type[M], text: str, escape: str = DEFAULT_ESCAPE) -> M:
        """Parse a matrix path string.

        ``/``, ``;`` and ``=`` are reserved and must be escaped to appear in a
        name, key or value. An attribute with no ``=`` is a bare flag;
        ``key=`` with nothing after it has the empty value.

        Raises:
            PathSyntaxError: On a value after ``=`` with no attribute key.
        """
        builder: MatrixPathBuilder[str, MatrixElement] = MatrixPathBuilder(
            MatrixElement, str, ""
        )
        try:
            for token in tokenize(text, escape, MATRIX_PATH_OPERATORS):
                if token.type is TokenType.LITERAL:
                    builder.add_value(token.data)
                else:
                    builder.add_operator(token.data)
        except PathSyntaxError as exc:
            logger.debug("Rejected matrix path %r: %s", text, exc)
            raise PathSyntaxError(str(exc), text) from None
        elements = builder.build()
        logger.debug("Parsed %d matrix element(s) from %r", len(elements), text)
        return cls(elements)

    def to_string(
        self,
        escape: str = DEFAULT_ESCAPE,
        operators: AbstractSet[str] = MATRIX_PATH_OPERATORS,
    ) -> str:
        """Render the path; bare flags are written as ``;key``."""
        return PATH_DELIMITER.join(
            element.to_string(escape, operators) for element in self._elements
        )


class MatrixPathPattern(Path[MatrixElementPattern]):
    """Path of `MatrixElementPattern` predicates, for `MatrixPath.matches`."""

    __slots__ = ()

    @classmethod
    def parse(cls: Type[MP], text: str, escape: str = DEFAULT_ESCAPE) -> MP:
        """Parse a wildcard matrix path such as ``abc;version=?/def*``.

        Raises:
            PathSyntaxError: On a value after ``=`` with no attribute key.
        """
        key_builder = SimplePatternBuilder()
        builder: MatrixPathBuilder[Pattern, MatrixElementPattern]
        builder = MatrixPathBuilder(
            MatrixElementPattern,
            lambda pattern: pattern.build(key_builder),
            Pattern(),
        )
        tokenizer = Tokenizer(text, escape, MATRIX_PATTERN_OPERATORS)
        try:
            while tokenizer.current is not None:
                token = tokenizer.current
                if token.is_operator() and token.data in MATRIX_PATH_OPERATORS:
                    builder.add_operator(token.data)
                    tokenizer.next()
                else:
                    builder.add_value(parse_unix_wildcard(tokenizer))
        except PathSyntaxError as exc:
            logger.debug("Rejected matrix pattern %r: %s", text, exc)
            raise PathSyntaxError(str(exc), text) from None
        elements: List[MatrixElementPattern] = builder.build()
        logger.debug(
            "Parsed %d matrix pattern element(s) from %r", len(elements), text
        )
        return cls(elements)

    def to_string(
        self,
        escape: str = DEFAULT_ESCAPE,
        operators: AbstractSet[str] = MATRIX_PATTERN_OPERATORS,
    ) -> str:
        return PATH_DELIMITER.join(
            element.to_string(escape, operators) for element in self._elements
        )
