"""Generic immutable path container and its wildcard-pattern variant.

`Path` stores an ordered tuple of elements and never changes after
construction. Every derivation (`tail`, `parent`, `slice`, `add`, ...) builds
a new instance through `_create_path`, which instantiates ``type(self)``, so
subclasses such as `PatternPath` or `MatrixPath` keep their own class across
all structural operations.

Examples:
    >>> path = Path.parse("a/b/c")
    >>> path.head(), str(path.tail())
    ("a", "b/c")
    >>> path.matches(PatternPath.parse("a/*/?"))
    True
"""

from __future__ import annotations

from typing import (
    AbstractSet,
    Any,
    Callable,
    Generic,
    Iterable,
    Iterator,
    Optional,
    Protocol,
    Tuple,
    Type,
    TypeVar,
    Union,
    overload,
)

from .constants import (
    DEFAULT_ESCAPE,
    DEFAULT_PATH_OPERATORS,
    DEFAULT_PATTERN_OPERATORS,
    PATH_DELIMITER,
)
from .escaping import escape_string
from .logging import get_logger
from .pattern import Pattern, UnixWildcardBuilder, parse_unix_wildcard
from .tokens import Tokenizer, TokenType, tokenize

__all__ = [
    "Predicate",
    "Path",
    "PatternPath",
]

logger = get_logger(__name__)

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)
P = TypeVar("P", bound="Path[Any]")


class Predicate(Protocol[T_contra]):
    """Anything with a ``test`` method, e.g. `Pattern` or `MatrixElementPattern`."""

    def test(self, value: T_contra) -> bool: ...


def _apply(predicate: Union[Predicate[T], Callable[[T], bool]], value: T) -> bool:
    test = getattr(predicate, "test", None)
    if test is not None:
        return bool(test(value))
    return bool(predicate(value))  # type: ignore[operator]


class Path(Generic[T]):
    """Immutable ordered sequence of path elements.

    Subclasses must accept a single iterable of elements in their constructor;
    `_create_path` relies on it to preserve the concrete type.
    """

    __slots__ = ("_elements",)

    def __init__(self, elements: Optional[Iterable[T]] = None) -> None:
        self._elements: Tuple[T, ...] = tuple(elements) if elements is not None else ()

    @classmethod
    def of(cls: Type[P], *elements: Any) -> P:
        """Build a path from the given elements."""
        return cls(elements)

    @classmethod
    def parse(cls: Type[P], text: str, escape: str = DEFAULT_ESCAPE) -> P:
        """Parse a ``/``-delimited string.

        Each escape-resolved literal run between unescaped delimiters becomes
        one element. Empty segments are absorbed, so ``""`` yields an empty path
        and ``"a//b"`` yields two elements.

        Args:
            text: Path string.
            escape: Escape character.

        Returns:
            A new path of type ``cls``.
        """
        elements = [
            token.data
            for token in tokenize(text, escape, DEFAULT_PATH_OPERATORS)
            if token.type is TokenType.LITERAL
        ]
        logger.debug("Parsed %d element(s) from %r", len(elements), text)
        return cls(elements)

    @staticmethod
    def is_path(obj: Any) -> bool:
        """Return True if ``obj`` is a Path of any kind."""
        return isinstance(obj, Path)

    def _create_path(self: P, elements: Iterable[Any]) -> P:
        return type(self)(elements)

    def _compare_elements(self, a: T, b: T) -> bool:
        return a == b

    # Sequence interface

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[T]:
        return iter(self._elements)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self: P, index: slice) -> P: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._create_path(self._elements[index])
        return self._elements[index]

    def element(self, index: int) -> T:
        """Return the element at ``index``."""
        return self._elements[index]

    def is_empty(self) -> bool:
        return not self._elements

    # Head/tail access

    def head(self) -> T:
        """Return the first element.

        Raises:
            IndexError: If the path is empty. Check `is_empty` first.
        """
        if not self._elements:
            raise IndexError("head() of an empty path")
        return self._elements[0]

    def last(self) -> T:
        """Return the last element.

        Raises:
            IndexError: If the path is empty. Check `is_empty` first.
        """
        if not self._elements:
            raise IndexError("last() of an empty path")
        return self._elements[-1]

    def tail(self: P) -> P:
        """Return all but the first element; empty stays empty."""
        return self._create_path(self._elements[1:])

    def parent(self: P) -> P:
        """Return all but the last element; empty stays empty."""
        return self._create_path(self._elements[:-1])

    def consume(self: P, count: int) -> P:
        """Drop the first ``count`` elements."""
        return self._create_path(self._elements[max(count, 0) :])

    def slice(self: P, begin: int, end: Optional[int] = None) -> P:
        """Return the half-open range ``[begin, end)``, clamped to the path."""
        return self._create_path(self._elements[begin:end])

    # Derivations

    def add(self: P, *elements: T) -> P:
        return self._create_path(self._elements + elements)

    def add_all(self: P, path: Iterable[T]) -> P:
        return self._create_path(self._elements + tuple(path))

    def prepend(self: P, element: T) -> P:
        return self._create_path((element,) + self._elements)

    # Comparison

    def _aligned(self, other: "Path[T]", offset: int) -> bool:
        return all(
            self._compare_elements(value, self._elements[index + offset])
            for index, value in enumerate(other)
        )

    def equals(self, other: "Path[T]") -> bool:
        """Return True if both paths have pairwise equal elements."""
        if other is self:
            return True
        return len(self) == len(other) and self._aligned(other, 0)

    def starts_with(self, prefix: "Path[T]") -> bool:
        """Return True if ``prefix`` matches the leading elements of this path."""
        return len(self) >= len(prefix) and self._aligned(prefix, 0)

    def ends_with(self, suffix: "Path[T]") -> bool:
        """Return True if ``suffix`` matches the trailing elements of this path."""
        offset = len(self) - len(suffix)
        return offset >= 0 and self._aligned(suffix, offset)

    def matches(
        self, patterns: Iterable[Union[Predicate[T], Callable[[T], bool]]]
    ) -> bool:
        """Test each element against the predicate at the same position.

        A pattern path of a different length never matches; there is no
        wildcard that spans several segments.

        Args:
            patterns: Path (or other sized iterable) of predicates. Objects with
                a ``test`` method are called through it; plain callables are
                called directly.

        Returns:
            True if the lengths agree and every predicate accepts its element.
        """
        predicates = tuple(patterns)
        if len(predicates) != len(self._elements):
            return False
        return all(_apply(p, value) for p, value in zip(predicates, self._elements))

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Return the first element accepted by ``predicate``, or None."""
        return next((value for value in self._elements if predicate(value)), None)

    def find_index(self, predicate: Callable[[T], bool]) -> int:
        """Return the index of the first accepted element, or -1."""
        return next(
            (index for index, value in enumerate(self._elements) if predicate(value)),
            -1,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self._elements)

    # Rendering

    def to_string(
        self,
        escape: str = DEFAULT_ESCAPE,
        operators: AbstractSet[str] = DEFAULT_PATH_OPERATORS,
    ) -> str:
        """Render the path; the inverse of `parse` for the same configuration."""
        return PATH_DELIMITER.join(
            escape_string(str(value), escape, operators) for value in self._elements
        )

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._elements)!r})"


class PatternPath(Path[Pattern]):
    """Path whose elements are wildcard patterns, one per segment.

    Used as the argument of `Path.matches`::

        Path.parse("usr/lib/x.so").matches(PatternPath.parse("usr/*/*.so"))
    """

    __slots__ = ()

    @classmethod
    def parse(cls: Type[P], text: str, escape: str = DEFAULT_ESCAPE) -> P:
        """Parse ``/``-delimited wildcard segments (``*`` and ``?``)."""
        tokenizer = Tokenizer(text, escape, DEFAULT_PATTERN_OPERATORS)
        elements = []
        while tokenizer.current is not None:
            if tokenizer.current.is_operator(PATH_DELIMITER):
                tokenizer.next()
                continue
            elements.append(parse_unix_wildcard(tokenizer))
        logger.debug("Parsed %d pattern element(s) from %r", len(elements), text)
        return cls(elements)

    def _compare_elements(self, a: Pattern, b: Pattern) -> bool:
        return a.equals(b)

    def to_string(
        self,
        escape: str = DEFAULT_ESCAPE,
        operators: AbstractSet[str] = DEFAULT_PATTERN_OPERATORS,
    ) -> str:
        builder = UnixWildcardBuilder(escape, operators)
        return PATH_DELIMITER.join(value.build(builder) for value in self._elements)
