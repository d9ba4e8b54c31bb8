"""Matrix path elements.

A matrix element is a segment such as ``def;version=2;color=green;draft``:
a name plus an ordered mapping of attribute names to values. A value of None
marks a bare flag (``draft`` above), which is distinct from an attribute that
is not present at all.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import AbstractSet, Any, Dict, Generic, List, Mapping, Optional, TypeVar

from ..constants import (
    ATTRIBUTE_DELIMITER,
    DEFAULT_ESCAPE,
    MATRIX_PATH_OPERATORS,
    MATRIX_PATTERN_OPERATORS,
    VALUE_DELIMITER,
)
from ..escaping import escape_string
from ..pattern import Pattern, UnixWildcardBuilder

__all__ = [
    "AttributeState",
    "PathElement",
    "MatrixElement",
    "MatrixElementPattern",
]

T = TypeVar("T")


class AttributeState(Enum):
    """How an attribute appears on an element."""

    ABSENT = "absent"
    FLAG = "flag"
    VALUED = "valued"


class PathElement(Generic[T]):
    """Name plus ordered attributes.

    Attributes:
        name: Element name.
        attrs: Read-only view of the attributes; None values are bare flags.
    """

    __slots__ = ("_name", "_attrs")

    def __init__(
        self, name: T, attrs: Optional[Mapping[str, Optional[T]]] = None
    ) -> None:
        """Create an element.

        Raises:
            ValueError: If an attribute key is empty; it could not be written
                back in matrix syntax.
        """
        self._name = name
        self._attrs: Dict[str, Optional[T]] = dict(attrs) if attrs else {}
        if "" in self._attrs:
            raise ValueError("attribute keys must be non-empty")

    @property
    def name(self) -> T:
        return self._name

    @property
    def attrs(self) -> Mapping[str, Optional[T]]:
        return MappingProxyType(self._attrs)

    def attr_state(self, key: str) -> AttributeState:
        """Return whether ``key`` is absent, a bare flag, or has a value."""
        if key not in self._attrs:
            return AttributeState.ABSENT
        if self._attrs[key] is None:
            return AttributeState.FLAG
        return AttributeState.VALUED

    def equals(self, other: Any) -> bool:
        """Equal names and equal attribute mappings (order-insensitive)."""
        if other is self:
            return True
        if not isinstance(other, PathElement):
            return False
        return self._name == other.name and self._attrs == other._attrs

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathElement):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self._name, frozenset(self._attrs.items())))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r}, {self._attrs!r})"


class MatrixElement(PathElement[str]):
    """Concrete element with string name and attribute values."""

    __slots__ = ()

    def to_string(
        self,
        escape: str = DEFAULT_ESCAPE,
        operators: AbstractSet[str] = MATRIX_PATH_OPERATORS,
    ) -> str:
        """Render as ``name;key=value;flag`` with reserved characters escaped."""
        parts = [escape_string(self.name, escape, operators)]
        for key, value in self._attrs.items():
            item = escape_string(key, escape, operators)
            if value is not None:
                item += VALUE_DELIMITER + escape_string(value, escape, operators)
            parts.append(item)
        return ATTRIBUTE_DELIMITER.join(parts)

    def __str__(self) -> str:
        return self.to_string()


class MatrixElementPattern(PathElement[Pattern]):
    """Element whose name and attribute values are wildcard patterns.

    Also a predicate over `MatrixElement`: see `test`.
    """

    __slots__ = ()

    def test(self, target: PathElement[str]) -> bool:
        """Return True if ``target`` satisfies this pattern.

        The name pattern must match the target name, and every attribute named
        here must match the same attribute on the target. A bare-flag
        attribute only matches a bare flag. Target attributes not named here
        are ignored.
        """
        if not self.name.test(target.name):
            return False
        for key, pattern in self._attrs.items():
            state = target.attr_state(key)
            if pattern is None:
                if state is not AttributeState.FLAG:
                    return False
            elif state is not AttributeState.VALUED:
                return False
            elif not pattern.test(target.attrs[key]):  # type: ignore[arg-type]
                return False
        return True

    def to_string(
        self,
        escape: str = DEFAULT_ESCAPE,
        operators: AbstractSet[str] = MATRIX_PATTERN_OPERATORS,
    ) -> str:
        """Render in the wildcard matrix syntax read by `MatrixPathPattern`."""
        builder = UnixWildcardBuilder(escape, operators)
        parts: List[str] = [self.name.build(builder)]
        for key, value in self._attrs.items():
            item = escape_string(key, escape, builder.operators)
            if value is not None:
                item += VALUE_DELIMITER + value.build(builder)
            parts.append(item)
        return ATTRIBUTE_DELIMITER.join(parts)

    def __str__(self) -> str:
        return self.to_string()
