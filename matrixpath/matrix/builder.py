"""State machine that assembles matrix elements from a token stream.

The builder is fed literal values and the structural operators ``/``, ``;``
and ``=`` in input order. The last operator seen decides what the next value
is:

- ``/`` (and the start of input): a new element name
- ``;``: an attribute key
- ``=``: the value for the pending attribute key

A key followed by ``=`` and no value (``a;k=``) gets the empty value, so it stays
distinct from the bare flag ``a;k``. Consecutive operators with no value
between them are absorbed, so ``a//b`` and ``a;;b`` never produce empty names
or keys.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Generic, List, Mapping, Optional, TypeVar

from ..constants import ATTRIBUTE_DELIMITER, PATH_DELIMITER, VALUE_DELIMITER
from ..errors import PathSyntaxError
from .element import PathElement

__all__ = [
    "BuilderState",
    "MatrixPathBuilder",
]

T = TypeVar("T")
E = TypeVar("E", bound=PathElement)


class BuilderState(Enum):
    """What the next literal value will be used for."""

    EXPECT_NAME = PATH_DELIMITER
    EXPECT_ATTR_KEY = ATTRIBUTE_DELIMITER
    EXPECT_ATTR_VALUE = VALUE_DELIMITER


class MatrixPathBuilder(Generic[T, E]):
    """Collect matrix elements from interleaved values and operators.

    Args:
        element_factory: Called as ``element_factory(name, attrs)`` for every
            finished element.
        key_of: Converts a raw value into an attribute key string.
        empty_value: Value stored for a key written as ``key=`` with nothing
            after the ``=``.
    """

    def __init__(
        self,
        element_factory: Callable[[T, Mapping[str, Optional[T]]], E],
        key_of: Callable[[T], str],
        empty_value: T,
    ) -> None:
        self._element_factory = element_factory
        self._key_of = key_of
        self._empty_value = empty_value
        self._elements: List[E] = []
        self._name: Optional[T] = None
        self._attrs: Dict[str, Optional[T]] = {}
        self._attr_key: Optional[str] = None
        self._value_pending = False
        self.state = BuilderState.EXPECT_NAME

    def add_operator(self, operator: str) -> None:
        """Record a structural operator.

        Raises:
            ValueError: If ``operator`` is not ``/``, ``;`` or ``=``.
        """
        self.state = BuilderState(operator)
        if self.state is BuilderState.EXPECT_ATTR_VALUE and self._attr_key is not None:
            self._value_pending = True

    def add_value(self, value: T) -> None:
        """Consume one literal value according to the current state.

        Raises:
            PathSyntaxError: If a value follows ``=`` with no pending key.
        """
        if self.state is BuilderState.EXPECT_ATTR_VALUE:
            if self._attr_key is None:
                raise PathSyntaxError("unexpected '='")
            self._attrs[self._attr_key] = value
            self._attr_key = None
            self._value_pending = False
        elif self.state is BuilderState.EXPECT_ATTR_KEY:
            self._commit_key()
            self._attr_key = self._key_of(value)
        elif self.state is BuilderState.EXPECT_NAME:
            self._finish_element()
            self._name = value

    def build(self) -> List[E]:
        """Flush pending state and return the finished elements."""
        self._finish_element()
        return list(self._elements)

    def _commit_key(self) -> None:
        if self._attr_key is not None:
            self._attrs[self._attr_key] = (
                self._empty_value if self._value_pending else None
            )
            self._attr_key = None
        self._value_pending = False

    def _finish_element(self) -> None:
        # Attributes seen before any element name are dropped
        self._commit_key()
        if self._name is not None:
            self._elements.append(self._element_factory(self._name, self._attrs))
        self._name = None
        self._attrs = {}
