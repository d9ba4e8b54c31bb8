"""Reserved characters and operator sets used by the path parsers.

Operator sets are frozensets so they can be shared freely and combined with
``|`` without risk of mutation.
"""

from __future__ import annotations

from typing import FrozenSet

__all__ = [
    "DEFAULT_ESCAPE",
    "PATH_DELIMITER",
    "ATTRIBUTE_DELIMITER",
    "VALUE_DELIMITER",
    "ANY_CHAR",
    "ANY_STRING",
    "UNIX_WILDCARD_OPERATORS",
    "DEFAULT_PATH_OPERATORS",
    "MATRIX_PATH_OPERATORS",
    "DEFAULT_PATTERN_OPERATORS",
    "MATRIX_PATTERN_OPERATORS",
]

DEFAULT_ESCAPE = "\\"

PATH_DELIMITER = "/"
ATTRIBUTE_DELIMITER = ";"
VALUE_DELIMITER = "="

ANY_CHAR = "?"
ANY_STRING = "*"

UNIX_WILDCARD_OPERATORS: FrozenSet[str] = frozenset({ANY_STRING, ANY_CHAR})
DEFAULT_PATH_OPERATORS: FrozenSet[str] = frozenset({PATH_DELIMITER})
MATRIX_PATH_OPERATORS: FrozenSet[str] = frozenset(
    {PATH_DELIMITER, ATTRIBUTE_DELIMITER, VALUE_DELIMITER}
)
DEFAULT_PATTERN_OPERATORS: FrozenSet[str] = UNIX_WILDCARD_OPERATORS | {PATH_DELIMITER}
MATRIX_PATTERN_OPERATORS: FrozenSet[str] = (
    MATRIX_PATH_OPERATORS | UNIX_WILDCARD_OPERATORS
)
