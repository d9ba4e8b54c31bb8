"""Configuration classes for matrixpath components."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict

import yaml

from .constants import DEFAULT_ESCAPE, MATRIX_PATTERN_OPERATORS


@dataclass(frozen=True)
class SyntaxConfig:
    """Syntax settings shared by the parsers and renderers."""

    # Escape character; empty disables escaping
    escape: str = DEFAULT_ESCAPE

    def __post_init__(self) -> None:
        if len(self.escape) > 1:
            raise ValueError(
                f"escape must be a single character, got {self.escape!r}"
            )
        if self.escape in MATRIX_PATTERN_OPERATORS:
            raise ValueError(
                f"escape {self.escape!r} collides with a reserved operator"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SyntaxConfig":
        """Build a config from a mapping, rejecting unknown keys.

        Raises:
            ValueError: On unknown keys or invalid values.
        """
        allowed = {f.name for f in fields(cls)}
        for key in data:
            if key not in allowed:
                raise ValueError(
                    f"Unrecognized syntax option '{key}'. "
                    f"Expected one of: {sorted(allowed)}"
                )
        escape = data.get("escape", DEFAULT_ESCAPE)
        if escape is None:
            escape = ""
        if not isinstance(escape, str):
            raise ValueError(f"escape must be a string, got {type(escape).__name__}")
        return cls(escape=escape)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "SyntaxConfig":
        """Load a config from YAML.

        The document is either empty, or a mapping with an optional
        ``syntax`` section::

            syntax:
              escape: "^"
        """
        data = yaml.safe_load(yaml_str)
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError("The provided YAML must map to a dictionary at top-level.")
        unknown = set(data) - {"syntax"}
        if unknown:
            raise ValueError(f"Unrecognized top-level key(s): {sorted(unknown)}")
        section = data.get("syntax") or {}
        if not isinstance(section, dict):
            raise ValueError("'syntax' must be a mapping")
        return cls.from_dict(section)


# Global configuration instance
DEFAULT_SYNTAX = SyntaxConfig()
