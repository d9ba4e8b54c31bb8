"""Exceptions raised by the path parsers."""

from __future__ import annotations

from typing import Optional

__all__ = ["PathSyntaxError"]


class PathSyntaxError(ValueError):
    """Raised when a path string is malformed.

    Attributes:
        text: The input being parsed, when known.
    """

    def __init__(self, message: str, text: Optional[str] = None) -> None:
        self.text = text
        if text is not None:
            message = f"{message} in {text!r}"
        super().__init__(message)
