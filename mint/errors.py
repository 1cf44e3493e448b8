"""Markup syntax errors.

Every failure of a conversion is a single ``MarkupError``. Its ``kind``
tells which rule was broken, ``offset`` points into the input string and
``char`` is the offending character when there is one.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Kinds of markup syntax errors."""

    INCOMPLETE_ESCAPE = "incomplete-escape"
    INVALID_ESCAPE = "invalid-escape"
    UNTERMINATED_OPENING_TAG = "unterminated-opening-tag"
    EMPTY_OPENING_TAG = "empty-opening-tag"
    UNKNOWN_COLOR_LETTER = "unknown-color-letter"
    INVALID_TRUE_COLOR = "invalid-true-color"
    UNTERMINATED_CLOSING_TAG = "unterminated-closing-tag"
    UNBALANCED_CLOSING_TAG = "unbalanced-closing-tag"
    MAX_DEPTH_EXCEEDED = "max-depth-exceeded"
    UNBALANCED_OPENING_TAG = "unbalanced-opening-tag"


class MarkupError(ValueError):
    """Raised when a markup string has a syntax error."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        offset: int,
        char: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.offset = offset
        self.char = char

    def __reduce__(self):
        # Rebuild with every field so the error survives pickle and copy
        return (self.__class__, (self.kind, self.message, self.offset, self.char))

    def __repr__(self) -> str:
        return (
            f"MarkupError(kind={self.kind.name}, message={self.message!r}, "
            f"offset={self.offset}, char={self.char!r})"
        )
