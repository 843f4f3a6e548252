"""Validation helpers shared across buffer services."""

from __future__ import annotations

from rawedit.errors import BufferValidationError

from .document import BufferDocument
from .state import Cursor


def ensure_cursor(document: BufferDocument, cursor: Cursor) -> Cursor:
    row, col = cursor
    if row < 0 or row >= document.line_count:
        raise BufferValidationError("Row out of range", cursor=cursor)
    if col < 0 or col > document.line_length(row):
        raise BufferValidationError("Column out of range", cursor=cursor)
    return cursor
