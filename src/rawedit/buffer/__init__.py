"""Byte buffer, logical cursor and edit operations."""

from rawedit.errors import BufferValidationError

from .buffer import Buffer, BufferView, Transaction
from .document import BufferDocument
from .state import BufferState, Cursor
from .validation import ensure_cursor

__all__ = [
    "Buffer",
    "BufferDocument",
    "BufferState",
    "BufferValidationError",
    "BufferView",
    "Cursor",
    "Transaction",
    "ensure_cursor",
]
