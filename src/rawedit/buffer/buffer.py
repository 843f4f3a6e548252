"""High-level buffer façade combining the line document and the cursor."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Iterable, Optional, Sequence

from rawedit.runtime import telemetry

from .document import BufferDocument
from .state import BufferState, Cursor
from .validation import ensure_cursor


@dataclass(frozen=True, slots=True)
class BufferView:
    version: int
    lines: Sequence[bytes]
    cursor: Cursor


class Buffer:
    """Owns the editable lines and the logical cursor.

    Every operation keeps ``0 <= row < line_count`` and
    ``0 <= col <= len(line)``; none of the key-driven operations can fail.
    """

    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[BufferDocument] = None,
        state: Optional[BufferState] = None,
    ) -> None:
        self.name = name
        self.document = document or BufferDocument()
        self.state = state or BufferState()

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[bytes],
        *,
        cursor: Cursor = (0, 0),
        name: str = "default",
    ) -> "Buffer":
        buffer = cls(name=name, document=BufferDocument.from_lines(lines))
        buffer.move_to(*cursor)
        return buffer

    @property
    def cursor(self) -> Cursor:
        return self.state.cursor

    @property
    def lines(self) -> Sequence[bytes]:
        return self.document.snapshot()

    def snapshot(self) -> BufferView:
        return BufferView(
            version=self.document.version,
            lines=self.document.snapshot(),
            cursor=self.state.cursor,
        )

    # movement -----------------------------------------------------------

    def move_up(self) -> None:
        row, _ = self.state.cursor
        if row > 0:
            self.state.set_cursor(row - 1, 0)

    def move_down(self) -> None:
        row, _ = self.state.cursor
        if row < self.document.line_count - 1:
            self.state.set_cursor(row + 1, 0)

    def move_left(self) -> None:
        row, col = self.state.cursor
        if col > 0:
            self.state.set_cursor(row, col - 1)

    def move_right(self) -> None:
        row, col = self.state.cursor
        if col < self.document.line_length(row):
            self.state.set_cursor(row, col + 1)

    def move_to(self, row: int, col: int) -> None:
        """Place the cursor at an absolute position, validating the target."""

        self.state.set_cursor(*ensure_cursor(self.document, (row, col)))

    # edits --------------------------------------------------------------

    def insert_byte(self, value: int) -> None:
        row, col = self.state.cursor
        with Transaction(self, "insert_byte"):
            self.document.insert_byte(row, col, value)
            self.state.set_cursor(row, col + 1)

    def backspace(self) -> None:
        row, col = self.state.cursor
        if col > 0:
            with Transaction(self, "delete_byte"):
                self.document.delete_byte(row, col - 1)
                self.state.set_cursor(row, col - 1)
        elif row > 0:
            with Transaction(self, "join_line"):
                column = self.document.join_with_previous(row)
                self.state.set_cursor(row - 1, column)
        # (0, 0): nothing precedes the cursor

    def insert_line_break(self) -> None:
        row, col = self.state.cursor
        with Transaction(self, "split_line"):
            self.document.split_line(row, col)
            self.state.set_cursor(row + 1, 0)


class Transaction(AbstractContextManager["Transaction"]):
    """Wraps one edit in a telemetry span and stamps the change tick."""

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            self.buffer.state.last_change_tick = self.buffer.document.version
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False
