"""Line storage for rawedit buffers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence


@dataclass(slots=True)
class BufferDocument:
    """Ordered list of byte lines, mutated in place.

    The document always holds at least one line. Lines carry no trailing
    newline; a line's length is the number of bytes it holds. ``version`` is
    bumped on every content mutation so views can be compared cheaply.
    """

    _lines: List[bytearray] = field(default_factory=lambda: [bytearray()])
    version: int = 0

    @classmethod
    def from_lines(cls, lines: Iterable[bytes]) -> "BufferDocument":
        stored = [bytearray(line) for line in lines]
        if not stored:
            stored = [bytearray()]
        return cls(_lines=stored, version=0)

    def snapshot(self) -> Sequence[bytes]:
        """Return the current lines without exposing internal mutability."""

        return tuple(bytes(line) for line in self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line_length(self, index: int) -> int:
        return len(self._lines[index])

    def insert_byte(self, row: int, col: int, value: int) -> None:
        line = self._lines[row]
        if col == len(line):
            line.append(value)
        else:
            line.insert(col, value)
        self.version += 1

    def delete_byte(self, row: int, col: int) -> None:
        del self._lines[row][col]
        self.version += 1

    def split_line(self, row: int, col: int) -> None:
        """Move the bytes from ``col`` onwards to a new line after ``row``."""

        line = self._lines[row]
        tail = bytearray(line[col:])
        del line[col:]
        self._lines.insert(row + 1, tail)
        self.version += 1

    def join_with_previous(self, row: int) -> int:
        """Append line ``row`` to line ``row - 1`` and return the join column."""

        previous = self._lines[row - 1]
        column = len(previous)
        previous.extend(self._lines.pop(row))
        self.version += 1
        return column
