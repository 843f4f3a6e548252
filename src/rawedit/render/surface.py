"""Output sinks the renderer writes escape-coded frames to."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO, List, Protocol

from rawedit.errors import OutputWriteError


class RenderSurface(Protocol):
    """Protocol describing the byte sink a renderer paints on."""

    def write(self, data: bytes) -> None:
        """Write raw bytes, including terminal control sequences."""
        ...

    def flush(self) -> None:
        """Push any buffered bytes to the device."""
        ...


class StreamSurface:
    """Surface over a binary stream such as ``sys.stdout.buffer``."""

    def __init__(self, stream: BinaryIO) -> None:
        self.stream = stream

    def write(self, data: bytes) -> None:
        try:
            self.stream.write(data)
        except (OSError, ValueError) as exc:
            raise OutputWriteError(str(exc), operation="write") from exc

    def flush(self) -> None:
        try:
            self.stream.flush()
        except (OSError, ValueError) as exc:
            raise OutputWriteError(str(exc), operation="flush") from exc


@dataclass(slots=True)
class MemorySurface:
    """In-memory surface recording every flushed chunk."""

    chunks: List[bytes] = field(default_factory=list)
    pending: bytearray = field(default_factory=bytearray)
    flushes: int = 0

    def write(self, data: bytes) -> None:
        self.pending.extend(data)

    def flush(self) -> None:
        if self.pending:
            self.chunks.append(bytes(self.pending))
            self.pending.clear()
        self.flushes += 1

    @property
    def output(self) -> bytes:
        return b"".join(self.chunks) + bytes(self.pending)
