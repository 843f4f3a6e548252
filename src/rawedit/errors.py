"""Error types raised across the terminal, input, and render layers."""

from __future__ import annotations

from typing import Optional, Tuple


class RawEditError(RuntimeError):
    """Base class for editor failures that reach the top-level loop."""


class TerminalModeError(RawEditError):
    """Raised when querying or setting terminal attributes fails."""

    def __init__(
        self, message: str, *, fd: Optional[int] = None, operation: str = ""
    ) -> None:
        super().__init__(message)
        self.fd = fd
        self.operation = operation


TerminalError = TerminalModeError


class InputReadError(RawEditError):
    """Raised when the input byte stream cannot be read."""

    def __init__(self, message: str, *, fd: Optional[int] = None) -> None:
        super().__init__(message)
        self.fd = fd


class OutputWriteError(RawEditError):
    """Raised when a write or flush on the render surface fails."""

    def __init__(self, message: str, *, operation: str = "write") -> None:
        super().__init__(message)
        self.operation = operation


class BufferValidationError(RawEditError):
    """Raised when a cursor position falls outside the buffer."""

    def __init__(
        self, message: str, *, cursor: Optional[Tuple[int, int]] = None
    ) -> None:
        super().__init__(message)
        self.cursor = cursor


__all__ = [
    "RawEditError",
    "TerminalModeError",
    "TerminalError",
    "InputReadError",
    "OutputWriteError",
    "BufferValidationError",
]
