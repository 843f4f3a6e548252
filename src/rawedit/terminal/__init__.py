"""Terminal device control: raw mode and the byte reader."""

from .mode import TerminalModeController
from .stream import ByteReader

__all__ = ["ByteReader", "TerminalModeController"]
