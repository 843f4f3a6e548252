"""Byte-stream decoding into logical input events."""

from .decoder import ESCAPE, InputDecoder
from .events import (
    ARROW_DOWN,
    ARROW_LEFT,
    ARROW_RIGHT,
    ARROW_UP,
    BACKSPACE,
    ENTER,
    TERMINATE,
    InputEvent,
)

__all__ = [
    "ARROW_DOWN",
    "ARROW_LEFT",
    "ARROW_RIGHT",
    "ARROW_UP",
    "BACKSPACE",
    "ENTER",
    "ESCAPE",
    "TERMINATE",
    "InputDecoder",
    "InputEvent",
]
