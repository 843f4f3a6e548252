"""Logical input events produced by the decoder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class InputEvent:
    """Single decoded keystroke.

    ``kind`` is one of ``printable``, ``enter``, ``backspace``, ``terminate``,
    ``arrow_up``, ``arrow_down``, ``arrow_left`` or ``arrow_right``. ``byte``
    is only set for ``printable`` events.
    """

    kind: str
    byte: Optional[int] = None

    def __post_init__(self) -> None:
        if (self.kind == "printable") != (self.byte is not None):
            raise ValueError("only printable events carry a byte")

    @classmethod
    def printable(cls, value: int) -> "InputEvent":
        return cls(kind="printable", byte=value)


ENTER = InputEvent("enter")
BACKSPACE = InputEvent("backspace")
TERMINATE = InputEvent("terminate")
ARROW_UP = InputEvent("arrow_up")
ARROW_DOWN = InputEvent("arrow_down")
ARROW_LEFT = InputEvent("arrow_left")
ARROW_RIGHT = InputEvent("arrow_right")
