"""Event -> buffer operation dispatch."""

from __future__ import annotations

from typing import Callable, Dict

from rawedit.buffer import Buffer
from rawedit.input import InputEvent

Action = Callable[[Buffer, InputEvent], None]


def insert_printable(buffer: Buffer, event: InputEvent) -> None:
    assert event.byte is not None
    buffer.insert_byte(event.byte)


def break_line(buffer: Buffer, event: InputEvent) -> None:
    del event
    buffer.insert_line_break()


def delete_backward(buffer: Buffer, event: InputEvent) -> None:
    del event
    buffer.backspace()


def cursor_up(buffer: Buffer, event: InputEvent) -> None:
    del event
    buffer.move_up()


def cursor_down(buffer: Buffer, event: InputEvent) -> None:
    del event
    buffer.move_down()


def cursor_left(buffer: Buffer, event: InputEvent) -> None:
    del event
    buffer.move_left()


def cursor_right(buffer: Buffer, event: InputEvent) -> None:
    del event
    buffer.move_right()


ACTIONS: Dict[str, Action] = {
    "printable": insert_printable,
    "enter": break_line,
    "backspace": delete_backward,
    "arrow_up": cursor_up,
    "arrow_down": cursor_down,
    "arrow_left": cursor_left,
    "arrow_right": cursor_right,
}


def apply_event(buffer: Buffer, event: InputEvent) -> bool:
    """Apply ``event`` to ``buffer``; return ``False`` for unbound events."""

    action = ACTIONS.get(event.kind)
    if action is None:
        return False
    action(buffer, event)
    return True


__all__ = [
    "ACTIONS",
    "apply_event",
    "insert_printable",
    "break_line",
    "delete_backward",
    "cursor_up",
    "cursor_down",
    "cursor_left",
    "cursor_right",
]
