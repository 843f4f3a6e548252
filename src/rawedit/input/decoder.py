"""Escape-sequence aware byte decoder.

The decoder is a two-state machine. In ``idle`` every byte maps straight to an
event, except the escape byte which switches to ``escape_pending``. There the
decoder buffers bytes until exactly three are held (``ESC [ X``), looks up the
two-byte suffix and returns to ``idle`` whether or not it matched. Longer or
variable-length sequences are not recognized.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from rawedit.runtime import telemetry

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

ESCAPE = 27
CTRL_D = 4
NEWLINE = 10
DELETE = 127

SEQUENCE_LENGTH = 3

LOGGER_NAME = "rawedit.input.decoder"

IDLE = "idle"
ESCAPE_PENDING = "escape_pending"

_CONTROL_BYTES: Dict[int, InputEvent] = {
    CTRL_D: TERMINATE,
    NEWLINE: ENTER,
    DELETE: BACKSPACE,
}

_ARROW_SUFFIXES: Dict[Tuple[int, int], InputEvent] = {
    (ord("["), ord("A")): ARROW_UP,
    (ord("["), ord("B")): ARROW_DOWN,
    (ord("["), ord("C")): ARROW_RIGHT,
    (ord("["), ord("D")): ARROW_LEFT,
}


class InputDecoder:
    """Turns raw input bytes into ``InputEvent`` values, one byte at a time."""

    def __init__(self) -> None:
        self._pending = bytearray()

    @property
    def state(self) -> str:
        return ESCAPE_PENDING if self._pending else IDLE

    @property
    def pending(self) -> bytes:
        return bytes(self._pending)

    def reset(self) -> None:
        self._pending.clear()

    def feed(self, value: int) -> Optional[InputEvent]:
        """Consume one byte; return the completed event, if any."""

        if self._pending:
            return self._feed_escape(value)
        if value == ESCAPE:
            self._pending.append(value)
            return None
        event = _CONTROL_BYTES.get(value)
        if event is None:
            event = InputEvent.printable(value)
        return event

    def feed_bytes(self, chunk: Iterable[int]) -> List[InputEvent]:
        events: List[InputEvent] = []
        for value in chunk:
            event = self.feed(value)
            if event is not None:
                events.append(event)
        return events

    def _feed_escape(self, value: int) -> Optional[InputEvent]:
        self._pending.append(value)
        if len(self._pending) < SEQUENCE_LENGTH:
            return None

        suffix = (self._pending[1], self._pending[2])
        sequence = bytes(self._pending)
        self._pending.clear()
        event = _ARROW_SUFFIXES.get(suffix)
        if event is None:
            telemetry.record_event(
                "decoder.drop",
                level="debug",
                data={"sequence": sequence},
                logger_name=LOGGER_NAME,
            )
        return event
