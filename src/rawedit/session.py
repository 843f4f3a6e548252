"""Editor session object and the blocking read/decode/apply/render loop."""

from __future__ import annotations

from typing import Optional, Protocol

from rawedit.actions import apply_event
from rawedit.buffer import Buffer
from rawedit.errors import InputReadError
from rawedit.input import InputDecoder
from rawedit.render import Renderer, RenderSurface
from rawedit.runtime import telemetry


class ByteSource(Protocol):
    def read(self) -> bytes:
        """Block until input is available and return it (possibly empty)."""
        ...


class EditorSession:
    """Owns the buffer, decoder and renderer for one editing run."""

    def __init__(
        self,
        surface: RenderSurface,
        *,
        buffer: Optional[Buffer] = None,
        decoder: Optional[InputDecoder] = None,
    ) -> None:
        self.buffer = buffer or Buffer()
        self.decoder = decoder or InputDecoder()
        self.renderer = Renderer(surface)
        self.running = True
        self.events = 0

    def handle_bytes(self, chunk: bytes) -> bool:
        """Decode ``chunk`` and apply each event, rendering once per event.

        Returns ``False`` once the terminate event has been seen; bytes after
        it are ignored.
        """

        for value in chunk:
            event = self.decoder.feed(value)
            if event is None:
                continue
            if event.kind == "terminate":
                self.running = False
                return False
            apply_event(self.buffer, event)
            self.events += 1
            self.renderer.render(self.buffer.snapshot())
        return self.running

    def shutdown_render(self) -> None:
        self.renderer.jump_to_top(self.buffer)


def run_session(session: EditorSession, reader: ByteSource) -> str:
    """Run until terminate or an input error; return the stop reason."""

    telemetry.record_event("session.start")
    reason = "terminate"
    while True:
        try:
            chunk = reader.read()
        except InputReadError as exc:
            reason = "input_error"
            telemetry.record_event(
                "session.input_error", level="warning", data={"error": str(exc)}
            )
            break
        if not chunk:
            # no input yet; the read blocks in raw mode (VMIN=1)
            continue
        if not session.handle_bytes(chunk):
            break
    telemetry.record_event(
        "session.stop", data={"reason": reason, "events": session.events}
    )
    return reason


__all__ = ["ByteSource", "EditorSession", "run_session"]
