from __future__ import annotations

from typing import Iterable, List, Optional

from rawedit.actions import ACTIONS, apply_event
from rawedit.buffer import Buffer
from rawedit.errors import InputReadError
from rawedit.input import TERMINATE, InputEvent
from rawedit.render import MemorySurface
from rawedit.session import EditorSession, run_session


class ScriptedReader:
    """Yields scripted chunks, then optionally raises ``InputReadError``."""

    def __init__(self, chunks: Iterable[bytes], *, fail_at_end: bool = False) -> None:
        self.chunks: List[bytes] = list(chunks)
        self.fail_at_end = fail_at_end
        self.reads = 0

    def read(self) -> bytes:
        self.reads += 1
        if self.chunks:
            return self.chunks.pop(0)
        if self.fail_at_end:
            raise InputReadError("stream closed", fd=0)
        raise AssertionError("reader exhausted without a stop signal")


def make_session(buffer: Optional[Buffer] = None) -> tuple[EditorSession, MemorySurface]:
    surface = MemorySurface()
    return EditorSession(surface, buffer=buffer), surface


def test_end_to_end_typing_trace() -> None:
    session, _ = make_session()
    reader = ScriptedReader([b"h", b"i", b"\n", b"!", b"\x7f", b"\x04"])

    reason = run_session(session, reader)

    assert reason == "terminate"
    assert session.buffer.lines == (b"hi", b"")
    assert session.buffer.cursor == (1, 0)


def test_renders_once_per_processed_event() -> None:
    session, _ = make_session()

    session.handle_bytes(b"ab\x1b[D")

    assert session.events == 3
    assert session.renderer.frames == 3


def test_partial_and_unknown_sequences_do_not_render() -> None:
    session, surface = make_session()

    session.handle_bytes(b"\x1b[")
    session.handle_bytes(b"Z")

    assert session.renderer.frames == 0
    assert surface.output == b""


def test_render_reflects_latest_event() -> None:
    session, surface = make_session()

    session.handle_bytes(b"ab")
    session.handle_bytes(b"\x1b[D")

    assert surface.output.endswith(b"\x1b[1;1Hab\x1b[1;2H")


def test_arrow_keys_move_cursor() -> None:
    buffer = Buffer.from_lines([b"one", b"two"], cursor=(0, 2))
    session, _ = make_session(buffer)

    session.handle_bytes(b"\x1b[B\x1b[C\x1b[C\x1b[A\x1b[C")

    assert buffer.cursor == (0, 1)
    assert buffer.lines == (b"one", b"two")


def test_terminate_stops_before_later_bytes() -> None:
    session, _ = make_session()

    keep_going = session.handle_bytes(b"a\x04b")

    assert keep_going is False
    assert session.running is False
    assert session.buffer.lines == (b"a",)
    assert session.renderer.frames == 1


def test_empty_reads_are_skipped() -> None:
    session, _ = make_session()
    reader = ScriptedReader([b"", b"x", b"", b"\x04"])

    run_session(session, reader)

    assert reader.reads == 4
    assert session.buffer.lines == (b"x",)
    assert session.renderer.frames == 1


def test_input_error_ends_session() -> None:
    session, _ = make_session()
    reader = ScriptedReader([b"q"], fail_at_end=True)

    reason = run_session(session, reader)

    assert reason == "input_error"
    assert session.buffer.lines == (b"q",)


def test_shutdown_render_jumps_to_origin() -> None:
    session, surface = make_session()
    session.handle_bytes(b"ab\ncd")

    session.shutdown_render()

    assert session.buffer.cursor == (0, 0)
    assert surface.output.endswith(b"\x1b[1;1Hab\x1b[2;1Hcd\x1b[1;1H")


def test_terminate_has_no_bound_action() -> None:
    buffer = Buffer()

    assert "terminate" not in ACTIONS
    assert apply_event(buffer, TERMINATE) is False
    assert apply_event(buffer, InputEvent.printable(ord("z"))) is True
    assert buffer.lines == (b"z",)
