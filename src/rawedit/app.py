"""Process entry point: bracket the session loop with raw mode."""

from __future__ import annotations

import argparse
import sys
from typing import Any, BinaryIO, Callable, List, Optional, Sequence

from rawedit import __version__
from rawedit.errors import RawEditError
from rawedit.render import StreamSurface
from rawedit.runtime import telemetry
from rawedit.session import ByteSource, EditorSession, run_session
from rawedit.terminal import ByteReader, TerminalModeController


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rawedit",
        description=(
            "Minimal full-screen terminal editor. Arrow keys move, "
            "Backspace deletes, Ctrl-D quits."
        ),
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser.parse_args(argv)


def _best_effort(steps: Sequence[tuple[str, Callable[[], None]]]) -> List[str]:
    failed: List[str] = []
    for name, step in steps:
        try:
            step()
        except RawEditError as exc:
            failed.append(name)
            telemetry.record_event(
                "shutdown.step_failed",
                level="error",
                data={"step": name, "error": str(exc)},
            )
    return failed


def run(
    *,
    fd: int,
    output: BinaryIO,
    reader: Optional[ByteSource] = None,
    backend: Optional[Any] = None,
) -> int:
    """Run one editing session on ``fd`` / ``output`` and return the exit code."""

    session = EditorSession(StreamSurface(output))
    controller = TerminalModeController(fd, backend=backend)
    source = reader or ByteReader(fd)
    error: Optional[RawEditError] = None

    try:
        session.renderer.clear_view()
        controller.enter_raw_mode()
        session.renderer.clear_view()
        run_session(session, source)
    except RawEditError as exc:
        error = exc
    finally:
        failed = _best_effort(
            [
                ("jump_to_top", session.shutdown_render),
                ("restore_mode", controller.restore_mode),
                ("clear_view", session.renderer.clear_view),
            ]
        )

    if error is not None:
        sys.stderr.write(f"rawedit: {error}\n")
        return 1
    if "restore_mode" in failed:
        sys.stderr.write("rawedit: could not restore terminal mode\n")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    _parse_args(argv)
    return run(fd=sys.stdin.fileno(), output=sys.stdout.buffer)


if __name__ == "__main__":  # pragma: no cover - manual run
    sys.exit(main())
