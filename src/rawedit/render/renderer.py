"""Full-screen repaint of the buffer with cursor placement."""

from __future__ import annotations

from rawedit.buffer import Buffer, BufferView
from rawedit.runtime import telemetry

from .surface import RenderSurface

CLEAR_SCREEN = b"\x1b[2J\x1b[H"


def move_cursor(row: int, col: int) -> bytes:
    """Cursor-position sequence for 1-based ``row``/``col``."""

    return b"\x1b[%d;%dH" % (row, col)


class Renderer:
    """Redraws every line on every call; there is no incremental diffing."""

    def __init__(self, surface: RenderSurface) -> None:
        self.surface = surface
        self.frames = 0

    def _emit(self, data: bytes) -> None:
        self.surface.write(data)
        self.surface.flush()

    def clear_view(self) -> None:
        self._emit(CLEAR_SCREEN)

    def render(self, view: BufferView) -> None:
        with telemetry.span(
            "render::frame",
            component="render",
            metadata={"version": view.version, "lines": len(view.lines)},
        ):
            self.clear_view()
            for index, line in enumerate(view.lines):
                self._emit(move_cursor(index + 1, 1) + line)
            row, col = view.cursor
            self._emit(move_cursor(row + 1, col + 1))
        self.frames += 1

    def jump_to_top(self, buffer: Buffer) -> None:
        buffer.move_to(0, 0)
        self.render(buffer.snapshot())
