"""Raw-mode acquisition and restoration for the input device."""

from __future__ import annotations

from typing import Any, List, Optional

from rawedit.errors import TerminalModeError
from rawedit.runtime import telemetry

# termios.tcgetattr list layout
LFLAG = 3
CC = 6


def _default_backend() -> Any:
    import termios

    return termios


class TerminalModeController:
    """Switches a terminal file descriptor into raw mode and back.

    Raw mode clears ``ICANON`` and ``ECHO`` and asks reads to return as soon
    as one byte is available (``VMIN=1``, ``VTIME=0``). ``backend`` defaults
    to the ``termios`` module; tests pass a fake with the same surface.
    """

    def __init__(self, fd: int, *, backend: Optional[Any] = None) -> None:
        self.fd = fd
        self.backend = backend or _default_backend()
        self._saved: Optional[List[Any]] = None

    @property
    def in_raw_mode(self) -> bool:
        return self._saved is not None

    def _get(self, operation: str) -> List[Any]:
        try:
            return self.backend.tcgetattr(self.fd)
        except (self.backend.error, OSError) as exc:
            raise TerminalModeError(
                f"Cannot query terminal attributes: {exc}",
                fd=self.fd,
                operation=operation,
            ) from exc

    def _set(self, attributes: List[Any], operation: str) -> None:
        try:
            self.backend.tcsetattr(self.fd, self.backend.TCSANOW, attributes)
        except (self.backend.error, OSError) as exc:
            raise TerminalModeError(
                f"Cannot set terminal attributes: {exc}",
                fd=self.fd,
                operation=operation,
            ) from exc

    def enter_raw_mode(self) -> None:
        current = self._get("enter")
        saved = [list(item) if isinstance(item, list) else item for item in current]

        raw = [list(item) if isinstance(item, list) else item for item in current]
        raw[LFLAG] &= ~(self.backend.ICANON | self.backend.ECHO)
        raw[CC][self.backend.VMIN] = 1
        raw[CC][self.backend.VTIME] = 0
        self._set(raw, "enter")

        self._saved = saved
        telemetry.record_event("terminal.raw", data={"fd": self.fd})

    def restore_mode(self) -> None:
        """Re-enable canonical processing and echo; a no-op when not raw."""

        if not self.in_raw_mode:
            return
        saved = self._saved
        self._saved = None
        saved[LFLAG] |= self.backend.ICANON | self.backend.ECHO
        self._set(saved, "restore")
        telemetry.record_event("terminal.restore", data={"fd": self.fd})

