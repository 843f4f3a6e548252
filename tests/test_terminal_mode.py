from __future__ import annotations

import os
from typing import Any, List

import pytest

from rawedit.errors import InputReadError, TerminalError, TerminalModeError
from rawedit.terminal import ByteReader, TerminalModeController


class FakeTermios:
    """Stand-in for the ``termios`` module operating on an in-memory tty."""

    error = type("error", (Exception,), {})
    TCSANOW = 0
    ICANON = 0o2
    ECHO = 0o10
    VMIN = 6
    VTIME = 5

    def __init__(self, *, fail_get: bool = False, fail_set: bool = False) -> None:
        self.fail_get = fail_get
        self.fail_set = fail_set
        cc: List[Any] = [0] * 32
        cc[self.VMIN] = 4
        cc[self.VTIME] = 2
        self.attrs: List[Any] = [0, 0, 0, self.ICANON | self.ECHO | 0o1, 0, 0, cc]
        self.calls: List[tuple[str, int]] = []

    def tcgetattr(self, fd: int) -> List[Any]:
        self.calls.append(("get", fd))
        if self.fail_get:
            raise self.error(25, "Inappropriate ioctl for device")
        return [list(item) if isinstance(item, list) else item for item in self.attrs]

    def tcsetattr(self, fd: int, when: int, attrs: List[Any]) -> None:
        self.calls.append(("set", fd))
        if self.fail_set:
            raise self.error(5, "Input/output error")
        assert when == self.TCSANOW
        self.attrs = [list(item) if isinstance(item, list) else item for item in attrs]


def test_enter_raw_mode_clears_canonical_and_echo() -> None:
    backend = FakeTermios()
    controller = TerminalModeController(3, backend=backend)

    controller.enter_raw_mode()

    lflag = backend.attrs[3]
    assert lflag & backend.ICANON == 0
    assert lflag & backend.ECHO == 0
    assert lflag & 0o1
    assert backend.attrs[6][backend.VMIN] == 1
    assert backend.attrs[6][backend.VTIME] == 0
    assert controller.in_raw_mode


def test_restore_mode_reenables_canonical_and_echo() -> None:
    backend = FakeTermios()
    controller = TerminalModeController(3, backend=backend)
    controller.enter_raw_mode()

    controller.restore_mode()

    assert backend.attrs[3] & backend.ICANON
    assert backend.attrs[3] & backend.ECHO
    assert backend.attrs[6][backend.VMIN] == 4
    assert not controller.in_raw_mode


def test_restore_runs_once() -> None:
    backend = FakeTermios()
    controller = TerminalModeController(3, backend=backend)
    controller.enter_raw_mode()

    controller.restore_mode()
    controller.restore_mode()

    assert [name for name, _ in backend.calls] == ["get", "set", "set"]


def test_query_failure_raises_terminal_error() -> None:
    controller = TerminalModeController(7, backend=FakeTermios(fail_get=True))

    with pytest.raises(TerminalError) as excinfo:
        controller.enter_raw_mode()

    assert excinfo.value.fd == 7
    assert excinfo.value.operation == "enter"
    assert not controller.in_raw_mode


def test_set_failure_raises_terminal_mode_error() -> None:
    controller = TerminalModeController(3, backend=FakeTermios(fail_set=True))

    with pytest.raises(TerminalModeError):
        controller.enter_raw_mode()


def test_real_backend_rejects_non_tty() -> None:
    read_fd, write_fd = os.pipe()
    try:
        controller = TerminalModeController(read_fd)
        with pytest.raises(TerminalModeError):
            controller.enter_raw_mode()
    finally:
        os.close(read_fd)
        os.close(write_fd)


def test_byte_reader_reads_one_byte_at_a_time() -> None:
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, b"ab")
        reader = ByteReader(read_fd)
        assert reader.read() == b"a"
        assert reader.read() == b"b"
        os.close(write_fd)
        write_fd = -1
        assert reader.read() == b""
    finally:
        os.close(read_fd)
        if write_fd >= 0:
            os.close(write_fd)


def test_byte_reader_wraps_os_errors() -> None:
    read_fd, write_fd = os.pipe()
    os.close(read_fd)
    os.close(write_fd)

    with pytest.raises(InputReadError) as excinfo:
        ByteReader(read_fd).read()

    assert excinfo.value.fd == read_fd
