"""Blocking one-byte reader over a file descriptor."""

from __future__ import annotations

import os

from rawedit.errors import InputReadError


class ByteReader:
    def __init__(self, fd: int) -> None:
        self.fd = fd

    def read(self) -> bytes:
        """Return at most one byte; ``b""`` means nothing was available."""

        try:
            return os.read(self.fd, 1)
        except OSError as exc:
            raise InputReadError(f"Cannot read input: {exc}", fd=self.fd) from exc
