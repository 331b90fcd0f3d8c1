"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Any, Optional

BUFFER_SIZE = 42


def _descriptor(fd: Any) -> int:
    if isinstance(fd, int) and not isinstance(fd, bool):
        number = fd
    elif hasattr(fd, "fileno"):
        number = fd.fileno()
    else:
        raise TypeError(f"expected a file descriptor, got {type(fd).__name__}")
    if number < 0:
        raise ValueError(f"file descriptor must not be negative, got {number}")
    return number


class LineReader:
    """Return successive lines from a file descriptor, reading in fixed chunks.

    Each line is returned as bytes including its trailing newline; the last
    line of the input may lack one. Data read past a line is kept for the
    next call.
    """

    def __init__(self, fd: Any, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = _descriptor(fd)
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def _fill(self) -> None:
        while b"\n" not in self._pending:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._pending.clear()
                raise
            if not chunk:
                return
            self._pending += chunk

    def read_line(self) -> Optional[bytes]:
        """Return the next line, or ``None`` once the input is exhausted."""
        self._fill()
        if not self._pending:
            return None
        end = self._pending.find(b"\n")
        if end < 0:
            line = bytes(self._pending)
            self._pending.clear()
            return line
        line = bytes(self._pending[:end + 1])
        del self._pending[:end + 1]
        return line

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line