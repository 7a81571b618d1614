"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Optional

BUFFER_SIZE = 100000


class LineReader:
    """Reads lines from ``fd``, ``buffer_size`` bytes per read call.

    Each line keeps its trailing newline; the last line may lack one.
    Data read past the returned line is kept for the next call.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def read_line(self) -> Optional[bytes]:
        """The next line, or None once nothing is left to read."""
        while b"\n" not in self._pending:
            chunk = os.read(self.fd, self.buffer_size)
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        end = self._pending.find(b"\n")
        end = len(self._pending) if end == -1 else end + 1
        line = bytes(self._pending[:end])
        del self._pending[:end]
        return line

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line


def get_next_line(reader: LineReader) -> Optional[bytes]:
    """The next line from ``reader``, or None at end of input."""
    return reader.read_line()