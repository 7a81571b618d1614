"""Writing characters, text and numbers straight to a file descriptor."""

from __future__ import annotations

import os

from pipex.libft.chars import itoa

CharLike = int | str


def _write_all(fd: int, data: bytes) -> int:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)


def putchar_fd(c: CharLike, fd: int) -> int:
    """Write one character to ``fd``; an integer is written as a single byte.

    Returns the number of bytes written.
    """
    if isinstance(c, int):
        data = bytes([c & 0xFF])
    else:
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    return _write_all(fd, data)


def putstr_fd(text: str, fd: int) -> int:
    """Write ``text`` to ``fd`` and return the number of bytes written."""
    return _write_all(fd, text.encode("utf-8"))


def putendl_fd(text: str, fd: int) -> int:
    """Write ``text`` followed by a newline to ``fd``."""
    return putstr_fd(text, fd) + putchar_fd("\n", fd)


def putnbr_fd(n: int, fd: int) -> int:
    """Write the decimal form of ``n`` to ``fd``."""
    return putstr_fd(itoa(n), fd)