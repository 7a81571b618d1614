import os

import pytest

from pipex.libft.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


def _capture(action):
    read_fd, write_fd = os.pipe()
    try:
        count = action(write_fd)
    finally:
        os.close(write_fd)
    chunks = []
    try:
        while True:
            chunk = os.read(read_fd, 4096)
            if not chunk:
                break
            chunks.append(chunk)
    finally:
        os.close(read_fd)
    return count, b"".join(chunks)


def test_putchar_writes_single_character():
    count, data = _capture(lambda fd: putchar_fd("z", fd))
    assert data == b"z"
    assert count == 1


def test_putchar_integer_is_truncated_to_byte():
    count, data = _capture(lambda fd: putchar_fd(ord("A") + 256, fd))
    assert data == b"A"
    assert count == 1


def test_putchar_rejects_longer_text():
    read_fd, write_fd = os.pipe()
    try:
        with pytest.raises(ValueError):
            putchar_fd("ab", write_fd)
    finally:
        os.close(read_fd)
        os.close(write_fd)


def test_putstr_writes_text_and_counts_bytes():
    text = "Error. Pipe failed"
    count, data = _capture(lambda fd: putstr_fd(text, fd))
    assert data.decode() == text
    assert count == len(data)


def test_putstr_empty_writes_nothing():
    count, data = _capture(lambda fd: putstr_fd("", fd))
    assert data == b""
    assert count == 0


def test_putendl_appends_newline():
    count, data = _capture(lambda fd: putendl_fd("hello", fd))
    assert data == b"hello\n"
    assert count == len(data)


def test_putnbr_minimum_int():
    _, data = _capture(lambda fd: putnbr_fd(-2147483648, fd))
    assert data == b"-2147483648"


def test_putnbr_zero():
    _, data = _capture(lambda fd: putnbr_fd(0, fd))
    assert data == b"0"


@pytest.mark.parametrize("n", [1, 9, 10, 42, -7, 2147483647, -100000, 123456789])
def test_putnbr_round_trip(n):
    count, data = _capture(lambda fd: putnbr_fd(n, fd))
    assert int(data.decode()) == n
    assert count == len(data)