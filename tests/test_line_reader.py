import os

import pytest

from pipex.libft.line_reader import LineReader, get_next_line


@pytest.fixture
def make_fd(tmp_path):
    opened = []

    def _make(data: bytes) -> int:
        path = tmp_path / f"input{len(opened)}.txt"
        path.write_bytes(data)
        fd = os.open(path, os.O_RDONLY)
        opened.append(fd)
        return fd

    yield _make
    for fd in opened:
        os.close(fd)


@pytest.mark.parametrize("buffer_size", [1, 2, 3, 7, 100000])
def test_lines_keep_newlines(make_fd, buffer_size):
    fd = make_fd(b"first\nsecond\nthird")
    reader = LineReader(fd, buffer_size)
    assert get_next_line(reader) == b"first\n"
    assert get_next_line(reader) == b"second\n"
    assert get_next_line(reader) == b"third"
    assert get_next_line(reader) is None


@pytest.mark.parametrize("buffer_size", [1, 4, 42])
def test_round_trip(make_fd, buffer_size):
    data = b"alpha\n\nbeta gamma\ndelta\n\n"
    lines = list(LineReader(make_fd(data), buffer_size))
    assert b"".join(lines) == data
    assert all(line.endswith(b"\n") for line in lines)
    assert len(lines) == data.count(b"\n")


def test_empty_input_returns_none(make_fd):
    reader = LineReader(make_fd(b""))
    assert reader.read_line() is None
    assert list(reader) == []


def test_empty_lines(make_fd):
    reader = LineReader(make_fd(b"\n\n"), 1)
    assert list(reader) == [b"\n", b"\n"]


def test_reads_again_after_end_on_pipe():
    read_end, write_end = os.pipe()
    try:
        reader = LineReader(read_end, 4)
        os.write(write_end, b"one\n")
        assert reader.read_line() == b"one\n"
        os.write(write_end, b"two\n")
        assert reader.read_line() == b"two\n"
        os.close(write_end)
        write_end = -1
        assert reader.read_line() is None
    finally:
        if write_end >= 0:
            os.close(write_end)
        os.close(read_end)


def test_negative_fd_rejected():
    with pytest.raises(ValueError):
        LineReader(-1)


@pytest.mark.parametrize("buffer_size", [0, -5])
def test_bad_buffer_size_rejected(make_fd, buffer_size):
    with pytest.raises(ValueError):
        LineReader(make_fd(b"x\n"), buffer_size)


def test_independent_readers(make_fd):
    first = LineReader(make_fd(b"a\nb\n"))
    second = LineReader(make_fd(b"c\nd\n"))
    assert first.read_line() == b"a\n"
    assert second.read_line() == b"c\n"
    assert first.read_line() == b"b\n"
    assert second.read_line() == b"d\n"