import pytest

from pipex.libft import memory


def test_memset_fills_prefix_only():
    buf = bytearray(b"abcdef")
    result = memory.memset(buf, ord("x"), 3)
    assert result is buf
    assert buf == bytearray(b"xxxdef")


def test_memset_truncates_value_to_byte():
    buf = bytearray(4)
    memory.memset(buf, 0x141, 4)
    assert buf == bytearray(b"AAAA")


def test_memset_rejects_overrun():
    with pytest.raises(ValueError):
        memory.memset(bytearray(2), 0, 3)


def test_bzero_clears_prefix():
    buf = bytearray(b"hello")
    memory.bzero(buf, 2)
    assert buf == bytearray(b"\x00\x00llo")


@pytest.mark.parametrize("count,size", [(0, 4), (3, 1), (4, 8)])
def test_calloc_is_zeroed(count, size):
    buf = memory.calloc(count, size)
    assert len(buf) == count * size
    assert all(b == 0 for b in buf)


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        memory.calloc(-1, 4)


def test_memcpy_copies_prefix():
    dst = bytearray(b"......")
    result = memory.memcpy(dst, b"hello!", 5)
    assert result is dst
    assert dst == bytearray(b"hello.")


def test_memcpy_rejects_short_source():
    with pytest.raises(ValueError):
        memory.memcpy(bytearray(8), b"ab", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"123456789")
    memory.memmove(buf, 2, 0, 5)
    assert buf == bytearray(b"121234589")


def test_memmove_backward_overlap():
    buf = bytearray(b"123456789")
    memory.memmove(buf, 0, 2, 5)
    assert buf == bytearray(b"345676789")


def test_memmove_rejects_overrun():
    with pytest.raises(ValueError):
        memory.memmove(bytearray(5), 3, 0, 3)


def test_memcmp_equal_and_ordering():
    assert memory.memcmp(b"abc", b"abc", 3) == 0
    assert memory.memcmp(b"abc", b"abd", 3) < 0
    assert memory.memcmp(b"abd", b"abc", 3) > 0
    assert memory.memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_is_unsigned():
    assert memory.memcmp(b"\xff", b"\x00", 1) == 255
    assert memory.memcmp(b"\x00", b"\xff", 1) == -memory.memcmp(b"\xff", b"\x00", 1)


def test_memchr_finds_first_occurrence():
    data = b"hello"
    assert memory.memchr(data, ord("l"), 5) == data.index(b"l")


def test_memchr_respects_length():
    assert memory.memchr(b"hello", ord("o"), 4) is None
    assert memory.memchr(b"hello", ord("z"), 5) is None


def test_memchr_truncates_value():
    data = b"a\x00b"
    assert memory.memchr(data, 0x100, 3) == data.index(b"\x00")