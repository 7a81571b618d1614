"""Byte-buffer operations on bytearray and bytes objects."""

from __future__ import annotations

from collections.abc import Sized


def _check(length: int, *buffers: Sized) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for buffer in buffers:
        if length > len(buffer):
            raise ValueError(f"length {length} exceeds buffer of size {len(buffer)}")


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buffer`` with ``value`` (truncated to a byte)."""
    _check(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> bytearray:
    """Zero the first ``length`` bytes of ``buffer``."""
    return memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dst: bytearray, src: bytes | bytearray, length: int) -> bytearray:
    """Copy the first ``length`` bytes of ``src`` to the start of ``dst``."""
    _check(length, dst, src)
    dst[:length] = src[:length]
    return dst


def memmove(buffer: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Copy ``length`` bytes within ``buffer`` from offset ``src`` to ``dst``; overlap is safe."""
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check(length, buffer)
    if max(dst, src) + length > len(buffer):
        raise ValueError("move runs past the end of the buffer")
    buffer[dst:dst + length] = bytes(buffer[src:src + length])
    return buffer


def memcmp(first: bytes | bytearray, second: bytes | bytearray, length: int) -> int:
    """Difference of the first unequal bytes within ``length``, or 0 if all match."""
    _check(length, first, second)
    for a, b in zip(first[:length], second[:length]):
        if a != b:
            return a - b
    return 0


def memchr(buffer: bytes | bytearray, value: int, length: int) -> int | None:
    """Index of the first byte equal to ``value`` within ``length``, or None."""
    _check(length, buffer)
    index = buffer.find(value & 0xFF, 0, length)
    return None if index == -1 else index