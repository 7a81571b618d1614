"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"
_UINT_MASK = (1 << 32) - 1
_SIZE_MASK = (1 << 64) - 1


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _hex(value: int, digits: str) -> str:
    out = []
    while True:
        value, rest = divmod(value, 16)
        out.append(digits[rest])
        if not value:
            break
    return "".join(reversed(out))


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(value & 0xFF)


def _pointer(value: Any) -> str:
    address = 0 if value is None else int(value) & _SIZE_MASK
    if address == 0:
        return "(nil)"
    return "0x" + _hex(address, _LOWER_HEX)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise ValueError(f"missing argument for %{spec}") from None
    if spec == "c":
        return _char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        return _pointer(value)
    if spec in "di":
        return str(_to_int32(int(value)))
    if spec == "u":
        return str(int(value) & _UINT_MASK)
    digits = _LOWER_HEX if spec == "x" else _UPPER_HEX
    return _hex(int(value) & _UINT_MASK, digits)


def format_printf(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args``.

    Unknown conversions produce nothing and consume no argument; a lone
    ``%`` at the end of the format is dropped.
    """
    values = iter(args)
    parts = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        parts.append(_convert(spec, values))
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its size in bytes."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text.encode("utf-8"))