"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"

CharLike = int | str


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def isalpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for a code point in the 7-bit ASCII range."""
    return 0 <= _code(c) < 128


def isprint(c: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return 31 < _code(c) < 127


def tolower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(c)
    if 64 < code < 91:
        code += 32
    return chr(code) if isinstance(c, str) else code


def toupper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    if 96 < code < 123:
        code -= 32
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one optional sign.

    Parsing stops at the first non-digit; text without digits yields 0.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] == "-":
        sign = -1
        stripped = stripped[1:]
    elif stripped[:1] == "+":
        stripped = stripped[1:]
    value = 0
    for ch in stripped:
        if not isdigit(ch):
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return sign * value


def numlen(n: int) -> int:
    """Number of characters needed to write ``n`` in decimal, sign included."""
    length = 1 if n <= 0 else 0
    n = abs(n)
    while n:
        length += 1
        n //= 10
    return length


def itoa(n: int) -> str:
    """Decimal text of ``n``."""
    digits = []
    magnitude = abs(n)
    while True:
        magnitude, digit = divmod(magnitude, 10)
        digits.append("0123456789"[digit])
        if not magnitude:
            break
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))