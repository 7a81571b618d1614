"""Text helpers with the semantics of classic NUL-terminated string routines.

Positions are returned as indices (or None when nothing is found) rather
than pointers, and operations that would write into a caller's buffer
return the new text instead.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

CharLike = int | str


def _char(c: CharLike) -> str:
    if isinstance(c, int):
        return chr(c)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def strlen(text: str) -> int:
    """Number of characters in ``text``."""
    return len(text)


def strchr(text: str, c: CharLike) -> int | None:
    """Index of the first occurrence of ``c``, or None.

    Searching for the NUL character finds the terminator at ``len(text)``.
    """
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index == -1 else index


def strrchr(text: str, c: CharLike) -> int | None:
    """Index of the last occurrence of ``c``, or None.

    Searching for the NUL character finds the terminator at ``len(text)``.
    """
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index == -1 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first unequal code points (a missing
    character counts as 0), or 0 when the compared parts match.
    """
    for i in range(n):
        a = ord(first[i]) if i < len(first) else 0
        b = ord(second[i]) if i < len(second) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    index = haystack[:max(length, 0)].find(needle)
    return None if index == -1 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``, so truncation
    happened whenever the length is at least ``size``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full concatenation would
    have had (``min(len(dst), size) + len(src)``). When ``dst`` already
    fills the buffer it is returned unchanged.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    used = min(len(dst), size)
    if used < size:
        room = size - 1 - used
        dst = dst + src[:room]
    return dst, used + len(src)


def strdup(text: str) -> str:
    """A copy of ``text``."""
    return str(text)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` beginning at ``start``.

    A start at or beyond the end yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """``first`` followed by ``second``."""
    return first + second


def strtrim(text: str, charset: str) -> str:
    """``text`` with characters from ``charset`` removed from both ends."""
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, sep: CharLike) -> list[str]:
    """Words of ``text`` separated by runs of ``sep``; empty words are dropped."""
    ch = _char(sep)
    return [word for word in text.split(ch) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """New text built from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    text: MutableSequence,
    func: Callable[[int, object], object],
) -> None:
    """Call ``func(index, item)`` for each item of ``text``, in place.

    A value returned by ``func`` replaces the item; None leaves it as is.
    """
    for index, item in enumerate(text):
        result = func(index, item)
        if result is not None:
            text[index] = result