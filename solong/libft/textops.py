"""Basic string operations: length, copy, join, compare, search and bounded copy."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence, Optional, TypeVar

T = TypeVar("T")

_NUL = "\0"


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def strlen(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(text)


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return "".join(text)


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return f"{first}{second}"


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the code point difference at the first mismatch, or 0 when the
    compared parts are equal. The end of a string compares as NUL, and
    comparison stops where both strings hold NUL.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for a, b in zip_longest(first[:n], second[:n], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            return 0
    return 0


def strchr(text: str, c: str) -> Optional[str]:
    """Return ``text`` from the first occurrence of ``c``, or None.

    Searching for NUL finds the end of the string and gives "".
    """
    c = _single_char(c)
    if c == _NUL:
        return ""
    index = text.find(c)
    return None if index < 0 else text[index:]


def strrchr(text: str, c: str) -> Optional[str]:
    """Return ``text`` from the last occurrence of ``c``, or None.

    Searching for NUL finds the end of the string and gives "".
    """
    c = _single_char(c)
    if c == _NUL:
        return ""
    index = text.rfind(c)
    return None if index < 0 else text[index:]


def strlcpy(dst: str, src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a destination of ``size`` slots, one kept for NUL.

    Returns the new destination contents and the length of ``src``; a zero
    size leaves ``dst`` as it was.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return dst, len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a destination of ``size`` slots.

    Returns the new destination contents and the length the full result
    would have had. When ``size`` does not exceed the length of ``dst``,
    nothing is appended and the length reported is ``len(src) + size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size <= len(dst):
        return dst, len(src) + size
    room = size - len(dst) - 1
    return dst + src[:room], len(src) + len(dst)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(buf: MutableSequence[T], func: Callable[[int, T], Optional[T]]) -> None:
    """Call ``func(index, item)`` for each item of a mutable buffer in place.

    A value returned by ``func`` replaces the item; None leaves it unchanged.
    """
    for index, item in enumerate(buf):
        replacement = func(index, item)
        if replacement is not None:
            buf[index] = replacement