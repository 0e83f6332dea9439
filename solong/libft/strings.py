"""String helpers: integer conversion, splitting, trimming and searching."""

from __future__ import annotations

from typing import Optional

_SPACES = frozenset(" \t\n\v\f\r")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one sign.

    Parsing stops at the first non-digit; text with no digits gives 0.
    """
    i = 0
    while i < len(text) and text[i] in _SPACES:
        i += 1
    sign = 1
    if i < len(text) and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    start = i
    while i < len(text) and "0" <= text[i] <= "9":
        i += 1
    digits = text[start:i]
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    return str(int(n))


def split(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty fields."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if text is None or charset is None:
        raise TypeError("text and charset must be strings")
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end, or a zero length, gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text) or length == 0:
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[str]:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    Returns the rest of ``haystack`` from the match, the whole of it for an
    empty needle, or None when there is no match.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return haystack
    index = haystack[:length].find(needle)
    if index < 0:
        return None
    return haystack[index:]