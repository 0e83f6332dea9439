"""A small printf supporting the %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, Optional, TextIO

_UINT32 = 1 << 32
_UINT64 = 1 << 64


def _as_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an integer, got {type(value).__name__}")
    return value


def _int32(value: int) -> int:
    return (value + (_UINT32 >> 1)) % _UINT32 - (_UINT32 >> 1)


def _fmt_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _fmt_str(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _fmt_signed(value: Any) -> str:
    return str(_int32(_as_int(value, "d")))


def _fmt_unsigned(value: Any) -> str:
    return str(_as_int(value, "u") % _UINT32)


def _fmt_hex_lower(value: Any) -> str:
    return format(_as_int(value, "x") % _UINT32, "x")


def _fmt_hex_upper(value: Any) -> str:
    return format(_as_int(value, "X") % _UINT32, "X")


def _fmt_pointer(value: Any) -> str:
    address = 0 if value is None else _as_int(value, "p") % _UINT64
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _fmt_char,
    "s": _fmt_str,
    "p": _fmt_pointer,
    "d": _fmt_signed,
    "i": _fmt_signed,
    "u": _fmt_unsigned,
    "x": _fmt_hex_lower,
    "X": _fmt_hex_upper,
}


def _next_arg(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def format_printf(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the resulting text.

    An unknown conversion drops the ``%`` and keeps the character after it;
    a lone ``%`` at the end is dropped. Integers wrap to 32 bits as C ints.
    """
    values = iter(args)
    chars = iter(fmt)
    out: list[str] = []
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            out.append("%")
        elif spec in _CONVERSIONS:
            out.append(_CONVERSIONS[spec](_next_arg(values, spec)))
        else:
            out.append(spec)
    return "".join(out)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the expanded format to ``stream`` (stdout by default); return its length."""
    text = format_printf(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)