"""Writing characters, strings and numbers to streams, and a small printf."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, Optional, TextIO, Union

from .conversions import itoa

Char = Union[str, int]

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _as_char(c: Char) -> str:
    """A one-character string from a character or a byte-sized code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {c!r}")
    return chr(c & 0xFF)


def _as_int32(n: int) -> int:
    """Wrap an integer to the signed 32-bit range."""
    value = n & _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def put_char(c: Char, stream: Optional[TextIO] = None) -> None:
    """Write one character to ``stream`` (standard output by default)."""
    _target(stream).write(_as_char(c))


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s``; a missing string writes nothing."""
    if s is None:
        return
    _target(stream).write(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline; a missing string writes nothing."""
    if s is None:
        return
    _target(stream).write(s + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of a 32-bit signed integer."""
    _target(stream).write(itoa(n))


def format_hex(n: int, upper: bool = False) -> str:
    """Hexadecimal digits of ``n`` taken as a 32-bit unsigned value."""
    text = format(n & _UINT_MASK, "x")
    return text.upper() if upper else text


def format_pointer(address: int) -> str:
    """An address as ``0x`` followed by lowercase hexadecimal digits."""
    return "0x" + format(address & _POINTER_MASK, "x")


def format_unsigned(n: int) -> str:
    """Decimal digits of ``n`` taken as a 32-bit unsigned value."""
    return str(n & _UINT_MASK)


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "c":
        return _as_char(_next_arg(args, spec))
    if spec == "s":
        value = _next_arg(args, spec)
        return "(null)" if value is None else str(value)
    if spec == "p":
        return format_pointer(_next_arg(args, spec))
    if spec in ("d", "i"):
        return itoa(_as_int32(_next_arg(args, spec)))
    if spec == "u":
        return format_unsigned(_next_arg(args, spec))
    if spec in ("x", "X"):
        return format_hex(_next_arg(args, spec), spec == "X")
    if spec == "%":
        return "%"
    return ""


def format_printf(fmt: str, *args: Any) -> str:
    """Expand the conversions %c %s %p %d %i %u %x %X and %% in ``fmt``.

    An unknown conversion, and a lone trailing %, produce nothing.
    """
    values = iter(args)
    chars = iter(fmt)
    parts = []
    for ch in chars:
        if ch == "%":
            spec = next(chars, "")
            parts.append(_convert(spec, values))
        else:
            parts.append(ch)
    return "".join(parts)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write ``format_printf(fmt, *args)`` and return the number of characters."""
    text = format_printf(fmt, *args)
    _target(stream).write(text)
    return len(text)