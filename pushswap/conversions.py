"""Conversions between decimal text and integers."""

from __future__ import annotations

INT_MAX = 2147483647
INT_MIN = -2147483648

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")


def _scan(text: str) -> tuple[int, str]:
    """Skip leading whitespace and read an optional sign.

    Returns the sign and the remaining text.
    """
    rest = text.lstrip(" \t\n\v\f\r")
    sign = 1
    if rest[:1] in ("-", "+") and rest[:1]:
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    return sign, rest


def _leading_digits(text: str):
    for ch in text:
        if ch not in _DIGITS:
            return
        yield ord(ch) - ord("0")


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Overflow past the 32-bit range gives -1 for positive and 0 for negative
    numbers. Text without digits gives 0.
    """
    sign, rest = _scan(text)
    number = 0
    for digit in _leading_digits(rest):
        number = number * 10 + digit
        if sign == 1 and number > INT_MAX:
            return -1
        if sign == -1 and number > -INT_MIN:
            return 0
    return number * sign


def atol(text: str) -> int:
    """Parse a leading decimal integer as a signed 64-bit value.

    Values beyond 64 bits wrap around in two's complement.
    """
    sign, rest = _scan(text)
    number = 0
    for digit in _leading_digits(rest):
        number = number * 10 + digit
    value = (number * sign) & 0xFFFFFFFFFFFFFFFF
    return value - (1 << 64) if value >= 1 << 63 else value


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {n!r}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} is outside the 32-bit integer range")
    return str(n)