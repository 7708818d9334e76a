"""Character classification and case conversion for ASCII codes."""

from __future__ import annotations

from typing import Union

Char = Union[str, int]

_DIGITS = frozenset("0123456789")


def _code(c: Char) -> int:
    """Return the code point for a one-character string or an integer code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {c!r}")
    return c


def is_alpha(c: Char) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: Char) -> bool:
    """True for the ASCII digits 0-9."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def is_alnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def is_integer_text(text: str) -> bool:
    """True if ``text`` is an optional sign followed only by ASCII digits.

    A sign counts only when a digit follows it; the empty string is accepted.
    """
    rest = text
    if rest[:1] == "-" and rest[1:2] in _DIGITS and rest[1:2]:
        rest = rest[1:]
    if rest[:1] == "+" and rest[1:2] in _DIGITS and rest[1:2]:
        rest = rest[1:]
    return all(ch in _DIGITS for ch in rest)


def _convert(c: Char, code: int) -> Char:
    return chr(code) if isinstance(c, str) else code


def to_upper(c: Char) -> Char:
    """Map a-z to A-Z; anything else is returned unchanged, in the same form."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _convert(c, code)


def to_lower(c: Char) -> Char:
    """Map A-Z to a-z; anything else is returned unchanged, in the same form."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _convert(c, code)