"""String helpers with bounded copies, searches, comparisons and splitting.

A ``None`` argument stands for a missing string. Functions that tolerate a
missing string say so. Search functions return an index, or ``None`` when
nothing is found.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any, Optional, Union

Char = Union[str, int]

_NUL = "\0"


def _char(c: Char) -> str:
    """Normalise a one-character string or an integer code to a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {c!r}")
    return chr(c % 256)


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def strlen(s: Optional[str]) -> int:
    """Length of ``s``; a missing string has length 0."""
    return 0 if s is None else len(s)


def strlcpy(src: Optional[str], size: int) -> tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copy and the full length of ``src``. A size of 0 copies
    nothing; a missing source gives an empty copy and length 0.
    """
    _non_negative(size, "size")
    if src is None:
        return "", 0
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strlcat(dst: Optional[str], src: Optional[str], size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` so the result stays under ``size`` characters.

    Returns the resulting string and the length it tried to create. When
    ``size`` is below the length of ``dst`` nothing is appended and the
    length reported is ``len(src) + size``.
    """
    _non_negative(size, "size")
    if dst is None or src is None:
        return dst if dst is not None else "", 0
    if size < len(dst):
        return dst, len(src) + size
    appended, _ = strlcpy(src, size - len(dst))
    return dst + appended, len(src) + len(dst)


def strchr(s: str, c: Char) -> Optional[int]:
    """Index of the first ``c`` in ``s``.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    found = s.find(ch)
    return None if found < 0 else found


def strrchr(s: str, c: Char) -> Optional[int]:
    """Index of the last ``c`` in ``s``.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    found = s.rfind(ch)
    return None if found < 0 else found


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the codes at the first position where the
    strings differ or one of them ends, and 0 if none is found.
    """
    _non_negative(n, "n")
    for position in range(n):
        a = ord(s1[position]) if position < len(s1) else 0
        b = ord(s2[position]) if position < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` within the first ``length`` characters of ``haystack``.

    An empty needle is found at index 0.
    """
    _non_negative(length, "length")
    if not needle:
        return 0
    found = haystack[:length].find(needle)
    return None if found < 0 else found


def strdup(s: str) -> str:
    """A copy of ``s``."""
    if s is None:
        raise TypeError("cannot duplicate a missing string")
    return "".join(s)


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """At most ``length`` characters of ``s`` from ``start``.

    A start past the end gives an empty string; a missing string gives None.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if s is None:
        return None
    return s[start : start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """``s1`` followed by ``s2``; a missing side counts as empty.

    Returns None only when both are missing.
    """
    if s1 is None and s2 is None:
        return None
    return (s1 or "") + (s2 or "")


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """``s`` without leading and trailing characters found in ``charset``."""
    if s is None or charset is None:
        return None
    return s.strip(charset)


def split(s: Optional[str], sep: Char) -> Optional[list[str]]:
    """Words of ``s`` separated by runs of ``sep``; empty words are dropped."""
    if s is None:
        return None
    ch = _char(sep)
    return [word for word in s.split(ch) if word]


def strmapi(s: Optional[str], func: Optional[Callable[[int, str], str]]) -> Optional[str]:
    """A new string made of ``func(index, char)`` for every character of ``s``."""
    if s is None or func is None:
        return None
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(
    s: Optional[MutableSequence[Any]],
    func: Optional[Callable[[int, Any], Any]],
) -> None:
    """Call ``func(index, item)`` on every item of a mutable sequence.

    A result other than None replaces the item in place.
    """
    if s is None or func is None:
        return
    for index, item in enumerate(list(s)):
        replacement = func(index, item)
        if replacement is not None:
            s[index] = replacement