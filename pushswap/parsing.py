"""Reading and checking the integers given on the command line."""

from __future__ import annotations

from collections.abc import Sequence

from .chars import is_integer_text
from .conversions import INT_MAX, INT_MIN, atoi, atol
from .textops import split


class ArgumentError(ValueError):
    """Raised when the arguments are not distinct 32-bit integers."""


def _as_int32(n: int) -> int:
    value = n & 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def has_repeat(value: int, words: Sequence[str], position: int) -> bool:
    """True if a word after ``position`` reads as ``value``."""
    return any(atol(word) == value for word in words[position + 1 :])


def argument_words(args: Sequence[str]) -> list[str]:
    """The number words: a single argument is split on spaces."""
    if len(args) == 1:
        return split(args[0], " ") or []
    return list(args)


def validate_args(args: Sequence[str]) -> list[str]:
    """Check every word is a distinct integer in the 32-bit range.

    Returns the words; raises ArgumentError otherwise.
    """
    words = argument_words(args)
    for position, word in enumerate(words):
        value = atol(word)
        if (
            not is_integer_text(word)
            or has_repeat(_as_int32(value), words, position)
            or value < INT_MIN
            or value > INT_MAX
        ):
            raise ArgumentError("Error")
    return words


def parse_values(args: Sequence[str]) -> list[int]:
    """The integers of the arguments, in order."""
    return [atoi(word) for word in argument_words(args)]


def index_values(values: Sequence[int]) -> list[int]:
    """Rank of each value in sorted order; equal values rank by position."""
    order = sorted(range(len(values)), key=lambda position: values[position])
    ranks = [0] * len(values)
    for rank, position in enumerate(order):
        ranks[position] = rank
    return ranks