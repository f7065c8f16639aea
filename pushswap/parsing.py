"""Reading the integers given on the command line and ranking them."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .ascii import is_digit
from .strings import split, strtrim

_WHITESPACE = frozenset(" \f\n\r\t\v")
_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)


class InputError(ValueError):
    """The arguments do not describe a valid list of distinct integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def parse_int(text: str) -> int:
    """Parse a whole token as a 32-bit signed integer.

    Leading whitespace and one sign are allowed; everything after that must
    be a digit. Out-of-range values raise :class:`InputError`.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    negative = pos < len(text) and text[pos] == "-"
    if pos < len(text) and text[pos] in "+-":
        pos += 1
    digits = text[pos:]
    if not digits or not all(is_digit(ch) for ch in digits):
        raise InputError()
    value = -int(digits) if negative else int(digits)
    if not _INT_MIN <= value <= _INT_MAX:
        raise InputError()
    return value


def parse_arguments(args: Sequence[str]) -> List[int]:
    """Collect the integers from the arguments, each split on spaces.

    An argument that is empty or holds only spaces is an error.
    """
    values: List[int] = []
    for arg in args:
        trimmed = strtrim(arg, " ")
        if not trimmed:
            raise InputError()
        values.extend(parse_int(token) for token in split(trimmed, " "))
    return values


def rank_values(values: Iterable[int]) -> List[int]:
    """Replace each value by its position in sorted order.

    Duplicate values raise :class:`InputError`.
    """
    values = list(values)
    ordered = sorted(values)
    if any(x == y for x, y in zip(ordered, ordered[1:])):
        raise InputError()
    rank = {value: index for index, value in enumerate(ordered)}
    return [rank[value] for value in values]