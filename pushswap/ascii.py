"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_WHITESPACE = frozenset(" \f\n\r\t\v")
_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)


def _code(c: CharLike) -> int:
    """Return the character code of a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def _to_int32(value: int) -> int:
    """Wrap an integer to the range of a 32-bit signed int."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def is_alpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return ord(" ") <= _code(c) <= ord("~")


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library does.

    Leading whitespace is skipped, one sign is accepted, and parsing stops at
    the first non-digit. Values that overflow a 64-bit long saturate to its
    limits, and the result is then narrowed to a 32-bit int.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    negative = pos < len(text) and text[pos] == "-"
    if pos < len(text) and text[pos] in "+-":
        pos += 1

    num = 0
    for ch in text[pos:]:
        if not is_digit(ch):
            break
        num = num * 10 + (ord(ch) - ord("0"))
        if not negative and num > _LONG_MAX:
            return _to_int32(_LONG_MAX)
        if negative and num > -_LONG_MIN:
            return _to_int32(_LONG_MIN)
    return _to_int32(-num if negative else num)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)