"""A small formatted printer supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"
_DECIMAL = "0123456789"
_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - 0x100000000 if value >= 0x80000000 else value


def _write(text: str, stream: TextIO) -> int:
    stream.write(text)
    return len(text)


def put_number_base(
    n: int, base: int, digits: str, stream: Optional[TextIO] = None
) -> int:
    """Write the non-negative ``n`` in ``base`` using ``digits``; return the count."""
    if base < 2 or len(digits) < base:
        raise ValueError("base must be at least 2 and covered by the digit set")
    if n < 0:
        raise ValueError("n must not be negative")
    out = []
    while True:
        n, remainder = divmod(n, base)
        out.append(digits[remainder])
        if n == 0:
            break
    return _write("".join(reversed(out)), _target(stream))


def put_int(n: int, stream: Optional[TextIO] = None) -> int:
    """Write ``n`` in decimal, with a minus sign when negative; return the count."""
    return _write(str(n), _target(stream))


def put_string(text: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write ``text``, or ``(null)`` for None; return the count."""
    return _write("(null)" if text is None else text, _target(stream))


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _convert(spec: str, args: Iterator[Any], out: TextIO) -> int:
    if spec == "%":
        return _write("%", out)
    if spec == "c":
        value = _next_arg(args)
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError(f"expected a single character, got {value!r}")
            return _write(value, out)
        return _write(chr(value & 0xFF), out)
    if spec == "s":
        return put_string(_next_arg(args), out)
    if spec == "p":
        value = _next_arg(args)
        address = 0 if value is None else value & _ULONG_MASK
        return put_string("0x", out) + put_number_base(address, 16, _LOWER_HEX, out)
    if spec in ("d", "i"):
        return put_int(_to_int32(_next_arg(args)), out)
    if spec == "u":
        return put_number_base(_next_arg(args) & _UINT_MASK, 10, _DECIMAL, out)
    if spec == "x":
        return put_number_base(_next_arg(args) & _UINT_MASK, 16, _LOWER_HEX, out)
    if spec == "X":
        return put_number_base(_next_arg(args) & _UINT_MASK, 16, _UPPER_HEX, out)
    return 0


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write ``fmt`` with its conversions filled from ``args``; return the count.

    Unknown conversions write nothing and consume no argument. A lone ``%``
    at the end of the format writes nothing.
    """
    out = _target(stream)
    values = iter(args)
    chars = iter(fmt)
    written = 0
    for ch in chars:
        if ch != "%":
            written += _write(ch, out)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        written += _convert(spec, values, out)
    return written