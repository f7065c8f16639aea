"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write a single character."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text``; None writes nothing."""
    if text is None:
        return
    _target(stream).write(text)


def put_endl(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline."""
    out = _target(stream)
    put_str(text, out)
    put_char("\n", out)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal representation of ``n``."""
    _target(stream).write(str(n))