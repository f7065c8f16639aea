"""String helpers with C-string semantics on Python ``str`` values.

Searches return indices instead of pointers; the position one past the last
character stands for the terminating NUL. A ``"\\0"`` inside a string ends it.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, MutableSequence, Optional, Tuple, Union

CharLike = Union[int, str]

_NUL = "\0"


def _char(c: CharLike) -> str:
    """Normalise an int code or a one-character string to a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c)


def _c_string(text: str) -> str:
    """The part of ``text`` before the first NUL, as C would see it."""
    return text.split(_NUL, 1)[0]


def _check_size(size: int, name: str) -> None:
    if size < 0:
        raise ValueError(f"{name} must not be negative")


def strlen(text: str) -> int:
    """Number of characters before the terminating NUL."""
    return len(_c_string(text))


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``text``, or None.

    Searching for NUL finds the terminator at ``strlen(text)``.
    """
    text = _c_string(text)
    chr_ = _char(c)
    if chr_ == _NUL:
        return len(text)
    index = text.find(chr_)
    return None if index < 0 else index


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``text``, or None.

    Searching for NUL finds the terminator at ``strlen(text)``.
    """
    text = _c_string(text)
    chr_ = _char(c)
    if chr_ == _NUL:
        return len(text)
    index = text.rfind(chr_)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; return the code difference at the first mismatch."""
    _check_size(n, "n")
    pairs = zip_longest(first, second, fillvalue=_NUL)
    for a, b in islice(pairs, n):
        if a != b or a == _NUL:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` wholly within the first ``length`` characters of ``haystack``."""
    _check_size(length, "length")
    haystack = _c_string(haystack)
    needle = _c_string(needle)
    if not needle:
        return 0
    index = haystack.find(needle, 0, min(length, len(haystack)))
    return None if index < 0 else index


def strlcpy(dst: str, src: str, dstsize: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``dstsize`` characters.

    Returns the resulting string and the length of ``src``. With a size of
    zero ``dst`` is left as it was.
    """
    _check_size(dstsize, "dstsize")
    src = _c_string(src)
    if dstsize == 0:
        return dst, len(src)
    return src[:dstsize - 1], len(src)


def strlcat(dst: str, src: str, dstsize: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``dstsize`` characters.

    Returns the resulting string and the length it tried to create. When
    ``dst`` already fills the buffer it is returned unchanged.
    """
    _check_size(dstsize, "dstsize")
    dst = _c_string(dst)
    src = _c_string(src)
    dlen = min(len(dst), dstsize)
    total = dlen + len(src)
    if dlen == dstsize:
        return dst, total
    room = dstsize - dlen - 1
    return dst + src[:room], total


def strdup(text: str) -> str:
    """A copy of the string up to its terminator."""
    return _c_string(text)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` starting at ``start``."""
    _check_size(start, "start")
    _check_size(length, "length")
    text = _c_string(text)
    if start > len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return _c_string(first) + _c_string(second)


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return _c_string(text).strip(_c_string(charset))


def split(text: str, sep: CharLike) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    separator = _char(sep)
    text = _c_string(text)
    if separator == _NUL:
        return [text] if text else []
    return [piece for piece in text.split(separator) if piece]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(_c_string(text)))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``func(index, char)`` for each character of ``chars``, in place.

    A non-None result replaces the character. Iteration stops at a NUL.
    """
    for index, ch in enumerate(list(chars)):
        if ch == _NUL:
            break
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement