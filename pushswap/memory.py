"""Byte-buffer operations on bytearrays."""

from __future__ import annotations

import sys
from typing import Optional

_SIZE_MAX = 2**64 - 1 if sys.maxsize > 2**32 else 2**32 - 1


def _check_length(length: int, *sizes: int) -> None:
    if length < 0:
        raise ValueError("length must not be negative")
    if any(length > size for size in sizes):
        raise ValueError("length exceeds buffer size")


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buffer`` with ``value``."""
    _check_length(length, len(buffer))
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> bytearray:
    """Zero the first ``length`` bytes of ``buffer``."""
    return memset(buffer, 0, length)


def memcpy(dst: bytearray, src: bytes, length: int) -> bytearray:
    """Copy ``length`` bytes from ``src`` into the start of ``dst``."""
    _check_length(length, len(dst), len(src))
    dst[:length] = src[:length]
    return dst


def memmove(buffer: bytearray, dest: int, src: int, length: int) -> bytearray:
    """Move ``length`` bytes within ``buffer`` from offset ``src`` to ``dest``.

    Overlapping regions are handled correctly.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_length(length, len(buffer) - dest, len(buffer) - src)
    if length:
        buffer[dest:dest + length] = bytes(buffer[src:src + length])
    return buffer


def memchr(data: bytes, value: int, length: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` within ``length`` bytes."""
    _check_length(length, len(data))
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: bytes, second: bytes, length: int) -> int:
    """Compare ``length`` bytes; return the difference of the first mismatch."""
    _check_length(length, len(first), len(second))
    for a, b in zip(first[:length], second[:length]):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes.

    A request for zero bytes yields a one-byte buffer. A product that would
    overflow the platform's size type raises MemoryError.
    """
    if count == 0 or size == 0:
        count = size = 1
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count > _SIZE_MAX // size:
        raise MemoryError("requested size overflows")
    return bytearray(count * size)