"""Strategies that sort stack A using the recorded stack operations."""

from __future__ import annotations

from typing import Iterable, List, NamedTuple

from .parsing import rank_values
from .stacks import Stacks

_LONG_MAX = 2**63 - 1
_BASE = 2
_SMALL_LIMIT = 7


class MinMax(NamedTuple):
    """Extremes of stack A.

    ``min_updates`` counts how often a new minimum was met while scanning A
    from the top; it serves as a rough guide to where the minimum lies.
    """

    min_updates: int
    maximum: int
    minimum: int


def min_max(stacks: Stacks) -> MinMax:
    """Scan stack A for its smallest and largest values."""
    minimum = _LONG_MAX
    maximum = 0
    updates = 0
    for value in stacks.a:
        if value < minimum:
            minimum = value
            updates += 1
        if value > maximum:
            maximum = value
    return MinMax(updates, maximum, minimum)


def _three_sorted(stacks: Stacks, extremes: MinMax) -> bool:
    top = stacks.split
    items = stacks.items
    return items[top] == extremes.minimum and items[top + 2] == extremes.maximum


def sort_three(stacks: Stacks) -> None:
    """Sort a stack A of exactly three elements."""
    extremes = min_max(stacks)
    items = stacks.items
    while not _three_sorted(stacks, extremes):
        top = stacks.split
        if items[top] == extremes.maximum and not _three_sorted(stacks, extremes):
            stacks.ra()
        if items[top + 1] == extremes.maximum and not _three_sorted(stacks, extremes):
            stacks.rra()
        if items[top + 2] == extremes.maximum and not _three_sorted(stacks, extremes):
            stacks.sa()


def sort_small(stacks: Stacks) -> None:
    """Push minima to B until three remain, sort those, then bring B back."""
    pushed = 0
    while stacks.size > 3 + pushed:
        extremes = min_max(stacks)
        while stacks.items[stacks.split] != extremes.minimum:
            if extremes.min_updates > (stacks.size - stacks.split) // 2:
                stacks.rra()
            else:
                stacks.ra()
        stacks.pb()
        pushed += 1
    sort_three(stacks)
    while stacks.split > 0:
        stacks.pa()


def _digit_count(n: int, base: int) -> int:
    count = 0
    while True:
        count += 1
        n //= base
        if n == 0:
            return count


def radix_sort(stacks: Stacks) -> None:
    """Binary LSD radix sort of non-negative ranks in stack A."""
    for bit in range(_digit_count(stacks.size, _BASE)):
        for _ in range(stacks.size):
            if (stacks.items[stacks.split] >> bit) & 1 == 0:
                stacks.pb()
            else:
                stacks.ra()
        while stacks.split > 0:
            stacks.pa()


def solve(values: Iterable[int]) -> List[str]:
    """Return the operations that sort ``values``.

    Duplicate values raise :class:`~pushswap.parsing.InputError`; values
    already in order need no operations.
    """
    ranks = rank_values(values)
    if ranks == sorted(ranks):
        return []
    stacks = Stacks(ranks)
    if stacks.size == 2:
        stacks.sa()
    elif stacks.size < _SMALL_LIMIT:
        sort_small(stacks)
    else:
        radix_sort(stacks)
    return list(stacks.operations)