"""The two stacks of the puzzle and the operations on them.

Both stacks share one list: the front part, up to ``split``, holds stack B
with its top at ``split - 1``; the rest holds stack A with its top at
``split``. Every operation that takes effect is recorded by name.
"""

from __future__ import annotations

from typing import Iterable, List


class Stacks:
    """Stack A starts with ``values`` (first value on top); stack B is empty."""

    def __init__(self, values: Iterable[int]) -> None:
        self.items: List[int] = list(values)
        self.split = 0
        self.operations: List[str] = []

    @property
    def size(self) -> int:
        return len(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @property
    def a(self) -> List[int]:
        """Stack A, top first."""
        return self.items[self.split:]

    @property
    def b(self) -> List[int]:
        """Stack B, top first."""
        return list(reversed(self.items[:self.split]))

    def _record(self, name: str) -> None:
        self.operations.append(name)

    def _a_has_two(self) -> bool:
        return self.size - self.split >= 2

    def sa(self) -> None:
        """Swap the two top elements of A."""
        if self._a_has_two():
            top = self.split
            self.items[top], self.items[top + 1] = self.items[top + 1], self.items[top]
            self._record("sa")

    def sb(self) -> None:
        """Swap the two top elements of B."""
        if self.split >= 2:
            top = self.split - 1
            self.items[top], self.items[top - 1] = self.items[top - 1], self.items[top]
            self._record("sb")

    def ss(self) -> None:
        """Swap the tops of A and of B."""
        self.sa()
        self.sb()

    def pa(self) -> None:
        """Move the top of B onto A."""
        if self.split >= 1:
            self.split -= 1
            self._record("pa")

    def pb(self) -> None:
        """Move the top of A onto B."""
        if self.split != self.size:
            self.split += 1
            self._record("pb")

    def ra(self) -> None:
        """Rotate A up: its top becomes its bottom."""
        if self._a_has_two():
            s = self.split
            self.items[s:] = self.items[s + 1:] + [self.items[s]]
            self._record("ra")

    def rb(self) -> None:
        """Rotate B up: its top becomes its bottom."""
        if self.split >= 2:
            s = self.split
            self.items[:s] = [self.items[s - 1]] + self.items[:s - 1]
            self._record("rb")

    def rr(self) -> None:
        """Rotate both stacks up."""
        self.ra()
        self.rb()

    def rra(self) -> None:
        """Rotate A down: its bottom becomes its top."""
        if self._a_has_two():
            s = self.split
            self.items[s:] = [self.items[-1]] + self.items[s:-1]
            self._record("rra")

    def rrb(self) -> None:
        """Rotate B down: its bottom becomes its top."""
        if self.split >= 2:
            s = self.split
            self.items[:s] = self.items[1:s] + [self.items[0]]
            self._record("rrb")

    def rrr(self) -> None:
        """Rotate both stacks down."""
        self.rra()
        self.rrb()

    def is_sorted(self) -> bool:
        """True when B is empty and A is in ascending order from the top."""
        return self.split == 0 and self.items == sorted(self.items)