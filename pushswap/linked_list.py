"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One element of a :class:`LinkedList`."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list built from :class:`Node` objects."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the start of the list and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the end of the list and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """The final node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on the content of every node, front to back."""
        for content in self:
            func(content)

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Empty the list, passing each content to ``delete`` if one is given."""
        if delete is not None:
            for content in self:
                delete(content)
        self.head = None

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Optional[Callable[[Any], Any]] = None,
    ) -> "LinkedList":
        """A new list of ``func(content)`` for every element.

        If ``func`` raises, the contents built so far are handed to
        ``delete`` (when given) and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result