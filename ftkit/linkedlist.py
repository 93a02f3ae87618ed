"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

__all__ = ["Node", "LinkedList"]


@dataclass(eq=False)
class Node:
    """One cell of a linked list."""

    content: Any
    next: Optional[Node] = None


class LinkedList:
    """A singly linked list that keeps a reference to its first node."""

    def __init__(self) -> None:
        self.head: Optional[Node] = None

    @classmethod
    def from_iterable(cls, items: Iterable[Any]) -> LinkedList:
        """Build a list holding *items* in order."""
        result = cls()
        tail: Optional[Node] = None
        for item in items:
            node = Node(item)
            if tail is None:
                result.head = node
            else:
                tail.next = node
            tail = node
        return result

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert *content* at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append *content* at the end and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """The last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Empty the list, passing each content to *delete* from last to first."""
        contents = self.to_list()
        self.head = None
        if delete is not None:
            for content in reversed(contents):
                delete(content)

    def each_reversed(self, func: Callable[[Any], Any]) -> None:
        """Call *func* on every content, starting from the last one."""
        for content in reversed(self.to_list()):
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Optional[Callable[[Any], Any]] = None,
    ) -> LinkedList:
        """A new list of ``func(content)`` for each content, in order.

        Mapping stops at the first content for which *func* returns None; the
        results gathered before it form the new list. If *func* raises, the
        results gathered so far are passed to *delete* before the error
        propagates.
        """
        mapped: list[Any] = []
        try:
            for content in self:
                result = func(content)
                if result is None:
                    break
                mapped.append(result)
        except BaseException:
            if delete is not None:
                for result in mapped:
                    delete(result)
            raise
        return LinkedList.from_iterable(mapped)

    def to_list(self) -> list[Any]:
        """The contents as a Python list."""
        return list(self)

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({self.to_list()!r})"