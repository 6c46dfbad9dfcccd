"""A circular singly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional

from dsakit.singly_linked import Node


class CircularLinkedList:
    """A singly linked list whose last node points back to the first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._tail: Optional[Node] = None
        for value in values:
            self.insert_end(value)

    @property
    def head(self) -> Optional[Node]:
        """The first node, or None when the list is empty."""
        return None if self._tail is None else self._tail.next

    def _nodes(self) -> Iterator[Node]:
        if self._tail is None:
            return
        node = self._tail.next
        while True:
            yield node
            if node is self._tail:
                return
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def insert_beginning(self, value: Any) -> None:
        """Put ``value`` in front of the first node."""
        node = Node(value)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node

    def insert_end(self, value: Any) -> None:
        """Append ``value`` after the last node."""
        self.insert_beginning(value)
        self._tail = self._tail.next

    def delete_beginning(self) -> Any:
        """Remove the first node and return its value."""
        if self._tail is None:
            raise IndexError("delete from an empty list")
        head = self._tail.next
        if head is self._tail:
            self._tail = None
        else:
            self._tail.next = head.next
        return head.data

    def delete_end(self) -> Any:
        """Remove the last node and return its value."""
        if self._tail is None:
            raise IndexError("delete from an empty list")
        removed = self._tail
        if removed.next is removed:
            self._tail = None
            return removed.data
        previous = removed.next
        while previous.next is not removed:
            previous = previous.next
        previous.next = removed.next
        self._tail = previous
        return removed.data

    def delete_after(self, value: Any) -> Any:
        """Remove the node following the first node holding ``value``; return its value."""
        for node in self._nodes():
            if node.data == value:
                break
        else:
            raise ValueError(f"{value!r} is not in the list")
        removed = node.next
        if removed is node:
            self._tail = None
            return removed.data
        node.next = removed.next
        if removed is self._tail:
            self._tail = node
        return removed.data

    def clear(self) -> None:
        """Remove every node."""
        self._tail = None