"""Singly linked lists and cycle detection on chains of nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import zip_longest
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """A node of a singly linked chain."""

    data: Any
    next: Optional["Node"] = None


class SinglyLinkedList:
    """A linked list that keeps only a reference to its first node."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for value in values:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _find(self, value: Any) -> Node:
        for node in self._nodes():
            if node.data == value:
                return node
        raise ValueError(f"{value!r} is not in the list")

    def insert_beginning(self, value: Any) -> None:
        """Put ``value`` in front of the first node."""
        self.head = Node(value, self.head)

    def insert_end(self, value: Any) -> None:
        """Append ``value`` after the last node."""
        node = Node(value)
        if self.head is None:
            self.head = node
            return
        last = self.head
        while last.next is not None:
            last = last.next
        last.next = node

    def insert_before(self, value: Any, before: Any) -> None:
        """Insert ``value`` in front of the first node holding ``before``."""
        if self.head is not None and self.head.data == before:
            self.insert_beginning(value)
            return
        previous = self.head
        while previous is not None and previous.next is not None:
            if previous.next.data == before:
                previous.next = Node(value, previous.next)
                return
            previous = previous.next
        raise ValueError(f"{before!r} is not in the list")

    def insert_after(self, value: Any, after: Any) -> None:
        """Insert ``value`` right after the first node holding ``after``."""
        node = self._find(after)
        node.next = Node(value, node.next)

    def delete_beginning(self) -> Any:
        """Remove the first node and return its value."""
        if self.head is None:
            raise IndexError("delete from an empty list")
        removed = self.head
        self.head = removed.next
        return removed.data

    def delete_end(self) -> Any:
        """Remove the last node and return its value."""
        if self.head is None:
            raise IndexError("delete from an empty list")
        if self.head.next is None:
            return self.delete_beginning()
        previous = self.head
        while previous.next.next is not None:
            previous = previous.next
        removed = previous.next
        previous.next = None
        return removed.data

    def delete_value(self, value: Any) -> None:
        """Remove the first node holding ``value``."""
        if self.head is not None and self.head.data == value:
            self.delete_beginning()
            return
        previous = self.head
        while previous is not None and previous.next is not None:
            if previous.next.data == value:
                previous.next = previous.next.next
                return
            previous = previous.next
        raise ValueError(f"{value!r} is not in the list")

    def delete_after(self, value: Any) -> Any:
        """Remove the node following the first node holding ``value``; return its value."""
        node = self._find(value)
        removed = node.next
        if removed is None:
            raise ValueError(f"no node follows {value!r}")
        node.next = removed.next
        return removed.data

    def clear(self) -> None:
        """Remove every node."""
        self.head = None

    def sort(self) -> None:
        """Sort the values ascending in place by exchanging node data."""
        outer = self.head
        while outer is not None and outer.next is not None:
            inner = outer.next
            while inner is not None:
                if outer.data > inner.data:
                    outer.data, inner.data = inner.data, outer.data
                inner = inner.next
            outer = outer.next


def compare_lists(first: Iterable[Any], second: Iterable[Any]) -> bool:
    """Return True if the two sequences agree on every position both of them have."""
    marker = object()
    for a, b in zip_longest(first, second, fillvalue=marker):
        if a is marker or b is marker:
            return True
        if a != b:
            return False
    return True


def _meeting_point(head: Optional[Node]) -> Optional[Node]:
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
        if fast is slow:
            return slow
    return None


def has_cycle(head: Optional[Node]) -> bool:
    """Return True if following ``next`` from ``head`` loops forever."""
    return _meeting_point(head) is not None


def cycle_start(head: Optional[Node]) -> Optional[Node]:
    """Return the node where the cycle reachable from ``head`` begins, or None."""
    slow = _meeting_point(head)
    if slow is None:
        return None
    fast = head
    while fast is not slow:
        fast = fast.next
        slow = slow.next
    return slow