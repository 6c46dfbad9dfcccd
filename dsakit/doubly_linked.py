"""A doubly linked list that can be walked in both directions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class _Node:
    data: Any
    prev: Optional[_Node] = None
    next: Optional[_Node] = None


class DoublyLinkedList:
    """A linked list whose nodes point both to their successor and predecessor."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        for value in values:
            self.insert_end(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _find(self, value: Any) -> _Node:
        for node in self._nodes():
            if node.data == value:
                return node
        raise ValueError(f"{value!r} is not in the list")

    def _link_after(self, node: _Node, value: Any) -> None:
        new = _Node(value, node, node.next)
        if node.next is None:
            self._tail = new
        else:
            node.next.prev = new
        node.next = new

    def _unlink(self, node: _Node) -> Any:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        return node.data

    def insert_beginning(self, value: Any) -> None:
        """Put ``value`` in front of the first node."""
        new = _Node(value, None, self._head)
        if self._head is None:
            self._tail = new
        else:
            self._head.prev = new
        self._head = new

    def insert_end(self, value: Any) -> None:
        """Append ``value`` after the last node."""
        if self._tail is None:
            self.insert_beginning(value)
        else:
            self._link_after(self._tail, value)

    def insert_before(self, value: Any, before: Any) -> None:
        """Insert ``value`` in front of the first node holding ``before``."""
        node = self._find(before)
        if node.prev is None:
            self.insert_beginning(value)
        else:
            self._link_after(node.prev, value)

    def insert_after(self, value: Any, after: Any) -> None:
        """Insert ``value`` right after the first node holding ``after``."""
        self._link_after(self._find(after), value)

    def insert_at(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at zero-based ``index``."""
        if index == 0:
            self.insert_beginning(value)
            return
        if index > 0:
            for position, node in enumerate(self._nodes(), 1):
                if position == index:
                    self._link_after(node, value)
                    return
        raise IndexError(f"insert position {index} out of range")

    def delete_beginning(self) -> Any:
        """Remove the first node and return its value."""
        if self._head is None:
            raise IndexError("delete from an empty list")
        return self._unlink(self._head)

    def delete_end(self) -> Any:
        """Remove the last node and return its value."""
        if self._tail is None:
            raise IndexError("delete from an empty list")
        return self._unlink(self._tail)

    def delete_position(self, position: int) -> Any:
        """Remove the node at one-based ``position`` and return its value."""
        if self._head is None:
            raise IndexError("delete from an empty list")
        if position >= 1:
            for current, node in enumerate(self._nodes(), 1):
                if current == position:
                    return self._unlink(node)
        raise IndexError(f"position {position} out of range")

    def clear(self) -> None:
        """Remove every node."""
        self._head = self._tail = None