"""Stacks: a bounded stack, a stack with constant-time maximum, and stack algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when reading from or popping an empty stack."""


class BoundedStack:
    """A stack that holds at most ``capacity`` values."""

    def __init__(self, capacity: int, values: Iterable[Any] = ()) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []
        for value in values:
            self.push(value)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack down to the bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.capacity}, {self._items!r})"

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        if self.is_full():
            raise StackOverflowError("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self, pos: int) -> Any:
        """Return the value ``pos`` places below the top (0 is the top)."""
        if not 0 <= pos < len(self._items):
            raise IndexError(f"no element at position {pos}")
        return self._items[-1 - pos]

    def top(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity


class MaxStack:
    """A stack that reports its maximum in constant time without a second stack.

    When a new maximum ``x`` is pushed, ``2 * x - old_max`` is stored instead, a
    value greater than ``x`` that lets the previous maximum be recovered on pop.
    """

    def __init__(self) -> None:
        self._items: list[Any] = []
        self._max: Optional[Any] = None

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        if not self._items:
            self._max = value
            self._items.append(value)
        elif value > self._max:
            self._items.append(2 * value - self._max)
            self._max = value
        else:
            self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        stored = self._items.pop()
        if stored > self._max:
            value = self._max
            self._max = 2 * self._max - stored
        else:
            value = stored
        if not self._items:
            self._max = None
        return value

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        stored = self._items[-1]
        return self._max if stored > self._max else stored

    def maximum(self) -> Any:
        """Return the largest value on the stack."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._max


def reverse_string(text: str) -> str:
    """Return ``text`` reversed by pushing its characters and popping them back."""
    stack = list(text)
    return "".join(stack.pop() for _ in range(len(stack)))


_PRECEDENCE = {"*": 2, "/": 2, "+": 1, "-": 1}


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Operators are ``+ - * /``; every other character is copied as an operand.
    """
    output: list[str] = []
    operators: list[str] = []
    chars = iter(infix)
    pending = next(chars, None)
    while pending is not None:
        if pending not in _PRECEDENCE:
            output.append(pending)
            pending = next(chars, None)
            continue
        top = _PRECEDENCE[operators[-1]] if operators else 0
        if _PRECEDENCE[pending] > top:
            operators.append(pending)
            pending = next(chars, None)
        else:
            output.append(operators.pop())
    output.extend(reversed(operators))
    return "".join(output)