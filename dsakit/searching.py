"""Searching algorithms over lists and grids."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from typing import Any, Optional


def search_matrix(matrix: Iterable[Iterable[Any]], target: Any) -> bool:
    """Return True if ``target`` appears anywhere in the two-dimensional ``matrix``."""
    return any(target in row for row in matrix)


def _binary_search_range(items: Sequence[Any], low: int, high: int, key: Any) -> Optional[int]:
    """Binary search for ``key`` within ``items[low..high]`` inclusive."""
    while low <= high:
        mid = low + (high - low) // 2
        value = items[mid]
        if value == key:
            return mid
        if value > key:
            high = mid - 1
        else:
            low = mid + 1
    return None


def binary_search(items: Sequence[Any], key: Any) -> Optional[int]:
    """Return the index of ``key`` in the sorted ``items``, or None if absent."""
    start, end = 0, len(items) - 1
    while start <= end:
        mid = (start + end) // 2
        value = items[mid]
        if value == key:
            return mid
        if value > key:
            end = mid - 1
        else:
            start = mid + 1
    return None


def exponential_search(items: Sequence[Any], x: Any) -> Optional[int]:
    """Find ``x`` in sorted ``items`` by doubling a range, then binary searching it."""
    if not items:
        return None
    if items[0] == x:
        return 0
    n = len(items)
    bound = 1
    while bound < n and items[bound] <= x:
        bound *= 2
    return _binary_search_range(items, bound // 2, min(bound, n - 1), x)


def interpolation_search(items: Sequence[Any], x: Any) -> Optional[int]:
    """Find ``x`` in sorted, roughly uniformly spread ``items`` by probing positions."""
    lo, hi = 0, len(items) - 1
    while lo <= hi and items[lo] <= x <= items[hi]:
        if lo == hi:
            return lo if items[lo] == x else None
        span = items[hi] - items[lo]
        if span == 0:
            # Every value in range equals x.
            return lo
        pos = lo + int((hi - lo) * (x - items[lo]) / span)
        value = items[pos]
        if value == x:
            return pos
        if value < x:
            lo = pos + 1
        else:
            hi = pos - 1
    return None


def fibonacci_search(items: Sequence[Any], key: Any) -> Optional[int]:
    """Find ``key`` in sorted ``items`` by splitting ranges along Fibonacci numbers."""
    n = len(items)
    fib2, fib1 = 0, 1
    fib = fib1 + fib2
    while fib < n:
        fib2, fib1 = fib1, fib
        fib = fib1 + fib2

    offset = -1
    while fib > 1:
        i = min(offset + fib2, n - 1)
        value = items[i]
        if value < key:
            fib = fib1
            fib1 = fib2
            fib2 = fib - fib1
            offset = i
        elif value > key:
            fib = fib2
            fib1 = fib1 - fib2
            fib2 = fib - fib1
        else:
            return i

    candidate = offset + 1
    if fib1 and candidate < n and items[candidate] == key:
        return candidate
    return None


def linear_search(items: Iterable[Any], item: Any) -> list[int]:
    """Return every index at which ``item`` occurs, scanning front to back."""
    return [index for index, value in enumerate(items) if value == item]


def has_pair_with_sum(items: Sequence[Any], k: Any) -> bool:
    """Return True if two values of sorted ``items`` add up to ``k``.

    Each value is looked up against the whole list, so a value may pair with itself.
    """
    size = len(items)
    for value in items:
        wanted = k - value
        index = bisect_left(items, wanted)
        if index < size and items[index] == wanted:
            return True
    return False


def two_sum(nums: Iterable[Any], target: Any) -> Optional[tuple[int, int]]:
    """Return ``(later, earlier)`` indices of two numbers summing to ``target``, or None."""
    seen: dict[Any, int] = {}
    for index, value in enumerate(nums):
        earlier = seen.get(target - value)
        if earlier is not None:
            return index, earlier
        seen[value] = index
    return None