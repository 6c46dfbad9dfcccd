"""Sorting algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence
from typing import Any


def _compare_and_swap(values: list, i: int, j: int, ascending: bool) -> None:
    if ascending == (values[i] > values[j]):
        values[i], values[j] = values[j], values[i]


def _bitonic_merge(values: list, low: int, count: int, ascending: bool) -> None:
    if count > 1:
        half = count // 2
        for i in range(low, low + half):
            _compare_and_swap(values, i, i + half, ascending)
        _bitonic_merge(values, low, half, ascending)
        _bitonic_merge(values, low + half, half, ascending)


def _bitonic_sort(values: list, low: int, count: int, ascending: bool) -> None:
    if count > 1:
        half = count // 2
        _bitonic_sort(values, low, half, True)
        _bitonic_sort(values, low + half, half, False)
        _bitonic_merge(values, low, count, ascending)


def bitonic_sort(items: Iterable[Any], ascending: bool = True) -> list:
    """Return the items sorted by a bitonic network; the length must be a power of two."""
    values = list(items)
    n = len(values)
    if n & (n - 1):
        raise ValueError(f"bitonic sort needs a power-of-two length, got {n}")
    _bitonic_sort(values, 0, n, ascending)
    return values


def _sift_down(values: list, size: int, root: int) -> None:
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == root:
            return
        values[root], values[largest] = values[largest], values[root]
        root = largest


def heap_sort(items: Iterable[Any]) -> list:
    """Return the items sorted ascending using a max-heap."""
    values = list(items)
    n = len(values)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(values, n, i)
    for end in range(n - 1, -1, -1):
        values[0], values[end] = values[end], values[0]
        _sift_down(values, end, 0)
    return values


def pigeonhole_sort(items: Iterable[int]) -> list[int]:
    """Return integers sorted by dropping each into a hole for its value."""
    values = list(items)
    if not values:
        return []
    low = min(values)
    holes: list[list[int]] = [[] for _ in range(max(values) - low + 1)]
    for value in values:
        holes[value - low].append(value)
    return [value for hole in holes for value in hole]


def radix_sort(items: Iterable[int]) -> list[int]:
    """Return non-negative integers sorted digit by digit, least significant first."""
    values = list(items)
    if any(value < 0 for value in values):
        raise ValueError("radix sort handles non-negative integers only")
    if not values:
        return values
    largest = max(values)
    exp = 1
    while largest // exp > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in values:
            buckets[(value // exp) % 10].append(value)
        values = [value for bucket in buckets for value in bucket]
        exp *= 10
    return values


def cocktail_sort(items: Iterable[Any]) -> list:
    """Return the items sorted by alternating forward and backward bubble passes."""
    values = list(items)
    start, end = 0, len(values) - 1
    swapped = True
    while swapped:
        swapped = False
        for i in range(start, end):
            if values[i] > values[i + 1]:
                values[i], values[i + 1] = values[i + 1], values[i]
                swapped = True
        if not swapped:
            break
        swapped = False
        end -= 1
        for i in range(end - 1, start - 1, -1):
            if values[i] > values[i + 1]:
                values[i], values[i + 1] = values[i + 1], values[i]
                swapped = True
        start += 1
    return values


def bubble_sort_passes(items: Iterable[Any]) -> Iterator[list]:
    """Bubble sort, yielding a snapshot of the list after each of the n-1 passes."""
    values = list(items)
    n = len(values)
    for counter in range(1, n):
        for i in range(n - counter):
            if values[i] > values[i + 1]:
                values[i], values[i + 1] = values[i + 1], values[i]
        yield list(values)


def insertion_sort(items: Iterable[Any]) -> list:
    """Return the items sorted by inserting each into the sorted prefix."""
    values = list(items)
    for i in range(1, len(values)):
        current = values[i]
        j = i - 1
        while j >= 0 and values[j] > current:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = current
    return values


def sorted_merge(a: Iterable[Any], b: Iterable[Any]) -> list:
    """Concatenate two unsorted sequences and return the result sorted."""
    return sorted([*a, *b])


def sort_stack(stack: MutableSequence[Any]) -> None:
    """Sort a list used as a stack in place so that the largest value is on top."""
    ordered: list[Any] = []
    while stack:
        value = stack.pop()
        while ordered and ordered[-1] > value:
            stack.append(ordered.pop())
        ordered.append(value)
    stack.extend(ordered)