"""Array problems: partitioning, subarrays, permutations, intervals and selection."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence, Sequence
from functools import lru_cache
from itertools import accumulate
from typing import Any, Optional


def sort_012_counting(nums: MutableSequence[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place by counting each value."""
    counts = [0, 0, 0]
    for value in nums:
        if value not in (0, 1, 2):
            raise ValueError(f"only 0, 1 and 2 may be sorted, got {value!r}")
        counts[value] += 1
    nums[:] = [0] * counts[0] + [1] * counts[1] + [2] * counts[2]


def sort_012(nums: MutableSequence[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place in a single pass (Dutch national flag)."""
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        value = nums[mid]
        if value == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        elif value == 2:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1
        else:
            raise ValueError(f"only 0, 1 and 2 may be sorted, got {value!r}")


def wave_sort(items: Iterable[Any]) -> list:
    """Return the items arranged so that a[0] >= a[1] <= a[2] >= a[3] ..."""
    values = sorted(items)
    for i in range(0, len(values) - 1, 2):
        values[i], values[i + 1] = values[i + 1], values[i]
    return values


def repeating_and_missing(values: Sequence[int]) -> tuple[int, int]:
    """For values 1..n where one repeats and one is missing, return ``(repeating, missing)``."""
    n = len(values)
    diff = n * (n + 1) // 2 - sum(values)
    square_diff = n * (n + 1) * (2 * n + 1) // 6 - sum(v * v for v in values)
    if diff == 0:
        raise ValueError("no value is missing")
    missing = (diff + square_diff // diff) // 2
    return missing - diff, missing


def longest_consecutive(nums: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers among ``nums``."""
    present = set(nums)
    longest = 0
    for num in present:
        if num - 1 in present:
            continue
        current = num
        while current + 1 in present:
            current += 1
        longest = max(longest, current - num + 1)
    return longest


def max_subarray_sum_brute(items: Sequence[Any]) -> Any:
    """Return the largest sum of a non-empty contiguous subarray, trying every start."""
    if not items:
        raise ValueError("no subarray of an empty sequence")
    return max(max(accumulate(items[start:])) for start in range(len(items)))


def max_subarray_sum(items: Iterable[Any]) -> Any:
    """Return the largest sum of a non-empty contiguous subarray (Kadane's algorithm)."""
    best: Optional[Any] = None
    current = 0
    for value in items:
        current += value
        if best is None or current > best:
            best = current
        if current < 0:
            current = 0
    if best is None:
        raise ValueError("no subarray of an empty sequence")
    return best


def merge_intervals(intervals: Iterable[Sequence[Any]]) -> list[list[Any]]:
    """Merge overlapping ``[start, end]`` intervals; return them sorted by start."""
    merged: list[list[Any]] = []
    for start, end in sorted((interval[0], interval[1]) for interval in intervals):
        if not merged or merged[-1][1] < start:
            merged.append([start, end])
        else:
            merged[-1][1] = max(merged[-1][1], end)
    return merged


def next_permutation(items: Iterable[Any]) -> list:
    """Return the next permutation in lexicographic order, wrapping to the first."""
    values = list(items)
    pivot = len(values) - 2
    while pivot >= 0 and values[pivot] >= values[pivot + 1]:
        pivot -= 1
    if pivot >= 0:
        successor = len(values) - 1
        while values[successor] <= values[pivot]:
            successor -= 1
        values[pivot], values[successor] = values[successor], values[pivot]
    values[pivot + 1 :] = reversed(values[pivot + 1 :])
    return values


def pascal_triangle(rows: int) -> list[list[int]]:
    """Return the first ``rows`` rows of Pascal's triangle."""
    triangle: list[list[int]] = []
    for _ in range(rows):
        if not triangle:
            triangle.append([1])
        else:
            above = triangle[-1]
            triangle.append([1, *(a + b for a, b in zip(above, above[1:])), 1])
    return triangle


def _permute(values: list, index: int) -> Iterator[list]:
    if index == len(values):
        yield list(values)
        return
    for i in range(index, len(values)):
        values[i], values[index] = values[index], values[i]
        yield from _permute(values, index + 1)
        values[i], values[index] = values[index], values[i]


def permutations(items: Iterable[Any]) -> list[list]:
    """Return every ordering of the items, generated by swapping each into place."""
    return list(_permute(list(items), 0))


def subarray_with_sum(items: Sequence[Any], total: Any) -> Optional[tuple[int, int]]:
    """Return inclusive ``(start, end)`` of the first subarray summing to ``total``, or None."""
    for start in range(len(items)):
        for end, running in enumerate(accumulate(items[start:]), start):
            if running == total:
                return start, end
    return None


def trapped_water(heights: Sequence[int]) -> int:
    """Return how much rain water is held between bars of the given heights."""
    if not heights:
        return 0
    left = list(accumulate(heights, max))
    right = list(accumulate(reversed(heights), max))[::-1]
    return sum(min(l, r) - h for l, r, h in zip(left, right, heights))


def max_profit(prices: Iterable[Any]) -> Any:
    """Return the best gain from one buy followed by one sale, tracking the lowest price."""
    best: Optional[Any] = None
    lowest: Optional[Any] = None
    for price in prices:
        lowest = price if lowest is None else min(lowest, price)
        gain = price - lowest
        best = gain if best is None else max(best, gain)
    if best is None:
        raise ValueError("no prices given")
    return best


def max_profit_brute(prices: Sequence[Any]) -> Any:
    """Return the best gain from one buy followed by one sale, trying every pair."""
    best = 0
    for i, buy in enumerate(prices):
        for sell in prices[i + 1 :]:
            if sell - buy > best:
                best = sell - buy
    return best


def min_swaps(items: Sequence[Any], k: Any) -> int:
    """Return the fewest swaps that gather every value ``<= k`` into one block."""
    window = sum(1 for value in items if value <= k)
    bad = sum(1 for value in items[:window] if value > k)
    best = bad
    for outgoing, incoming in zip(items, items[window:]):
        if outgoing > k:
            bad -= 1
        if incoming > k:
            bad += 1
        best = min(best, bad)
    return best


def find_duplicate(items: Sequence[int]) -> int:
    """For n+1 values holding each of 1..n once and one of them twice, return the repeat."""
    n = len(items) - 1
    if n < 1:
        raise ValueError("need at least two values")
    return sum(items) - n * (n + 1) // 2


def three_sum(items: Iterable[Any], k: Any) -> list[tuple[Any, Any, Any]]:
    """Return ascending triples of values, at distinct positions, that add up to ``k``."""
    values = sorted(items)
    n = len(values)
    found = []
    for i, first in enumerate(values):
        wanted = k - first
        start, end = i + 1, n - 1
        while start < end:
            pair = values[start] + values[end]
            if pair == wanted:
                found.append((first, values[start], values[end]))
                start += 1
            elif pair > wanted:
                end -= 1
            else:
                start += 1
    return found


def top_three(items: Sequence[Any]) -> tuple[Any, Any, Any]:
    """Return the three largest values, smallest of them first."""
    if len(items) < 3:
        raise ValueError("need at least three values")
    a, b, c = sorted(items[:3])
    for value in items[3:]:
        if value > a:
            a = value
            if a > b:
                a, b = b, a
            if b > c:
                b, c = c, b
    return a, b, c


def majority_element(nums: Iterable[Any]) -> Any:
    """Return the element that occurs more than half the time (Boyer-Moore vote)."""
    iterator = iter(nums)
    try:
        candidate = next(iterator)
    except StopIteration:
        raise ValueError("no majority in an empty sequence") from None
    votes = 1
    for value in iterator:
        votes += 1 if value == candidate else -1
        if votes == 0:
            candidate = value
            votes = 1
    return candidate


def left_rotate(items: Sequence[Any], d: int) -> list:
    """Return the items rotated ``d`` places to the left."""
    if not 0 <= d <= len(items):
        raise ValueError(f"rotation {d} outside 0..{len(items)}")
    return [*items[d:], *items[:d]]


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[Any]) -> Any:
    """Return the best total value of items whose weights fit in ``capacity`` (0-1 knapsack)."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")

    @lru_cache(maxsize=None)
    def best(room: int, count: int) -> Any:
        if count == 0 or room == 0:
            return 0
        weight = weights[count - 1]
        skip = best(room, count - 1)
        if weight > room:
            return skip
        return max(values[count - 1] + best(room - weight, count - 1), skip)

    return best(capacity, len(weights))