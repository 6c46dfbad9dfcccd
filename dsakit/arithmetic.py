"""Small arithmetic routines: bits, Fibonacci numbers, factorials, gcd and areas."""

from __future__ import annotations

from collections.abc import Iterator
from math import prod


def kth_bit(n: int, k: int) -> int:
    """Return bit ``k`` of ``n``, counting the least significant bit as 1."""
    if k < 1:
        raise ValueError("bit position starts at 1")
    return (n >> (k - 1)) & 1


def kth_bit_by_scan(n: int, k: int) -> int:
    """Return bit ``k`` of ``n`` by shifting one bit at a time."""
    if k < 1:
        raise ValueError("bit position starts at 1")
    for count in range(k):
        if n == 0:
            return 0
        if count == k - 1:
            return n & 1
        n >>= 1
    return 0


def _check_term(n: int) -> None:
    if n < 1:
        raise ValueError("Fibonacci terms are numbered from 1")


def fib_recursive(n: int) -> int:
    """Return the n-th Fibonacci term (the first is 0) by plain recursion."""
    _check_term(n)
    if n == 1:
        return 0
    if n == 2:
        return 1
    return fib_recursive(n - 1) + fib_recursive(n - 2)


_memo: dict[int, int] = {1: 0, 2: 1}


def fib_memo(n: int) -> int:
    """Return the n-th Fibonacci term, remembering every term computed so far."""
    _check_term(n)
    if n not in _memo:
        known = max(_memo)
        for term in range(known + 1, n + 1):
            _memo[term] = _memo[term - 1] + _memo[term - 2]
    return _memo[n]


def fib_iterative(n: int) -> int:
    """Return the n-th Fibonacci term by filling a table from the bottom up."""
    _check_term(n)
    table = [0, 1]
    for i in range(2, n):
        table.append(table[i - 1] + table[i - 2])
    return table[n - 1]


def fibonacci_series(count: int) -> Iterator[int]:
    """Yield the first ``count`` Fibonacci terms, starting 0, 1."""
    current, following = 0, 1
    for _ in range(count):
        yield current
        current, following = following, current + following


def factorial(n: int) -> int:
    """Return n! for a non-negative integer."""
    if n < 0:
        raise ValueError("factorial of a negative number")
    return prod(range(2, n + 1))


def gcd(a: int, b: int) -> int:
    """Euclid's algorithm with a remainder that takes the sign of the dividend."""
    while b != 0:
        remainder = abs(a) % abs(b)
        a, b = b, -remainder if a < 0 else remainder
    return a


def rectangle_area(length: float, width: float) -> float:
    return length * width


def circle_area(radius: float) -> float:
    """Return 4 * 3.14 * r**2, the surface of a sphere of that radius."""
    return 4 * 3.14 * (radius * radius)


def triangle_area(base: float, height: float) -> float:
    return base * height / 2


def is_even(n: int) -> bool:
    return n % 2 == 0