import math

import pytest

from dsakit.arithmetic import (
    circle_area,
    factorial,
    fib_iterative,
    fib_memo,
    fib_recursive,
    fibonacci_series,
    gcd,
    is_even,
    kth_bit,
    kth_bit_by_scan,
    rectangle_area,
    triangle_area,
)


@pytest.mark.parametrize("n", range(0, 70))
def test_kth_bit_matches_binary_digits(n):
    digits = format(n, "b").zfill(8)
    for k in range(1, 9):
        assert kth_bit(n, k) == int(digits[-k])
        assert kth_bit_by_scan(n, k) == kth_bit(n, k)


def test_kth_bit_negative_number_agrees():
    for k in range(1, 10):
        assert kth_bit_by_scan(-6, k) == kth_bit(-6, k)


def test_kth_bit_invalid_position():
    with pytest.raises(ValueError):
        kth_bit(5, 0)
    with pytest.raises(ValueError):
        kth_bit_by_scan(5, 0)


def test_fibonacci_first_terms():
    assert fib_recursive(1) == 0
    assert fib_recursive(2) == 1
    assert fib_iterative(1) == 0
    assert fib_memo(2) == 1


@pytest.mark.parametrize("n", range(1, 20))
def test_fibonacci_methods_agree(n):
    assert fib_recursive(n) == fib_memo(n) == fib_iterative(n)


def test_fibonacci_recurrence_for_large_terms():
    for n in range(3, 200):
        assert fib_memo(n) == fib_memo(n - 1) + fib_memo(n - 2)
        assert fib_iterative(n) == fib_memo(n)


def test_fibonacci_invalid_term():
    for func in (fib_recursive, fib_memo, fib_iterative):
        with pytest.raises(ValueError):
            func(0)


def test_fibonacci_series_matches_terms():
    assert list(fibonacci_series(15)) == [fib_iterative(i) for i in range(1, 16)]
    assert list(fibonacci_series(0)) == []


def test_factorial():
    assert factorial(0) == 1
    assert factorial(1) == 1
    for n in range(2, 30):
        assert factorial(n) == n * factorial(n - 1)
        assert factorial(n) == math.factorial(n)


def test_factorial_negative():
    with pytest.raises(ValueError):
        factorial(-1)


def test_gcd_positive_matches_math():
    for a in range(0, 40):
        for b in range(0, 40):
            assert gcd(a, b) == math.gcd(a, b)


def test_gcd_with_zero():
    assert gcd(12, 0) == 12
    assert gcd(0, 0) == 0


def test_gcd_divides_both():
    result = gcd(-84, 36)
    assert abs(result) == math.gcd(84, 36)


def test_areas():
    assert rectangle_area(3, 4) == 12
    assert triangle_area(6, 5) * 2 == rectangle_area(6, 5)
    assert circle_area(1) == pytest.approx(12.56)
    assert circle_area(2) == pytest.approx(4 * circle_area(1))


@pytest.mark.parametrize("n, expected", [(4, True), (7, False), (0, True), (-3, False), (-8, True)])
def test_is_even(n, expected):
    assert is_even(n) is expected