import random

import pytest

from dsakit.sorting import (
    bitonic_sort,
    bubble_sort_passes,
    cocktail_sort,
    heap_sort,
    insertion_sort,
    pigeonhole_sort,
    radix_sort,
    sort_stack,
    sorted_merge,
)


def _random_lists(seed, count=20, low=-50, high=50):
    rng = random.Random(seed)
    return [[rng.randint(low, high) for _ in range(rng.randint(0, 30))] for _ in range(count)]


def test_bitonic_sort_source_example():
    data = [3, 7, 4, 8, 6, 2, 1, 5]
    assert bitonic_sort(data) == sorted(data)


def test_bitonic_sort_descending():
    data = [3, 7, 4, 8, 6, 2, 1, 5]
    assert bitonic_sort(data, ascending=False) == sorted(data, reverse=True)


@pytest.mark.parametrize("size", [0, 1, 2, 4, 16, 64])
def test_bitonic_sort_power_of_two_sizes(size):
    rng = random.Random(size)
    data = [rng.randint(-100, 100) for _ in range(size)]
    assert bitonic_sort(data) == sorted(data)


@pytest.mark.parametrize("size", [3, 5, 6, 12])
def test_bitonic_sort_rejects_other_sizes(size):
    with pytest.raises(ValueError):
        bitonic_sort(list(range(size)))


def test_heap_sort_source_examples():
    for data in ([12, 11, 13, 5, 6, 7], [4, 17, 3, 12, 9]):
        assert heap_sort(data) == sorted(data)


def test_heap_sort_random_and_input_untouched():
    for data in _random_lists(1):
        original = list(data)
        assert heap_sort(data) == sorted(data)
        assert data == original


def test_pigeonhole_sort():
    data = [8, 3, 2, 7, 4, 6, 8]
    assert pigeonhole_sort(data) == sorted(data)
    assert pigeonhole_sort([]) == []
    for data in _random_lists(2):
        assert pigeonhole_sort(data) == sorted(data)


def test_radix_sort_source_example():
    data = [170, 45, 75, 90, 802, 24, 2, 66]
    assert radix_sort(data) == sorted(data)


def test_radix_sort_random_and_zeroes():
    for data in _random_lists(3, low=0, high=10_000):
        assert radix_sort(data) == sorted(data)
    assert radix_sort([0, 0]) == [0, 0]


def test_radix_sort_rejects_negative():
    with pytest.raises(ValueError):
        radix_sort([3, -1])


def test_cocktail_sort():
    data = [5, 1, 4, 2, 8, 0, 2]
    assert cocktail_sort(data) == sorted(data)
    for data in _random_lists(4):
        assert cocktail_sort(data) == sorted(data)


def test_bubble_sort_passes_count_and_final():
    data = [5, 3, 9, 1, 7, 2]
    passes = list(bubble_sort_passes(data))
    assert len(passes) == len(data) - 1
    assert passes[-1] == sorted(data)


def test_bubble_sort_passes_tail_settles():
    data = [5, 3, 9, 1, 7, 2]
    expected = sorted(data)
    for number, snapshot in enumerate(bubble_sort_passes(data), start=1):
        assert snapshot[-number:] == expected[-number:]
        assert sorted(snapshot) == expected


def test_bubble_sort_passes_single_element_yields_nothing():
    assert list(bubble_sort_passes([1])) == []


def test_insertion_sort():
    for data in _random_lists(5):
        assert insertion_sort(data) == sorted(data)


def test_sorted_merge_source_example():
    a = [10, 5, 15]
    b = [20, 3, 2, 12]
    result = sorted_merge(a, b)
    assert result == sorted(a + b)
    assert len(result) == len(a) + len(b)


def test_sort_stack_in_place_largest_on_top():
    stack = [3, 1, 4, 1, 5, 9, 2, 6]
    original = list(stack)
    assert sort_stack(stack) is None
    assert stack == sorted(original)
    assert stack[-1] == max(original)


def test_sort_stack_empty():
    stack = []
    sort_stack(stack)
    assert stack == []