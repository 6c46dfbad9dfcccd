# dsakit

A collection of classic data structures and algorithms written in plain Python. It has no dependencies outside the standard library.

## Installation

```
pip install dsakit
```

## Modules

- `dsakit.searching`: `binary_search`, `exponential_search`, `interpolation_search`, `fibonacci_search` (each returns an index or `None`), `linear_search` (every matching index), `search_matrix`, `has_pair_with_sum`, `two_sum`
- `dsakit.sorting`: `bitonic_sort` (power-of-two lengths only), `heap_sort`, `pigeonhole_sort`, `radix_sort` (non-negative integers), `cocktail_sort`, `bubble_sort_passes` (yields the list after each pass), `insertion_sort`, `sorted_merge`, `sort_stack` (sorts a list in place, largest on top)
- `dsakit.singly_linked`: `Node`, `SinglyLinkedList`, `compare_lists`, `has_cycle`, `cycle_start`
- `dsakit.circular_linked`: `CircularLinkedList`
- `dsakit.doubly_linked`: `DoublyLinkedList`, iterable forwards and with `reversed()`
- `dsakit.stacks`: `BoundedStack`, `MaxStack`, `StackOverflowError`, `StackUnderflowError`, `reverse_string`, `infix_to_postfix`
- `dsakit.trees`: `TreeNode`, `AVLTree`, `BinarySearchTree`, `Placement`, `inorder`, `preorder`, `postorder`, `morris_inorder`
- `dsakit.arithmetic`: `kth_bit`, `kth_bit_by_scan`, `fib_recursive`, `fib_memo`, `fib_iterative`, `fibonacci_series`, `factorial`, `gcd`, `rectangle_area`, `circle_area`, `triangle_area`, `is_even`
- `dsakit.matrices`: `DiagonalMatrix` (1-based `m[i, j]` indexing), `multiply`, `transpose`, `set_zeroes_marking`, `set_zeroes_flags`, `set_zeroes_in_place`, `spiral_order`, `is_sparse`, `value_grid`
- `dsakit.strings`: `LetterCase`, `rabin_karp`, `lcs_length`, `reverse_words`, `most_frequent_letter`, `letter_case`, `letter_pattern`
- `dsakit.arrays`: `sort_012`, `sort_012_counting`, `wave_sort`, `repeating_and_missing`, `longest_consecutive`, `max_subarray_sum`, `max_subarray_sum_brute`, `merge_intervals`, `next_permutation`, `pascal_triangle`, `permutations`, `subarray_with_sum`, `trapped_water`, `max_profit`, `max_profit_brute`, `min_swaps`, `find_duplicate`, `three_sum`, `top_three`, `majority_element`, `left_rotate`, `knapsack`

Errors are raised as exceptions: for example, deleting from an empty list raises `IndexError`, looking up a value that is not in a linked list raises `ValueError`, and pushing onto a full `BoundedStack` raises `StackOverflowError`.

## Examples

```python
from dsakit.searching import binary_search
from dsakit.sorting import heap_sort
from dsakit.trees import AVLTree
from dsakit.stacks import infix_to_postfix
from dsakit.arrays import merge_intervals

binary_search([10, 20, 30, 40, 50, 60, 70, 89], 40)   # 3
heap_sort([12, 11, 13, 5, 6, 7])                      # [5, 6, 7, 11, 12, 13]

tree = AVLTree()
for value in (10, 20, 30):
    tree.insert(value)
tree.preorder()                                       # [20, 10, 30]

infix_to_postfix("A*B+C-D")                           # 'AB*C+D-'
merge_intervals([[1, 3], [2, 6], [8, 10], [15, 18]])  # [[1, 6], [8, 10], [15, 18]]
```

## What it does not do

dsakit is a library only. It has no command-line program or interactive menus; every structure and algorithm is used by importing it and calling it from Python. It has no union-find (disjoint set) structure.

## Running the tests

```
pip install -e ".[test]"
pytest
```