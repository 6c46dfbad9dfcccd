"""Matrices: a compact diagonal matrix and routines over lists of rows."""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence, Sequence
from itertools import islice, product
from typing import Any


class DiagonalMatrix:
    """A square matrix that stores only its diagonal.

    Indices are 1-based, ``matrix[i, j]``, as in the usual mathematical notation.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._diagonal = [0] * size

    def _check(self, key: tuple[int, int]) -> tuple[int, int]:
        i, j = key
        n = len(self._diagonal)
        if not (1 <= i <= n and 1 <= j <= n):
            raise IndexError(f"index ({i}, {j}) outside a {n}x{n} matrix")
        return i, j

    def __getitem__(self, key: tuple[int, int]) -> Any:
        i, j = self._check(key)
        return self._diagonal[i - 1] if i == j else 0

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        i, j = self._check(key)
        if i == j:
            self._diagonal[i - 1] = value
        elif value != 0:
            raise ValueError("off-diagonal entries of a diagonal matrix are zero")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._diagonal!r})"

    def rows(self) -> list[list[Any]]:
        """Return the full matrix as a list of rows."""
        size = len(self._diagonal)
        return [
            [value if column == row else 0 for column in range(size)]
            for row, value in enumerate(self._diagonal)
        ]

    def dimension(self) -> int:
        """Number of rows, which equals the number of columns."""
        return len(self._diagonal)


def multiply(a: Sequence[Sequence[Any]], b: Sequence[Sequence[Any]]) -> list[list[Any]]:
    """Return the matrix product ``a`` times ``b``."""
    inner = len(b)
    if any(len(row) != inner for row in a):
        raise ValueError("columns of the first matrix must match rows of the second")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]


def transpose(matrix: Sequence[Sequence[Any]]) -> list[list[Any]]:
    """Return the matrix with rows and columns exchanged."""
    return [list(column) for column in zip(*matrix)]


def _shape(matrix: Sequence[Sequence[Any]]) -> tuple[int, int]:
    return len(matrix), (len(matrix[0]) if matrix else 0)


def set_zeroes_marking(matrix: MutableSequence[MutableSequence[Any]]) -> None:
    """Zero every row and column that holds a zero, marking cells before clearing them."""
    rows, cols = _shape(matrix)
    marker = object()
    for i, j in product(range(rows), range(cols)):
        if matrix[i][j] is not marker and matrix[i][j] == 0:
            for row in matrix:
                if row[j] is not marker and row[j] != 0:
                    row[j] = marker
            target = matrix[i]
            for column in range(cols):
                if target[column] is not marker and target[column] != 0:
                    target[column] = marker
    for row in matrix:
        row[:] = [0 if value is marker else value for value in row]


def set_zeroes_flags(matrix: MutableSequence[MutableSequence[Any]]) -> None:
    """Zero every row and column that holds a zero, using one flag per row and column."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        row[:] = [0 if i in zero_rows or j in zero_cols else value for j, value in enumerate(row)]


def set_zeroes_in_place(matrix: MutableSequence[MutableSequence[Any]]) -> None:
    """Zero every row and column that holds a zero, keeping the flags in the matrix itself."""
    rows, cols = _shape(matrix)
    if not rows or not cols:
        return
    first_column_zero = False
    for row in matrix:
        if row[0] == 0:
            first_column_zero = True
        for j in range(1, cols):
            if row[j] == 0:
                row[0] = 0
                matrix[0][j] = 0
    for row in reversed(matrix):
        for j in range(cols - 1, 0, -1):
            if row[0] == 0 or matrix[0][j] == 0:
                row[j] = 0
        if first_column_zero:
            row[0] = 0


def _spiral(matrix: Sequence[Sequence[Any]]) -> Iterator[Any]:
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    while True:
        for column in range(left, right + 1):
            yield matrix[top][column]
        top += 1
        for row in range(top, bottom + 1):
            yield matrix[row][right]
        right -= 1
        for column in range(right, left - 1, -1):
            yield matrix[bottom][column]
        bottom -= 1
        for row in range(bottom, top - 1, -1):
            yield matrix[row][left]
        left += 1


def spiral_order(matrix: Sequence[Sequence[Any]]) -> list[Any]:
    """Return the elements clockwise from the top-left corner, spiralling inwards."""
    rows, cols = _shape(matrix)
    if not rows or not cols:
        return []
    return list(islice(_spiral(matrix), rows * cols))


def is_sparse(matrix: Sequence[Sequence[Any]]) -> bool:
    """Return True if more than half of the cells (rounded down) are zero."""
    zeros = sum(list(row).count(0) for row in matrix)
    cells = sum(len(row) for row in matrix)
    return zeros > cells // 2


def value_grid(rows: int, cols: int) -> list[list[int]]:
    """Return a ``rows`` by ``cols`` grid whose i-th row is filled with ``i``."""
    return [[i] * cols for i in range(rows)]