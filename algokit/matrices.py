"""Algorithms over rectangular integer matrices stored as lists of rows."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

__all__ = [
    "row_with_maximum_ones",
    "rotate_image",
    "spiral_order",
    "set_zeroes",
]


def row_with_maximum_ones(mat: Sequence[Sequence[int]]) -> list[int]:
    """Return ``[row, count]`` for the first row holding the most 1s.

    A matrix with no 1s at all gives ``[0, 0]``.
    """
    best_row, best_count = 0, 0
    for index, row in enumerate(mat):
        count = sum(1 for value in row if value == 1)
        if count > best_count:
            best_row, best_count = index, count
    return [best_row, best_count]


def rotate_image(matrix: MutableSequence[list[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise in place."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    matrix[:] = [list(column)[::-1] for column in zip(*matrix)]


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements in clockwise spiral order starting at the top-left."""
    if not matrix or not matrix[0]:
        return []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    order: list[int] = []
    while top <= bottom and left <= right:
        order.extend(matrix[top][left:right + 1])
        order.extend(matrix[r][right] for r in range(top + 1, bottom + 1))
        if top < bottom:
            order.extend(matrix[bottom][c] for c in range(right - 1, left - 1, -1))
        if left < right:
            order.extend(matrix[r][left] for r in range(bottom - 1, top, -1))
        top += 1
        left += 1
        bottom -= 1
        right -= 1
    return order


def set_zeroes(matrix: Sequence[MutableSequence[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        if i in zero_rows:
            row[:] = [0] * len(row)
        else:
            for j in zero_cols:
                row[j] = 0