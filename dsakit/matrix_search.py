"""Binary search on matrices: sorted rows, sorted grids, 2D peaks and medians."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence


def row_with_max_ones(matrix: Sequence[Sequence[int]]) -> int:
    """Index of the first row with the most 1s (rows are sorted 0s then 1s), or -1."""
    best_row, best_count = -1, 0
    for i, row in enumerate(matrix):
        ones = len(row) - bisect_left(row, 1)
        if ones > best_count:
            best_row, best_count = i, ones
    return best_row


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Find ``target`` in a matrix whose rows, read in order, form one sorted list."""
    if not matrix or not matrix[0]:
        return False
    cols = len(matrix[0])
    left, right = 0, len(matrix) * cols - 1
    while left <= right:
        mid = (left + right) // 2
        value = matrix[mid // cols][mid % cols]
        if value == target:
            return True
        if value < target:
            left = mid + 1
        else:
            right = mid - 1
    return False


def search_sorted_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Find ``target`` in a matrix sorted along rows and columns, from the top-right."""
    if not matrix or not matrix[0]:
        return False
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value == target:
            return True
        if value < target:
            row += 1
        else:
            col -= 1
    return False


def find_peak_2d(matrix: Sequence[Sequence[int]]) -> tuple[int, int] | None:
    """``(row, col)`` of an element larger than its left, right, upper and lower neighbours.

    Each step takes the column maximum, so only left and right need checking.
    Returns None when no strict peak is found.
    """
    if not matrix or not matrix[0]:
        raise ValueError("expected a non-empty matrix")
    cols = len(matrix[0])
    left, right = 0, cols - 1
    while left <= right:
        mid = (left + right) // 2
        top = max(range(len(matrix)), key=lambda r: matrix[r][mid])
        value = matrix[top][mid]
        left_smaller = mid == 0 or value > matrix[top][mid - 1]
        right_smaller = mid == cols - 1 or value > matrix[top][mid + 1]
        if left_smaller and right_smaller:
            return top, mid
        if mid > 0 and matrix[top][mid - 1] > value:
            right = mid - 1
        else:
            left = mid + 1
    return None


def matrix_median(matrix: Sequence[Sequence[int]]) -> int:
    """Median of an integer matrix whose rows are each sorted.

    For an even element count the lower of the two middle values is returned.
    """
    if not matrix or not all(matrix):
        raise ValueError("expected a non-empty matrix with non-empty rows")
    total = sum(len(row) for row in matrix)
    needed = (total + 1) // 2
    low = min(row[0] for row in matrix)
    high = max(row[-1] for row in matrix)
    while low < high:
        mid = (low + high) // 2
        if sum(bisect_right(row, mid) for row in matrix) < needed:
            low = mid + 1
        else:
            high = mid
    return low