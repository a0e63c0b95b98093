"""Array and matrix exercises: permutations, leaders, prefix sums and k-sum searches."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, MutableSequence, Sequence
from typing import Any


def rearrange_alternately(arr: Iterable[int]) -> list[int]:
    """Interleave non-negative and negative values, starting with a non-negative one.

    Relative order within each sign is kept; whatever is left over from the
    longer group is appended at the end.
    """
    values = list(arr)
    positives = [x for x in values if x >= 0]
    negatives = [x for x in values if x < 0]
    result: list[int] = []
    for pos, neg in zip(positives, negatives):
        result.extend((pos, neg))
    paired = min(len(positives), len(negatives))
    result.extend(positives[paired:])
    result.extend(negatives[paired:])
    return result


def next_permutation(arr: MutableSequence[Any]) -> bool:
    """Rearrange ``arr`` into the next lexicographically greater permutation.

    Returns True if one existed.  For the last permutation the sequence is
    reset to ascending order and False is returned.
    """
    i = len(arr) - 2
    while i >= 0 and arr[i] >= arr[i + 1]:
        i -= 1
    if i < 0:
        arr[:] = arr[::-1]
        return False
    j = len(arr) - 1
    while arr[j] <= arr[i]:
        j -= 1
    arr[i], arr[j] = arr[j], arr[i]
    arr[i + 1 :] = arr[i + 1 :][::-1]
    return True


def leaders(arr: Sequence[int]) -> list[int]:
    """Elements no smaller than everything to their right, in original order."""
    found: list[int] = []
    best: int | None = None
    for value in reversed(arr):
        if best is None or value >= best:
            found.append(value)
            best = value
    found.reverse()
    return found


def longest_consecutive(arr: Iterable[int]) -> int:
    """Length of the longest run of consecutive integers present in ``arr``."""
    values = set(arr)
    longest = 0
    for start in values:
        if start - 1 in values:
            continue
        end = start
        while end + 1 in values:
            end += 1
        longest = max(longest, end - start + 1)
    return longest


def set_matrix_zeros(matrix: list[list[int]]) -> None:
    """Zero every row and column that contains a zero, in place."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        for j in range(len(row)):
            if i in zero_rows or j in zero_cols:
                row[j] = 0


def rotate_matrix(matrix: list[list[Any]]) -> None:
    """Rotate a square matrix 90 degrees clockwise in place."""
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("only a square matrix can be rotated in place")
    for i in range(n):
        for j in range(i + 1, n):
            matrix[i][j], matrix[j][i] = matrix[j][i], matrix[i][j]
    for row in matrix:
        row.reverse()


def spiral_order(matrix: Sequence[Sequence[Any]]) -> list[Any]:
    """Elements of a rectangular matrix read clockwise from the top-left corner."""
    if not matrix or not matrix[0]:
        return []
    result: list[Any] = []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    while top <= bottom and left <= right:
        result.extend(matrix[top][left : right + 1])
        top += 1
        result.extend(matrix[i][right] for i in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(matrix[bottom][i] for i in range(right, left - 1, -1))
        bottom -= 1
        if left <= right:
            result.extend(matrix[i][left] for i in range(bottom, top - 1, -1))
        left += 1
    return result


def count_subarrays_with_sum(arr: Iterable[int], k: int) -> int:
    """Number of contiguous subarrays whose elements add up to ``k``."""
    prefix_counts: Counter[int] = Counter({0: 1})
    total = count = 0
    for value in arr:
        total += value
        count += prefix_counts[total - k]
        prefix_counts[total] += 1
    return count


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """The first ``num_rows`` rows of Pascal's triangle."""
    if num_rows < 0:
        raise ValueError(f"number of rows must be non-negative, got {num_rows}")
    triangle: list[list[int]] = []
    for _ in range(num_rows):
        if triangle:
            prev = triangle[-1]
            triangle.append([1, *(a + b for a, b in zip(prev, prev[1:])), 1])
        else:
            triangle.append([1])
    return triangle


def majority_elements_n3(arr: Sequence[int]) -> list[int]:
    """Elements occurring more than n/3 times (extended Boyer-Moore voting)."""
    first: int | None = None
    second: int | None = None
    count1 = count2 = 0
    for num in arr:
        if num == first:
            count1 += 1
        elif num == second:
            count2 += 1
        elif count1 == 0:
            first, count1 = num, 1
        elif count2 == 0:
            second, count2 = num, 1
        else:
            count1 -= 1
            count2 -= 1

    count1 = count2 = 0
    for num in arr:
        if num == first:
            count1 += 1
        elif num == second:
            count2 += 1

    threshold = len(arr) // 3
    result: list[int] = []
    if first is not None and count1 > threshold:
        result.append(first)
    if second is not None and count2 > threshold:
        result.append(second)
    return result


def three_sum(arr: Iterable[int]) -> list[list[int]]:
    """All distinct ascending triplets adding up to zero, in ascending order."""
    nums = sorted(arr)
    result: list[list[int]] = []
    for i in range(len(nums) - 2):
        if i > 0 and nums[i] == nums[i - 1]:
            continue
        left, right = i + 1, len(nums) - 1
        while left < right:
            total = nums[i] + nums[left] + nums[right]
            if total == 0:
                result.append([nums[i], nums[left], nums[right]])
                while left < right and nums[left] == nums[left + 1]:
                    left += 1
                while left < right and nums[right] == nums[right - 1]:
                    right -= 1
                left += 1
                right -= 1
            elif total < 0:
                left += 1
            else:
                right -= 1
    return result


def four_sum(arr: Iterable[int], target: int) -> list[list[int]]:
    """All distinct ascending quadruplets adding up to ``target``, in ascending order."""
    nums = sorted(arr)
    n = len(nums)
    result: list[list[int]] = []
    for i in range(n - 3):
        if i > 0 and nums[i] == nums[i - 1]:
            continue
        for j in range(i + 1, n - 2):
            if j > i + 1 and nums[j] == nums[j - 1]:
                continue
            left, right = j + 1, n - 1
            while left < right:
                total = nums[i] + nums[j] + nums[left] + nums[right]
                if total == target:
                    result.append([nums[i], nums[j], nums[left], nums[right]])
                    while left < right and nums[left] == nums[left + 1]:
                        left += 1
                    while left < right and nums[right] == nums[right - 1]:
                        right -= 1
                    left += 1
                    right -= 1
                elif total < target:
                    left += 1
                else:
                    right -= 1
    return result


def largest_zero_sum_subarray(arr: Iterable[int]) -> int:
    """Length of the longest contiguous subarray summing to zero."""
    first_seen: dict[int, int] = {}
    total = best = 0
    for i, value in enumerate(arr):
        total += value
        if total == 0:
            best = i + 1
        if total in first_seen:
            best = max(best, i - first_seen[total])
        else:
            first_seen[total] = i
    return best