"""Harder array exercises: prefix XOR, intervals, gap merging and merge-sort counting."""

from __future__ import annotations

import heapq
from bisect import bisect_right
from collections import Counter
from collections.abc import Callable, Iterable, MutableSequence, Sequence
from functools import reduce
from itertools import chain
from operator import xor


def count_subarrays_with_xor(arr: Iterable[int], k: int) -> int:
    """Number of contiguous subarrays whose XOR equals ``k``."""
    seen: Counter[int] = Counter()
    count = prefix = 0
    for value in arr:
        prefix ^= value
        if prefix == k:
            count += 1
        count += seen[prefix ^ k]
        seen[prefix] += 1
    return count


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping ``[start, end]`` intervals; the result is sorted by start."""
    merged: list[list[int]] = []
    for start, end in sorted(list(interval) for interval in intervals):
        if not merged or merged[-1][1] < start:
            merged.append([start, end])
        else:
            merged[-1][1] = max(merged[-1][1], end)
    return merged


def merge_gap(nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge sorted ``nums2[:n]`` into sorted ``nums1[:m]`` by the gap method.

    ``nums1`` must have room for ``m + n`` elements; afterwards its first
    ``m + n`` entries are sorted.
    """
    total = m + n
    if len(nums1) < total or len(nums2) < n:
        raise ValueError("nums1 must hold m + n elements and nums2 at least n")
    nums1[m:total] = nums2[:n]
    gap = (total + 1) // 2
    while gap > 0:
        for i in range(total - gap):
            j = i + gap
            if nums1[i] > nums1[j]:
                nums1[i], nums1[j] = nums1[j], nums1[i]
        gap = (gap + 1) // 2 if gap > 1 else 0


def repeating_and_missing(arr: Sequence[int]) -> tuple[int, int]:
    """Return ``(repeating, missing)`` for a list of 1..n with one value doubled.

    Raises ValueError when no value is repeated.
    """
    n = len(arr)
    combined = reduce(xor, arr, reduce(xor, range(1, n + 1), 0))
    if combined == 0:
        raise ValueError("no repeating and missing pair in the input")
    bit = combined & -combined
    x = y = 0
    for value in chain(arr, range(1, n + 1)):
        if value & bit:
            x ^= value
        else:
            y ^= value
    return (x, y) if x in arr else (y, x)


def _sort_and_count(
    values: Sequence[int], cross: Callable[[list[int], list[int]], int]
) -> tuple[list[int], int]:
    """Merge sort ``values`` and total ``cross`` over every pair of merged halves."""
    if len(values) <= 1:
        return list(values), 0
    mid = (len(values) + 1) // 2
    left, left_count = _sort_and_count(values[:mid], cross)
    right, right_count = _sort_and_count(values[mid:], cross)
    count = left_count + right_count + cross(left, right)
    return list(heapq.merge(left, right)), count


def _inversions_across(left: list[int], right: list[int]) -> int:
    return sum(len(left) - bisect_right(left, value) for value in right)


def _reverse_pairs_across(left: list[int], right: list[int]) -> int:
    count = j = 0
    for value in left:
        while j < len(right) and value > 2 * right[j]:
            j += 1
        count += j
    return count


def inversion_count(arr: Sequence[int]) -> int:
    """Number of pairs ``i < j`` with ``arr[i] > arr[j]``."""
    return _sort_and_count(list(arr), _inversions_across)[1]


def max_product_subarray(arr: Sequence[int]) -> int:
    """Largest product of a non-empty contiguous subarray."""
    if not arr:
        raise ValueError("expected a non-empty sequence")
    high = low = best = arr[0]
    for value in arr[1:]:
        if value < 0:
            high, low = low, high
        high = max(value, high * value)
        low = min(value, low * value)
        best = max(best, high)
    return best


def reverse_pairs(arr: Sequence[int]) -> int:
    """Number of pairs ``i < j`` with ``arr[i] > 2 * arr[j]``."""
    return _sort_and_count(list(arr), _reverse_pairs_across)[1]