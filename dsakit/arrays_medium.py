"""Array exercises on runs, subarray sums, pairs, voting and prices."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence
from functools import reduce
from operator import xor


def max_consecutive_ones(arr: Iterable[int]) -> int:
    """Length of the longest run of 1s."""
    best = count = 0
    for num in arr:
        count = count + 1 if num == 1 else 0
        best = max(best, count)
    return best


def single_number(arr: Iterable[int]) -> int:
    """The element occurring once when every other occurs twice."""
    return reduce(xor, arr, 0)


def longest_subarray_with_sum(arr: Sequence[int], k: int) -> int:
    """Longest contiguous run summing to ``k``, for non-negative elements.

    Uses a sliding window; returns 0 when no run matches.
    """
    left = total = best = 0
    for right, value in enumerate(arr):
        total += value
        while total > k and left <= right:
            total -= arr[left]
            left += 1
        if total == k:
            best = max(best, right - left + 1)
    return best


def longest_subarray_with_sum_mixed(arr: Iterable[int], k: int) -> int:
    """Longest contiguous run summing to ``k``; elements may be negative."""
    first_seen: dict[int, int] = {}
    total = best = 0
    for i, value in enumerate(arr):
        total += value
        if total == k:
            best = i + 1
        if total - k in first_seen:
            best = max(best, i - first_seen[total - k])
        first_seen.setdefault(total, i)
    return best


def two_sum(arr: Iterable[int], target: int) -> tuple[int, int] | None:
    """Indices ``(i, j)``, ``i < j``, of two elements adding up to ``target``, or None."""
    seen: dict[int, int] = {}
    for i, value in enumerate(arr):
        complement = target - value
        if complement in seen:
            return seen[complement], i
        seen[value] = i
    return None


def sort_colors(arr: MutableSequence[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place in one pass (Dutch national flag)."""
    low = mid = 0
    high = len(arr) - 1
    while mid <= high:
        if arr[mid] == 0:
            arr[low], arr[mid] = arr[mid], arr[low]
            low += 1
            mid += 1
        elif arr[mid] == 1:
            mid += 1
        else:
            arr[mid], arr[high] = arr[high], arr[mid]
            high -= 1


def majority_element(arr: Iterable[int]) -> int:
    """The element occurring more than n/2 times, by Moore's voting.

    The input is assumed to have such an element.
    """
    candidate: int | None = None
    count = 0
    for num in arr:
        if count == 0:
            candidate = num
        count += 1 if num == candidate else -1
    if candidate is None:
        raise ValueError("an empty sequence has no majority element")
    return candidate


def _require_non_empty(arr: Sequence[int]) -> None:
    if not arr:
        raise ValueError("expected a non-empty sequence")


def max_subarray_sum(arr: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous subarray (Kadane)."""
    _require_non_empty(arr)
    best = current = arr[0]
    for value in arr[1:]:
        current = max(value, current + value)
        best = max(best, current)
    return best


def max_subarray(arr: Sequence[int]) -> list[int]:
    """The earliest non-empty contiguous subarray with the largest sum."""
    _require_non_empty(arr)
    best = current = arr[0]
    start = end = temp_start = 0
    for i in range(1, len(arr)):
        value = arr[i]
        if value > current + value:
            current = value
            temp_start = i
        else:
            current += value
        if current > best:
            best = current
            start, end = temp_start, i
    return list(arr[start : end + 1])


def max_profit(prices: Iterable[int]) -> int:
    """Best profit from one buy followed by one sell; 0 if none is possible."""
    lowest: int | None = None
    best = 0
    for price in prices:
        lowest = price if lowest is None else min(lowest, price)
        best = max(best, price - lowest)
    return best