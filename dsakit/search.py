"""Binary search on sorted sequences: exact lookup, bounds, floor/ceil and occurrences.

Index results use -1 for "not found", like ``str.find``; value results use None.
"""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Sequence
from typing import Any


def binary_search(arr: Sequence[Any], target: Any) -> int:
    """Index of ``target`` in sorted ``arr``, or -1 if absent."""
    left, right = 0, len(arr) - 1
    while left <= right:
        mid = (left + right) // 2
        if arr[mid] == target:
            return mid
        if arr[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def lower_bound(arr: Sequence[Any], target: Any) -> int:
    """First index whose element is not less than ``target``."""
    return bisect_left(arr, target)


def upper_bound(arr: Sequence[Any], target: Any) -> int:
    """First index whose element is greater than ``target``."""
    return bisect_right(arr, target)


def find_floor(arr: Sequence[Any], target: Any) -> int:
    """Index of the last element not greater than ``target``, or -1."""
    left, right = 0, len(arr) - 1
    found = -1
    while left <= right:
        mid = (left + right) // 2
        if arr[mid] <= target:
            found = mid
            left = mid + 1
        else:
            right = mid - 1
    return found


def floor_and_ceil_unsorted(x: Any, arr: Iterable[Any]) -> tuple[Any | None, Any | None]:
    """Largest value <= ``x`` and smallest value >= ``x`` of an unsorted collection.

    The input is left untouched; a missing floor or ceil is None.
    """
    values = sorted(arr)
    below = bisect_right(values, x)
    above = bisect_left(values, x)
    floor = values[below - 1] if below > 0 else None
    ceil = values[above] if above < len(values) else None
    return floor, ceil


def search_insert_position(arr: Sequence[Any], target: Any) -> int:
    """Index of ``target`` if present, else where it would be inserted to keep order."""
    left, right = 0, len(arr) - 1
    while left <= right:
        mid = (left + right) // 2
        if arr[mid] == target:
            return mid
        if arr[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return left


def floor_and_ceil(arr: Sequence[Any], target: Any) -> tuple[Any | None, Any | None]:
    """Floor and ceil values of ``target`` in sorted ``arr``; None where missing."""
    left, right = 0, len(arr) - 1
    floor: Any | None = None
    ceil: Any | None = None
    while left <= right:
        mid = (left + right) // 2
        if arr[mid] == target:
            return arr[mid], arr[mid]
        if arr[mid] < target:
            floor = arr[mid]
            left = mid + 1
        else:
            ceil = arr[mid]
            right = mid - 1
    return floor, ceil


def first_and_last(arr: Sequence[Any], target: Any) -> tuple[int, int]:
    """First and last index of ``target`` via the bounds; ``(-1, -1)`` if absent."""
    first = lower_bound(arr, target)
    if first >= len(arr) or arr[first] != target:
        return -1, -1
    return first, upper_bound(arr, target) - 1


def _find_edge(arr: Sequence[Any], target: Any, *, leftmost: bool) -> int:
    left, right = 0, len(arr) - 1
    found = -1
    while left <= right:
        mid = (left + right) // 2
        if arr[mid] == target:
            found = mid
            if leftmost:
                right = mid - 1
            else:
                left = mid + 1
        elif arr[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return found


def find_first(arr: Sequence[Any], target: Any) -> int:
    """Index of the first occurrence of ``target``, or -1."""
    return _find_edge(arr, target, leftmost=True)


def find_last(arr: Sequence[Any], target: Any) -> int:
    """Index of the last occurrence of ``target``, or -1."""
    return _find_edge(arr, target, leftmost=False)


def search_range(nums: Sequence[Any], target: Any) -> tuple[int, int]:
    """First and last index of ``target`` by two edge searches; ``(-1, -1)`` if absent."""
    return find_first(nums, target), find_last(nums, target)


def count_occurrences(arr: Sequence[Any], target: Any) -> int:
    """Number of times ``target`` occurs in sorted ``arr``."""
    first, last = first_and_last(arr, target)
    if first == -1:
        return 0
    return last - first + 1