"""Binary search on rotated sorted sequences and related single-pass searches."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def _require_non_empty(arr: Sequence[Any]) -> None:
    if not arr:
        raise ValueError("expected a non-empty sequence")


def search_rotated(arr: Sequence[Any], target: Any) -> int:
    """Index of ``target`` in a rotated sorted sequence of distinct values, or -1."""
    left, right = 0, len(arr) - 1
    while left <= right:
        mid = (left + right) // 2
        if arr[mid] == target:
            return mid
        if arr[left] <= arr[mid]:
            if arr[left] <= target < arr[mid]:
                right = mid - 1
            else:
                left = mid + 1
        elif arr[mid] < target <= arr[right]:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def search_rotated_with_duplicates(arr: Sequence[Any], target: Any) -> bool:
    """Tell whether ``target`` occurs in a rotated sorted sequence that may repeat values."""
    left, right = 0, len(arr) - 1
    while left <= right:
        mid = (left + right) // 2
        if arr[mid] == target:
            return True
        if arr[left] == arr[mid] == arr[right]:
            left += 1
            right -= 1
            continue
        if arr[left] <= arr[mid]:
            if arr[left] <= target < arr[mid]:
                right = mid - 1
            else:
                left = mid + 1
        elif arr[mid] < target <= arr[right]:
            left = mid + 1
        else:
            right = mid - 1
    return False


def _min_index(arr: Sequence[Any]) -> int:
    _require_non_empty(arr)
    left, right = 0, len(arr) - 1
    while left < right:
        mid = (left + right) // 2
        if arr[mid] > arr[right]:
            left = mid + 1
        else:
            right = mid
    return left


def find_min_rotated(arr: Sequence[Any]) -> Any:
    """Smallest element of a rotated sorted sequence."""
    return arr[_min_index(arr)]


def count_rotations(arr: Sequence[Any]) -> int:
    """How many times a sorted sequence was rotated: the index of its minimum."""
    return _min_index(arr)


def single_element(arr: Sequence[Any]) -> Any:
    """The one element of a sorted sequence whose other elements all come in pairs."""
    _require_non_empty(arr)
    left, right = 0, len(arr) - 1
    while left < right:
        mid = (left + right) // 2
        if mid % 2 == 1:
            mid -= 1
        if arr[mid] == arr[mid + 1]:
            left = mid + 2
        else:
            right = mid
    return arr[left]


def find_peak(arr: Sequence[Any]) -> int:
    """Index of an element greater than its neighbours."""
    _require_non_empty(arr)
    left, right = 0, len(arr) - 1
    while left < right:
        mid = (left + right) // 2
        if arr[mid] > arr[mid + 1]:
            right = mid
        else:
            left = mid + 1
    return left