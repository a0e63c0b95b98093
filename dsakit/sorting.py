"""In-place comparison sorts and a merge of two sorted lists without extra space.

Every sort rearranges the given mutable sequence and returns ``None``, like
``list.sort``.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any


def _swap(items: MutableSequence[Any], i: int, j: int) -> None:
    items[i], items[j] = items[j], items[i]


def selection_sort(items: MutableSequence[Any]) -> None:
    """Move the smallest remaining element to each position in turn."""
    n = len(items)
    for i in range(n - 1):
        smallest = min(range(i, n), key=items.__getitem__)
        _swap(items, i, smallest)


def bubble_sort(items: MutableSequence[Any]) -> None:
    """Swap adjacent out-of-order pairs; stop early once a pass makes no swap."""
    n = len(items)
    for end in range(n - 1, 0, -1):
        swapped = False
        for j in range(end):
            if items[j] > items[j + 1]:
                _swap(items, j, j + 1)
                swapped = True
        if not swapped:
            break


def recursive_bubble_sort(items: MutableSequence[Any]) -> None:
    """Bubble sort that makes a full pass over each shrinking prefix.

    Each pass carries the largest element of the prefix to its end, and the
    prefix then shrinks by one until a single element is left.
    """
    for size in range(len(items), 1, -1):
        for i in range(size - 1):
            if items[i] > items[i + 1]:
                _swap(items, i, i + 1)


def _insert_last(items: MutableSequence[Any], end: int) -> None:
    """Insert ``items[end]`` into the already sorted ``items[:end]``."""
    key = items[end]
    j = end - 1
    while j >= 0 and items[j] > key:
        items[j + 1] = items[j]
        j -= 1
    items[j + 1] = key


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Grow a sorted prefix by shifting each new element into place."""
    for i in range(1, len(items)):
        _insert_last(items, i)


def recursive_insertion_sort(items: MutableSequence[Any]) -> None:
    """Insertion sort phrased as: sort the first n-1 elements, then insert the last."""
    for size in range(2, len(items) + 1):
        _insert_last(items, size - 1)


def _merge(items: MutableSequence[Any], left: int, mid: int, right: int) -> None:
    merged: list[Any] = []
    i, j = left, mid + 1
    while i <= mid and j <= right:
        if items[i] <= items[j]:
            merged.append(items[i])
            i += 1
        else:
            merged.append(items[j])
            j += 1
    merged.extend(items[i : mid + 1])
    merged.extend(items[j : right + 1])
    items[left : right + 1] = merged


def _merge_sort(items: MutableSequence[Any], left: int, right: int) -> None:
    if left >= right:
        return
    mid = left + (right - left) // 2
    _merge_sort(items, left, mid)
    _merge_sort(items, mid + 1, right)
    _merge(items, left, mid, right)


def merge_sort(items: MutableSequence[Any]) -> None:
    """Stable top-down merge sort."""
    _merge_sort(items, 0, len(items) - 1)


def _partition_last(items: MutableSequence[Any], low: int, high: int) -> int:
    pivot = items[high]
    i = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            i += 1
            _swap(items, i, j)
    _swap(items, i + 1, high)
    return i + 1


def _partition_first(items: MutableSequence[Any], low: int, high: int) -> int:
    pivot = items[low]
    i, j = low, high
    while i < j:
        while items[i] <= pivot and i < high:
            i += 1
        while items[j] > pivot and j > low:
            j -= 1
        if i < j:
            _swap(items, i, j)
    _swap(items, low, j)
    return j


def _quick_sort(items: MutableSequence[Any], partition: Any) -> None:
    # An explicit stack keeps already-sorted input from exhausting the call stack.
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            p = partition(items, low, high)
            pending.append((p + 1, high))
            pending.append((low, p - 1))


def quick_sort(items: MutableSequence[Any]) -> None:
    """Quick sort with the last element of each range as pivot."""
    _quick_sort(items, _partition_last)


def quick_sort_first_pivot(items: MutableSequence[Any]) -> None:
    """Quick sort with the first element of each range as pivot."""
    _quick_sort(items, _partition_first)


def merge_sorted_in_place(first: MutableSequence[Any], second: MutableSequence[Any]) -> None:
    """Merge two sorted lists so that ``first`` holds the smallest elements.

    Both keep their lengths; afterwards each is sorted and every element of
    ``first`` is no greater than any element of ``second``.
    """
    i, j = len(first) - 1, 0
    while i >= 0 and j < len(second) and first[i] > second[j]:
        first[i], second[j] = second[j], first[i]
        i -= 1
        j += 1
    first[:] = sorted(first)
    second[:] = sorted(second)