"""Elementary array exercises: extremes, order checks, rotation and set-like helpers."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence
from functools import reduce
from operator import xor
from typing import Any


def find_largest(arr: Iterable[Any]) -> Any:
    """Return the largest element."""
    try:
        return max(arr)
    except ValueError:
        raise ValueError("cannot find the largest element of an empty sequence") from None


def second_largest(arr: Iterable[int]) -> int | None:
    """Return the largest value strictly smaller than the maximum.

    Returns ``None`` when there is no such value (fewer than two distinct elements).
    """
    largest: int | None = None
    second: int | None = None
    for num in arr:
        if largest is None or num > largest:
            second = largest
            largest = num
        elif num != largest and (second is None or num > second):
            second = num
    return second


def is_sorted(arr: Sequence[Any]) -> bool:
    """Tell whether the elements are in non-decreasing order."""
    return all(a <= b for a, b in zip(arr, arr[1:]))


def remove_duplicates(arr: MutableSequence[Any]) -> int:
    """Drop repeated neighbours from a sorted list in place; return the new length."""
    if not arr:
        return 0
    j = 0
    for value in arr[1:]:
        if value != arr[j]:
            j += 1
            arr[j] = value
    del arr[j + 1 :]
    return j + 1


def left_rotate_by_one(arr: MutableSequence[Any]) -> None:
    """Move the first element to the end, shifting the rest left."""
    if arr:
        arr.append(arr.pop(0))


def left_rotate(arr: MutableSequence[Any], d: int) -> None:
    """Rotate ``arr`` left by ``d`` places in place; ``d`` wraps around the length."""
    if not arr:
        return
    d %= len(arr)
    if d:
        arr[:] = [*arr[d:], *arr[:d]]


def move_zeros_to_end(arr: MutableSequence[int]) -> None:
    """Move every zero to the end, keeping the other elements in order."""
    j = 0
    for i, value in enumerate(arr):
        if value != 0:
            arr[i], arr[j] = arr[j], arr[i]
            j += 1


def linear_search(arr: Iterable[Any], target: Any) -> int:
    """Index of the first element equal to ``target``, or -1 if absent."""
    return next((i for i, value in enumerate(arr) if value == target), -1)


def find_union(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Distinct elements of both inputs, in order of first appearance."""
    return list(dict.fromkeys([*first, *second]))


def missing_number(arr: Iterable[int], n: int) -> int:
    """The one number from 1..n absent from ``arr``, found with XOR."""
    return reduce(xor, range(1, n + 1), 0) ^ reduce(xor, arr, 0)