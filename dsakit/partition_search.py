"""Binary search over answers that split or spread sorted data.

Covers cow placement, book allocation, painters, gas stations and order
statistics of two sorted sequences.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

_EPS = 1e-6


def _can_place(stalls: Sequence[int], cows: int, distance: int) -> bool:
    placed, last = 1, stalls[0]
    for position in stalls[1:]:
        if position - last >= distance:
            placed += 1
            last = position
            if placed >= cows:
                return True
    return placed >= cows


def aggressive_cows(stalls: Sequence[int], cows: int) -> int:
    """Largest minimum distance at which ``cows`` cows fit into the stalls.

    The stalls need not be sorted; the input is left untouched.
    """
    if cows < 2:
        raise ValueError(f"need at least two cows to measure a distance, got {cows}")
    if cows > len(stalls):
        raise ValueError(f"{cows} cows do not fit into {len(stalls)} stalls")
    positions = sorted(stalls)
    low, high = 0, positions[-1] - positions[0]
    while low < high:
        mid = (low + high + 1) // 2
        if _can_place(positions, cows, mid):
            low = mid
        else:
            high = mid - 1
    return low


def _readers_needed(books: Sequence[int], limit: int) -> int:
    readers, pages = 1, 0
    for book in books:
        if pages + book > limit:
            readers += 1
            pages = book
        else:
            pages += book
    return readers


def book_allocation(books: Sequence[int], students: int) -> int:
    """Smallest possible maximum of pages given to one student.

    Each student receives a contiguous run of books.
    """
    if not books:
        raise ValueError("expected at least one book")
    if students < 1:
        raise ValueError(f"need at least one student, got {students}")
    low, high = max(books), sum(books)
    while low < high:
        mid = (low + high) // 2
        if _readers_needed(books, mid) <= students:
            high = mid
        else:
            low = mid + 1
    return low


def split_array_largest_sum(nums: Sequence[int], m: int) -> int:
    """Smallest largest sum when ``nums`` is split into ``m`` contiguous parts."""
    return book_allocation(nums, m)


def painters_partition(boards: Sequence[int], painters: int) -> int:
    """Least time to paint all boards when each painter takes a contiguous run."""
    return book_allocation(boards, painters)


def _stations_needed(stations: Sequence[int], max_distance: float) -> int:
    return sum(
        int((right - left) / max_distance) for left, right in zip(stations, stations[1:])
    )


def minimize_max_gas_distance(stations: Sequence[int], k: int) -> float:
    """Smallest achievable largest gap after adding ``k`` stations to sorted ``stations``."""
    if not stations:
        raise ValueError("expected at least one station")
    if k < 0:
        raise ValueError(f"number of new stations must be non-negative, got {k}")
    low, high = 0.0, float(stations[-1] - stations[0])
    while high - low > _EPS:
        mid = low + (high - low) / 2
        if _stations_needed(stations, mid) <= k:
            high = mid
        else:
            low = mid
    return low


def median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Median of the union of two sorted sequences by partitioning the shorter one."""
    short, long_ = (nums1, nums2) if len(nums1) <= len(nums2) else (nums2, nums1)
    x, y = len(short), len(long_)
    if x + y == 0:
        raise ValueError("median of two empty sequences is undefined")
    low, high = 0, x
    while low <= high:
        cut_x = (low + high) // 2
        cut_y = (x + y + 1) // 2 - cut_x
        max_x = short[cut_x - 1] if cut_x > 0 else -math.inf
        min_x = short[cut_x] if cut_x < x else math.inf
        max_y = long_[cut_y - 1] if cut_y > 0 else -math.inf
        min_y = long_[cut_y] if cut_y < y else math.inf
        if max_x <= min_y and max_y <= min_x:
            if (x + y) % 2 == 0:
                return (max(max_x, max_y) + min(min_x, min_y)) / 2.0
            return float(max(max_x, max_y))
        if max_x > min_y:
            high = cut_x - 1
        else:
            low = cut_x + 1
    raise ValueError("inputs are not sorted")


def kth_element(nums1: Sequence[int], nums2: Sequence[int], k: int) -> int:
    """The ``k``-th smallest (1-based) element of the union of two sorted sequences."""
    short, long_ = (nums1, nums2) if len(nums1) <= len(nums2) else (nums2, nums1)
    if not 1 <= k <= len(short) + len(long_):
        raise ValueError(f"k must lie in 1..{len(short) + len(long_)}, got {k}")
    left, right = max(0, k - len(long_)), min(len(short), k)
    while left < right:
        mid = (left + right) // 2
        if short[mid] < long_[k - mid - 1]:
            left = mid + 1
        else:
            right = mid
    candidates = []
    if left > 0:
        candidates.append(short[left - 1])
    if k - left > 0:
        candidates.append(long_[k - left - 1])
    return max(candidates)