"""Binary search over the answer space: roots, eating speeds, bouquets, divisors, shipping."""

from __future__ import annotations

from collections.abc import Callable, Sequence


def _smallest_satisfying(low: int, high: int, ok: Callable[[int], bool]) -> int:
    """Smallest value in ``[low, high]`` for which the monotone ``ok`` holds, else ``high``."""
    while low < high:
        mid = (low + high) // 2
        if ok(mid):
            high = mid
        else:
            low = mid + 1
    return low


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def integer_sqrt(n: int) -> int:
    """Largest integer whose square does not exceed ``n``."""
    if n < 0:
        raise ValueError(f"square root of a negative number: {n}")
    left, right, answer = 0, n, 0
    while left <= right:
        mid = (left + right) // 2
        if mid * mid <= n:
            answer = mid
            left = mid + 1
        else:
            right = mid - 1
    return answer


def nth_root(n: int, m: int) -> int | None:
    """The integer ``r`` with ``r ** n == m``, or None if ``m`` is not a perfect power."""
    if n < 1:
        raise ValueError(f"root degree must be positive, got {n}")
    if m < 1:
        return None
    left, right = 1, m
    while left <= right:
        mid = (left + right) // 2
        power = mid**n
        if power == m:
            return mid
        if power < m:
            left = mid + 1
        else:
            right = mid - 1
    return None


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Slowest whole-banana-per-hour speed that finishes every pile within ``h`` hours."""
    if not piles:
        raise ValueError("expected at least one pile")
    if h < len(piles):
        raise ValueError("fewer hours than piles: no speed is fast enough")
    return _smallest_satisfying(
        1, max(piles), lambda speed: sum(_ceil_div(p, speed) for p in piles) <= h
    )


def _bouquets_by(bloom_day: Sequence[int], k: int, day: int) -> int:
    bouquets = run = 0
    for bloom in bloom_day:
        if bloom <= day:
            run += 1
            if run == k:
                bouquets += 1
                run = 0
        else:
            run = 0
    return bouquets


def min_days_bouquets(bloom_day: Sequence[int], m: int, k: int) -> int | None:
    """Fewest days to make ``m`` bouquets of ``k`` adjacent flowers, or None if impossible."""
    if m <= 0 or k <= 0:
        raise ValueError("bouquet count and size must be positive")
    if m * k > len(bloom_day):
        return None
    return _smallest_satisfying(
        min(bloom_day), max(bloom_day), lambda day: _bouquets_by(bloom_day, k, day) >= m
    )


def smallest_divisor(nums: Sequence[int], threshold: int) -> int:
    """Smallest divisor keeping the sum of rounded-up quotients within ``threshold``."""
    if not nums:
        raise ValueError("expected a non-empty sequence")
    if threshold < len(nums):
        raise ValueError("threshold below the number of elements cannot be met")
    return _smallest_satisfying(
        1, max(nums), lambda d: sum(_ceil_div(x, d) for x in nums) <= threshold
    )


def _days_needed(weights: Sequence[int], capacity: int) -> int:
    days, load = 1, 0
    for weight in weights:
        if load + weight > capacity:
            days += 1
            load = 0
        load += weight
    return days


def ship_within_days(weights: Sequence[int], days: int) -> int:
    """Least ship capacity that carries the packages in order within ``days`` days."""
    if not weights:
        raise ValueError("expected at least one package")
    if days < 1:
        raise ValueError(f"days must be positive, got {days}")
    return _smallest_satisfying(
        max(weights), sum(weights), lambda cap: _days_needed(weights, cap) <= days
    )


def kth_missing_positive(arr: Sequence[int], k: int) -> int:
    """The ``k``-th positive integer missing from strictly increasing ``arr``."""
    left, right = 0, len(arr)
    while left < right:
        mid = (left + right) // 2
        if arr[mid] - (mid + 1) < k:
            left = mid + 1
        else:
            right = mid
    return left + k