"""Small classic recursion exercises, written without deep call stacks."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")


def repeat_line(text: str, n: int) -> list[str]:
    """Return ``text`` repeated ``n`` times as a list of lines."""
    _require_non_negative(n)
    return [text] * n


def count_up(n: int) -> list[int]:
    """Numbers from 1 to ``n``."""
    return list(range(1, n + 1))


def count_down(n: int) -> list[int]:
    """Numbers from ``n`` down to 1."""
    _require_non_negative(n)
    return list(range(n, 0, -1))


def sum_of_n(n: int) -> int:
    """Sum of the first ``n`` natural numbers."""
    _require_non_negative(n)
    return n * (n + 1) // 2


def factorial(n: int) -> int:
    """``n!`` for a non-negative integer."""
    _require_non_negative(n)
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def reverse_in_place(items: MutableSequence[Any]) -> None:
    """Reverse a mutable sequence by swapping from both ends inward."""
    left, right = 0, len(items) - 1
    while left < right:
        items[left], items[right] = items[right], items[left]
        left += 1
        right -= 1


def is_palindrome_string(s: str) -> bool:
    """Tell whether ``s`` reads the same forwards and backwards."""
    return s == s[::-1]


def fibonacci(n: int) -> int:
    """The ``n``-th Fibonacci number, with fib(0) = 0 and fib(1) = 1."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current