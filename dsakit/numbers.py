"""Number-theory helpers: digits, divisors, primes, gcd/lcm and Armstrong numbers."""

from __future__ import annotations

import math


def count_digits(n: int) -> int:
    """Return the number of decimal digits of a positive integer."""
    if n <= 0:
        raise ValueError(f"count_digits needs a positive integer, got {n}")
    return len(str(n))


def reverse_number(n: int) -> int:
    """Return the digits of ``n`` in reverse order; non-positive input gives 0."""
    if n <= 0:
        return 0
    return int(str(n)[::-1])


def is_palindrome(n: int) -> bool:
    """Tell whether ``n`` reads the same forwards and backwards."""
    if n < 0:
        return False
    digits = str(n)
    return digits == digits[::-1]


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm."""
    while b:
        a, b = b, a % b
    return a


def is_armstrong(n: int) -> bool:
    """Tell whether ``n`` equals the sum of its digits each raised to the digit count."""
    if n < 0:
        return False
    digits = str(n)
    powers = [d ** len(digits) for d in range(10)]
    return sum(powers[int(c)] for c in digits) == n


def divisors(n: int) -> list[int]:
    """Return the divisors of ``n`` as found pairwise up to its square root.

    Each small divisor ``i`` is followed by its partner ``n // i`` (unless they
    are equal), so the list is ordered like ``1, n, 2, n // 2, ...``.
    """
    found: list[int] = []
    i = 1
    while i * i <= n:
        if n % i == 0:
            found.append(i)
            if i != n // i:
                found.append(n // i)
        i += 1
    return found


def is_prime(n: int) -> bool:
    """Primality test using the 6k ± 1 rule."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def is_cube_armstrong(n: int) -> bool:
    """Tell whether ``n`` equals the sum of the cubes of its digits."""
    if n < 0:
        return False
    return sum(int(c) ** 3 for c in str(n)) == n


def evenly_divides(n: int) -> int:
    """Count the non-zero digits of ``n`` that divide ``n`` exactly."""
    return sum(1 for c in str(abs(n)) if c != "0" and n % int(c) == 0)


def sum_of_divisors(n: int) -> int:
    """Sum of all divisors of every integer from 1 to ``n``."""
    # Each i divides exactly n // i of the numbers 1..n.
    return sum(i * (n // i) for i in range(1, n + 1))


def lcm_and_gcd(a: int, b: int) -> tuple[int, int]:
    """Return ``(lcm, gcd)`` of two integers."""
    divisor = gcd(a, b)
    if divisor == 0:
        raise ZeroDivisionError("lcm of two zeros is undefined")
    return (a * b) // divisor, divisor


def primes_up_to(n: int) -> list[int]:
    """All primes not greater than ``n`` by the Sieve of Eratosthenes."""
    if n < 2:
        return []
    sieve = [True] * (n + 1)
    sieve[0] = sieve[1] = False
    for i in range(2, math.isqrt(n) + 1):
        if sieve[i]:
            sieve[i * i :: i] = [False] * len(range(i * i, n + 1, i))
    return [i for i, prime in enumerate(sieve) if prime]