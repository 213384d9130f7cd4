"""Small numeric algorithms."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable
from typing import Any


def binpow(base: int, exponent: int, modulus: int) -> int:
    """Compute ``base ** exponent`` modulo ``modulus`` by repeated squaring.

    As in the classic loop, the accumulator starts at 1 and is only reduced
    when a bit of the exponent is set, so ``binpow(x, 0, m)`` is 1.
    """
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    base %= modulus
    result = 1
    while exponent > 0:
        if exponent & 1:
            result = result * base % modulus
        base = base * base % modulus
        exponent >>= 1
    return result


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative integer."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def mccarthy91(n: int) -> int:
    """Evaluate the nested recursion f(n) = n - 10 if n > 100 else f(f(n + 11))."""
    pending = 1
    while pending:
        if n > 100:
            n -= 10
            pending -= 1
        else:
            n += 11
            pending += 1
    return n


def max_subarray_sum(values: Iterable[int]) -> int:
    """Kadane's algorithm; the empty subarray counts, so the result is never below 0."""
    best = current = 0
    for value in values:
        current = max(value, current + value)
        best = max(best, current)
    return best


def longest_nondecreasing_subsequence(values: Iterable[Any]) -> int:
    """Length of the longest non-decreasing subsequence, in O(n log n)."""
    tails: list[Any] = []
    for value in values:
        slot = bisect_right(tails, value)
        if slot == len(tails):
            tails.append(value)
        else:
            tails[slot] = value
    return len(tails)


def reverse_items(items: Iterable[Any]) -> list[Any]:
    """Return the elements in reverse order as a new list."""
    result = list(items)
    result.reverse()
    return result