"""Searching a sequence for a value."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def linear_search(items: Sequence[Any], target: Any) -> int | None:
    """Return the index of the first element equal to ``target``, or None."""
    return next(
        (index for index, item in enumerate(items) if item == target), None
    )


def binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in the ascending ``items``, or None."""
    low, high = 0, len(items) - 1
    while low <= high:
        middle = low + (high - low) // 2
        value = items[middle]
        if value == target:
            return middle
        if value < target:
            low = middle + 1
        else:
            high = middle - 1
    return None


def ternary_search(items: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in the ascending ``items``, or None.

    The range is split into thirds at two probe points each round.
    """
    low, high = 0, len(items) - 1
    while low <= high:
        third = (high - low) // 3
        first, second = low + third, high - third
        if items[first] == target:
            return first
        if items[second] == target:
            return second
        if target < items[first]:
            high = first - 1
        elif target > items[second]:
            low = second + 1
        else:
            low, high = first + 1, second - 1
    return None