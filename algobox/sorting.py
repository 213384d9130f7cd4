"""Comparison sorts that return a new sorted list and leave the input alone."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by shifting each element left into its place in the sorted prefix."""
    result = list(items)
    for position in range(1, len(result)):
        current = result[position]
        slot = position
        while slot > 0 and result[slot - 1] > current:
            result[slot] = result[slot - 1]
            slot -= 1
        result[slot] = current
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    left_iter, right_iter = iter(left), iter(right)
    left_head = next(left_iter, _EMPTY)
    right_head = next(right_iter, _EMPTY)
    while left_head is not _EMPTY and right_head is not _EMPTY:
        if left_head <= right_head:
            merged.append(left_head)
            left_head = next(left_iter, _EMPTY)
        else:
            merged.append(right_head)
            right_head = next(right_iter, _EMPTY)
    if left_head is not _EMPTY:
        merged.append(left_head)
        merged.extend(left_iter)
    if right_head is not _EMPTY:
        merged.append(right_head)
        merged.extend(right_iter)
    return merged


_EMPTY = object()


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort; ties keep the left element first."""
    result = list(items)
    if len(result) <= 1:
        return result
    middle = (len(result) - 1) // 2 + 1
    return _merge(merge_sort(result[:middle]), merge_sort(result[middle:]))


def _sift_down(heap: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Build a max-heap, then move the maximum to the end repeatedly."""
    heap = list(items)
    size = len(heap)
    for root in reversed(range(size // 2)):
        _sift_down(heap, size, root)
    for end in reversed(range(size)):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down(heap, end, 0)
    return heap


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Swap the smallest remaining element into each position in turn."""
    result = list(items)
    for position in range(len(result)):
        smallest = min(range(position, len(result)), key=result.__getitem__)
        result[position], result[smallest] = result[smallest], result[position]
    return result