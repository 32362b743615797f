"""Searching sorted and unsorted sequences."""

from __future__ import annotations

from typing import Any, Optional, Sequence


def binary_search(items: Sequence[Any], target: Any) -> Optional[int]:
    """Return the index of ``target`` in the ascending ``items``, or None if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        value = items[mid]
        if value == target:
            return mid
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
    return None


def binary_search_recursive(items: Sequence[Any], target: Any) -> Optional[int]:
    """Recursive binary search; same contract as :func:`binary_search`."""
    return _search_between(items, target, 0, len(items) - 1)


def _search_between(items: Sequence[Any], target: Any, low: int, high: int) -> Optional[int]:
    if low > high:
        return None
    mid = (low + high) // 2
    value = items[mid]
    if value == target:
        return mid
    if value < target:
        return _search_between(items, target, mid + 1, high)
    return _search_between(items, target, low, mid - 1)


def linear_search(items: Sequence[Any], target: Any) -> Optional[int]:
    """Return the index of the first occurrence of ``target``, or None if absent."""
    return next((index for index, value in enumerate(items) if value == target), None)