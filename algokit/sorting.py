"""Classic comparison and distribution sorts."""

from __future__ import annotations

from bisect import insort
from typing import Any, Iterable


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new ascending list, inserting each item after its equals."""
    result: list[Any] = []
    for item in items:
        insort(result, item)
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new ascending list built by repeatedly selecting the minimum."""
    result = list(items)
    for start in range(len(result) - 1):
        smallest = min(range(start, len(result)), key=result.__getitem__)
        if smallest != start:
            result[start], result[smallest] = result[smallest], result[start]
    return result


def radix_sort(items: Iterable[int]) -> list[int]:
    """Return a new ascending list of non-negative integers, sorted digit by digit."""
    result = list(items)
    if any(value < 0 for value in result):
        raise ValueError("radix sort handles non-negative integers only")
    if not result:
        return result
    largest = max(result)
    place = 1
    while largest // place > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in result:
            buckets[(value // place) % 10].append(value)
        result = [value for bucket in buckets for value in bucket]
        place *= 10
    return result