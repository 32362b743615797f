"""Array and matrix problems: subarray sums, rotations, paths and graphs."""

from __future__ import annotations

import heapq
from itertools import pairwise
from typing import Optional, Sequence

INF = 99999
"""Distance that marks an absent edge in :func:`floyd_warshall`."""


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane's algorithm)."""
    if not values:
        raise ValueError("values must not be empty")
    best: Optional[int] = None
    running = 0
    for value in values:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    return best


def max_sum_naive(values: Sequence[int]) -> int:
    """Largest contiguous sum, never below zero, by checking every run."""
    best = 0
    for start in range(len(values)):
        running = 0
        for value in values[start:]:
            running += value
            best = max(best, running)
    return best


def max_sum(values: Sequence[int]) -> int:
    """Largest contiguous sum, never below zero, in a single pass."""
    best = 0
    ending_here = 0
    for value in values:
        ending_here = max(ending_here + value, value)
        best = max(best, ending_here)
    return best


def stock_profit(prices: Sequence[int]) -> int:
    """Total profit from buying at every local low and selling at every local high."""
    return sum(max(later - earlier, 0) for earlier, later in pairwise(prices))


def rotate(values: Sequence[int], k: int) -> list[int]:
    """Return ``values`` rotated ``k`` places to the right."""
    items = list(values)
    if not items:
        return items
    k %= len(items)
    return items[len(items) - k:] + items[:len(items) - k]


def invert_color(rgb: Sequence[int]) -> list[int]:
    """Invert each 8-bit colour channel."""
    return [255 - channel for channel in rgb]


def furthest_building(heights: Sequence[int], bricks: int, ladders: int) -> int:
    """Return the furthest building index reachable using bricks and ladders."""
    climbs: list[int] = []
    for index, (current, following) in enumerate(pairwise(heights)):
        jump = following - current
        if jump <= 0:
            continue
        heapq.heappush(climbs, jump)
        if len(climbs) > ladders:
            bricks -= heapq.heappop(climbs)
        if bricks < 0:
            return index
    return max(len(heights) - 1, 0)


def three_sum_closest(nums: Sequence[int], target: int) -> int:
    """Return the sum of three numbers that is closest to ``target``."""
    if len(nums) < 3:
        raise ValueError("at least three numbers are needed")
    ordered = sorted(nums)
    best: Optional[int] = None
    best_gap = float("inf")
    for fixed, first in enumerate(ordered):
        left, right = fixed + 1, len(ordered) - 1
        while left < right:
            total = first + ordered[left] + ordered[right]
            if total == target:
                return total
            if abs(total - target) < best_gap:
                best, best_gap = total, abs(total - target)
            if total > target:
                right -= 1
            else:
                left += 1
    return best


def find_celebrity(matrix: Sequence[Sequence[int]]) -> Optional[int]:
    """Return the person everyone knows but who knows nobody, or None.

    ``matrix[a][b] == 1`` means that ``a`` knows ``b``.
    """
    size = len(matrix)
    if size == 0:
        return None
    candidate = 0
    for person in range(1, size):
        if matrix[candidate][person] == 1:
            candidate = person
    knows_nobody = all(known == 0 for known in matrix[candidate])
    known_by_all = sum(row[candidate] == 1 for row in matrix) == size - 1
    return candidate if knows_nobody and known_by_all else None


def min_path_cost(cost: Sequence[Sequence[int]], m: int, n: int) -> int:
    """Cheapest path from (0, 0) to (m, n) moving right, down or diagonally."""
    if not 0 <= m < len(cost) or not 0 <= n < len(cost[0]):
        raise IndexError(f"cell ({m}, {n}) is outside the cost grid")
    previous: Optional[list[int]] = None
    for row in cost[:m + 1]:
        current: list[int] = []
        for column, cell in enumerate(row[:n + 1]):
            options = []
            if column:
                options.append(current[column - 1])
            if previous is not None:
                options.append(previous[column])
                if column:
                    options.append(previous[column - 1])
            current.append(cell + min(options, default=0))
        previous = current
    return previous[n]


def floyd_warshall(graph: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return shortest distances between every pair of vertices; ``INF`` means unreachable."""
    dist = [list(row) for row in graph]
    size = len(dist)
    if any(len(row) != size for row in dist):
        raise ValueError("graph must be a square matrix")
    for via in range(size):
        via_row = dist[via]
        for row in dist:
            to_via = row[via]
            if to_via == INF:
                continue
            for target, onward in enumerate(via_row):
                if onward != INF and to_via + onward < row[target]:
                    row[target] = to_via + onward
    return dist