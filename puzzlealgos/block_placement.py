"""Offline answers to obstacle and block placement queries on a number line."""

from __future__ import annotations

from bisect import bisect_left, bisect_right, insort
from collections.abc import Sequence
from itertools import pairwise

PLACE_OBSTACLE = 1
CHECK_BLOCK = 2


class MaxSegmentTree:
    """Point-assign, range-maximum tree over positions ``0 .. size - 1``.

    Every position starts at 0 and an empty range reports 0.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self._size = size
        self._tree = [0] * (2 * size)

    def update(self, index: int, value: int) -> None:
        """Set the value stored at ``index``."""
        if not 0 <= index < self._size:
            raise IndexError(f"position {index} out of range")
        position = index + self._size
        self._tree[position] = value
        position //= 2
        while position:
            self._tree[position] = max(self._tree[2 * position], self._tree[2 * position + 1])
            position //= 2

    def query(self, left: int, right: int) -> int:
        """Return the maximum over the inclusive range, clipped to the tree."""
        left = max(left, 0)
        right = min(right, self._size - 1)
        result = 0
        low = left + self._size
        high = right + self._size + 1
        while low < high:
            if low & 1:
                result = max(result, self._tree[low])
                low += 1
            if high & 1:
                high -= 1
                result = max(result, self._tree[high])
            low //= 2
            high //= 2
        return result


def block_placement_results(queries: Sequence[Sequence[int]]) -> list[bool]:
    """Answer block queries on a line with obstacles placed over time.

    ``[1, x]`` places an obstacle at ``x``; ``[2, x, size]`` asks whether a
    block of ``size`` fits somewhere within ``[0, x]`` without crossing an
    obstacle. Returns one answer per ``[2, ...]`` query, in order.
    """
    obstacles = {0}
    limit = 0
    for query in queries:
        kind, position = query[0], query[1]
        if kind not in (PLACE_OBSTACLE, CHECK_BLOCK):
            raise ValueError(f"unknown query type: {kind}")
        if position < 0:
            raise ValueError(f"negative position: {position}")
        limit = max(limit, position)
        if kind == PLACE_OBSTACLE:
            if position in obstacles:
                raise ValueError(f"obstacle already present at {position}")
            obstacles.add(position)

    ordered = sorted(obstacles)
    gaps = MaxSegmentTree(limit + 1)
    for previous, current in pairwise(ordered):
        gaps.update(current, current - previous)

    answers: list[bool] = []
    for query in reversed(queries):
        if query[0] == CHECK_BLOCK:
            position, size = query[1], query[2]
            nearest = ordered[bisect_right(ordered, position) - 1]
            best = max(gaps.query(0, nearest), position - nearest)
            answers.append(best >= size)
        else:
            position = query[1]
            slot = bisect_left(ordered, position)
            left = ordered[slot - 1]
            gaps.update(position, 0)
            if slot + 1 < len(ordered):
                right = ordered[slot + 1]
                gaps.update(right, right - left)
            del ordered[slot]

    answers.reverse()
    return answers


__all__ = ["MaxSegmentTree", "block_placement_results", "insort"]