"""Array puzzles: pair sums, merging, compaction and digit arithmetic."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from heapq import merge
from itertools import groupby


def two_sum(nums: Iterable[int], target: int) -> tuple[int, int] | None:
    """Find two positions whose values add up to ``target``.

    Returns ``(i, j)`` with ``j < i``, where ``i`` is the first index at which
    a matching pair completes, or ``None`` when no pair exists.
    """
    seen: dict[int, int] = {}
    for index, num in enumerate(nums):
        partner = seen.get(target - num)
        if partner is not None:
            return index, partner
        seen[num] = index
    return None


def median_of_sorted(first: Iterable[float], second: Iterable[float]) -> float:
    """Return the median of the union of two sorted sequences."""
    merged = list(merge(first, second))
    if not merged:
        raise ValueError("median of two empty sequences is undefined")
    mid = len(merged) // 2
    if len(merged) % 2 == 0:
        return (merged[mid - 1] + merged[mid]) / 2.0
    return float(merged[mid])


def remove_duplicates(nums: Iterable[int]) -> list[int]:
    """Return a sorted sequence with each run of equal values kept once."""
    return [value for value, _ in groupby(nums)]


def remove_element(nums: Iterable[int], value: int) -> list[int]:
    """Return the items of ``nums`` that differ from ``value``, in order."""
    return [num for num in nums if num != value]


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to a number given as a list of decimal digits."""
    result = list(digits)
    for position in reversed(range(len(result))):
        if result[position] < 9:
            result[position] += 1
            return result
        result[position] = 0
    return [1, *result]


def asteroids_destroyed(mass: int, asteroids: Iterable[int]) -> bool:
    """Tell whether a planet can absorb every asteroid, smallest first."""
    current = mass
    for asteroid in sorted(asteroids):
        if current < asteroid:
            return False
        current += asteroid
    return True


def digit_sum(number: int) -> int:
    """Return the sum of the decimal digits of a positive number, else 0."""
    if number <= 0:
        return 0
    return sum(int(digit) for digit in str(number))


def min_digit_sum_element(nums: Iterable[int]) -> int:
    """Return the smallest digit sum among the numbers."""
    values = list(nums)
    if not values:
        raise ValueError("at least one number is required")
    return min(digit_sum(num) for num in values)