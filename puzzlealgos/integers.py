"""Integer puzzles: digit reversal, palindromes and integer square roots."""

from __future__ import annotations

import math

_INT_LIMIT = (2**31 - 1) // 10


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``; return 0 if the result leaves 32 bits."""
    sign = -1 if x < 0 else 1
    remaining = abs(x)
    reversed_value = 0
    while remaining:
        if reversed_value > _INT_LIMIT:
            return 0
        remaining, digit = divmod(remaining, 10)
        reversed_value = reversed_value * 10 + digit
    return sign * reversed_value


def is_palindrome_number(x: int) -> bool:
    """Tell whether a number reads the same backwards; negatives never do."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def int_sqrt(x: int) -> int:
    """Return the floor of the square root of a non-negative integer."""
    if x < 0:
        raise ValueError("square root of a negative number")
    return math.isqrt(x)