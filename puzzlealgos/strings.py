"""String puzzles: substrings, parsing and character classification."""

from __future__ import annotations

from itertools import zip_longest

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

_ASCII_DIGITS = frozenset("0123456789")


def longest_unique_substring_length(text: str) -> int:
    """Return the length of the longest substring with no repeated character."""
    last_seen: dict[str, int] = {}
    start = best = 0
    for position, char in enumerate(text):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = position
        best = max(best, position - start + 1)
    return best


def longest_palindrome(text: str) -> str:
    """Return the leftmost longest palindromic substring."""
    size = len(text)
    best_start = best_length = 0
    for center in range(2 * size - 1):
        left = center // 2
        right = left + center % 2
        while left >= 0 and right < size and text[left] == text[right]:
            left -= 1
            right += 1
        length = right - left - 1
        if length > best_length:
            best_length = length
            best_start = left + 1
    return text[best_start : best_start + best_length]


def atoi(text: str) -> int:
    """Parse a leading signed integer, clamped to the 32-bit signed range."""
    rest = text.lstrip(" ")
    sign = 1
    if rest[:1] in ("+", "-"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    result = 0
    for char in rest:
        if char not in _ASCII_DIGITS:
            break
        result = result * 10 + int(char)
        if sign * result <= INT_MIN:
            return INT_MIN
        if sign * result >= INT_MAX:
            return INT_MAX
    return sign * result


def roman_to_int(numeral: str) -> int:
    """Convert a Roman numeral to an integer."""
    try:
        values = [_ROMAN_VALUES[char] for char in numeral]
    except KeyError as exc:
        raise ValueError(f"invalid Roman numeral character: {exc.args[0]!r}") from None
    total = 0
    for value, following in zip_longest(values, values[1:], fillvalue=0):
        total += -value if value < following else value
    return total


def add_binary(a: str, b: str) -> str:
    """Add two binary numbers given as strings of 0 and 1."""
    digits: list[str] = []
    carry = 0
    for digit_a, digit_b in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        total = int(digit_a) + int(digit_b) + carry
        digits.append(str(total % 2))
        carry = total // 2
    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def count_special_chars(word: str) -> int:
    """Count letters that appear in both lower and upper case."""
    lower = {char for char in word if char.islower()}
    upper = {char.lower() for char in word if char.isupper()}
    return len(lower & upper)


def count_ordered_special_chars(word: str) -> int:
    """Count letters whose every lower-case occurrence precedes the first upper-case one."""
    last_lower: dict[str, int] = {}
    first_upper: dict[str, int] = {}
    for position, char in enumerate(word):
        if char.islower():
            last_lower[char] = position
        elif char.isupper():
            first_upper.setdefault(char.lower(), position)
    return sum(
        1
        for letter, upper_pos in first_upper.items()
        if letter in last_lower and last_lower[letter] < upper_pos
    )