import statistics
from collections import Counter

import pytest

from puzzlealgos.arrays import (
    asteroids_destroyed,
    digit_sum,
    median_of_sorted,
    min_digit_sum_element,
    plus_one,
    remove_duplicates,
    remove_element,
    two_sum,
)


@pytest.mark.parametrize(
    "nums, target",
    [([2, 7, 11, 15], 9), ([3, 2, 4], 6), ([3, 3], 6), ([-1, 5, 8, -4], 4)],
)
def test_two_sum_finds_valid_pair(nums, target):
    i, j = two_sum(nums, target)
    assert j < i
    assert nums[i] + nums[j] == target


def test_two_sum_worked_example():
    assert two_sum([2, 7, 11, 15], 9) == (1, 0)


def test_two_sum_without_pair_returns_none():
    assert two_sum([1, 2, 3], 100) is None
    assert two_sum([], 0) is None


@pytest.mark.parametrize(
    "first, second",
    [([1, 3], [2]), ([1, 2], [3, 4]), ([], [5]), ([0, 0], [0, 0]), ([1, 9, 20], [])],
)
def test_median_matches_statistics(first, second):
    assert median_of_sorted(first, second) == statistics.median(first + second)


def test_median_worked_example():
    assert median_of_sorted([1, 2], [3, 4]) == 2.5


def test_median_of_empty_raises():
    with pytest.raises(ValueError):
        median_of_sorted([], [])


@pytest.mark.parametrize(
    "nums", [[1, 1, 2], [0, 0, 1, 1, 1, 2, 2, 3, 3, 4], [], [7], [5, 5, 5]]
)
def test_remove_duplicates_keeps_each_value_once(nums):
    original = list(nums)
    assert remove_duplicates(nums) == sorted(set(nums))
    assert nums == original


@pytest.mark.parametrize(
    "nums, value", [([3, 2, 2, 3], 3), ([0, 1, 2, 2, 3, 0, 4, 2], 2), ([], 1), ([4], 4)]
)
def test_remove_element_drops_only_value(nums, value):
    result = remove_element(nums, value)
    assert value not in result
    assert Counter(result) + Counter({value: nums.count(value)}) == Counter(nums)


@pytest.mark.parametrize("digits", [[1, 2, 3], [4, 3, 2, 1], [0], [9], [9, 9, 9], [1, 9]])
def test_plus_one_adds_one(digits):
    original = list(digits)
    result = plus_one(digits)
    assert int("".join(map(str, result))) == int("".join(map(str, digits))) + 1
    assert all(0 <= d <= 9 for d in result)
    assert digits == original


def test_plus_one_grows_on_carry():
    assert plus_one([9, 9]) == [1, 0, 0]


def test_asteroids_equal_mass_is_absorbed():
    assert asteroids_destroyed(5, [5]) is True
    assert asteroids_destroyed(4, [5]) is False


def test_asteroids_order_does_not_matter_and_input_untouched():
    asteroids = [3, 9, 19, 5, 21]
    assert asteroids_destroyed(10, asteroids) is True
    assert asteroids == [3, 9, 19, 5, 21]
    assert asteroids_destroyed(5, [4, 9, 23, 4]) is False


def test_digit_sum_of_powers_of_ten_is_one():
    for exponent in range(6):
        assert digit_sum(10**exponent) == digit_sum(1)


def test_digit_sum_non_positive_is_zero():
    assert digit_sum(0) == 0
    assert digit_sum(-25) == 0


def test_min_digit_sum_element_picks_smallest():
    nums = [999, 1000, 55]
    assert min_digit_sum_element(nums) == digit_sum(1000)
    assert min_digit_sum_element(nums) <= min(digit_sum(n) for n in nums)


def test_min_digit_sum_element_empty_raises():
    with pytest.raises(ValueError):
        min_digit_sum_element([])