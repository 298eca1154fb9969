# puzzlealgos

A small library of solutions to classic algorithm puzzles. Everything is plain
Python with no runtime dependencies. It is a library only: it has no command-line
program.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `puzzlealgos.arrays`

- `two_sum(nums, target)`: returns a tuple `(i, j)` with `j < i` and
  `nums[i] + nums[j] == target`, where `i` is the first index at which such a pair
  completes, or `None` when there is no pair.
- `median_of_sorted(first, second)`: the median of the union of two sorted
  sequences, as a float. Raises `ValueError` when both are empty.
- `remove_duplicates(nums)`: returns a new list with each run of equal values kept
  once (for a sorted input, the distinct values).
- `remove_element(nums, value)`: returns a new list of the items not equal to
  `value`, in order.
- `plus_one(digits)`: adds one to a number given as a list of decimal digits and
  returns a new list; `[9, 9]` becomes `[1, 0, 0]`.
- `asteroids_destroyed(mass, asteroids)`: whether a planet of the given mass can
  absorb every asteroid, taking them smallest first and growing by each one's mass.
- `digit_sum(number)`: the sum of the decimal digits of a positive number; 0 for
  zero or negative numbers.
- `min_digit_sum_element(nums)`: the smallest digit sum in a list. Raises
  `ValueError` for an empty list.

### `puzzlealgos.strings`

- `longest_unique_substring_length(text)`: length of the longest substring with no
  repeated character.
- `longest_palindrome(text)`: the leftmost longest palindromic substring.
- `atoi(text)`: skips leading spaces, reads an optional sign and the digits that
  follow, and clamps the result to the 32-bit signed range. Text with no leading
  number gives 0.
- `roman_to_int(numeral)`: converts a Roman numeral. Raises `ValueError` on a
  character that is not a Roman digit.
- `add_binary(a, b)`: adds two binary strings.
- `count_special_chars(word)`: the number of letters that appear in both lower and
  upper case.
- `count_ordered_special_chars(word)`: the number of letters whose lower-case
  occurrences all come before their first upper-case occurrence.

### `puzzlealgos.integers`

- `reverse_integer(x)`: reverses the decimal digits, keeping the sign; returns 0
  when the result would overflow 32 bits.
- `is_palindrome_number(x)`: whether the number reads the same backwards; negative
  numbers never do.
- `int_sqrt(x)`: the floor of the square root. Raises `ValueError` for negatives.

### `puzzlealgos.linked_list`

`ListNode(val, next)` is a singly linked list node; iterating over a node yields
the values from that node to the end. `from_values(values)` builds a list (or
`None` when empty), `to_values(head)` returns the values as a Python list, and
`merge_two_lists(first, second)` splices two sorted lists into one sorted list,
taking the first list's node on ties.

```python
from puzzlealgos.linked_list import from_values, merge_two_lists, to_values

merged = merge_two_lists(from_values([1, 2, 4]), from_values([1, 3, 4]))
to_values(merged)  # [1, 1, 2, 3, 4, 4]
```

### `puzzlealgos.suffix_trie`

`SuffixTrie(words)` answers `lookup(query)` with the index of the word that shares
the longest common suffix with `query`. Ties go to the shortest word, and after
that to the earliest one; a query sharing no suffix gets the shortest word overall.
An empty word list raises `ValueError`. `string_indices(words, queries)` answers a
whole batch.

```python
from puzzlealgos.suffix_trie import string_indices

string_indices(["abcd", "bcd", "xbcd"], ["cd", "bcd", "xyz"])  # [1, 1, 1]
```

### `puzzlealgos.block_placement`

`block_placement_results(queries)` processes a sequence of queries on a number line
that starts with an obstacle at 0: `[1, x]` places an obstacle at `x`, and
`[2, x, size]` asks whether a block of length `size` fits somewhere in `[0, x]`
without crossing an obstacle. It returns one boolean for each query of the second
kind, in order. It raises `ValueError` for an unknown query type, a negative
position, or a second obstacle at the same place.

`MaxSegmentTree(size)` is the range-maximum tree behind it: `update(index, value)`
sets a position (raising `IndexError` outside `0 .. size - 1`), and
`query(left, right)` returns the maximum over an inclusive range clipped to the
tree, or 0 for an empty range.

```python
from puzzlealgos.block_placement import block_placement_results

block_placement_results([[1, 2], [2, 3, 3], [2, 3, 1], [2, 2, 2]])  # [False, True, True]
```