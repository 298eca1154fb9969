"""Solutions to classic algorithm puzzles on arrays, strings, integers, linked lists, tries and segment trees."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "block_placement",
    "integers",
    "linked_list",
    "strings",
    "suffix_trie",
]