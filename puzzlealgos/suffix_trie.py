"""Longest common suffix lookups over a word list."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class _Node:
    index: int
    children: dict[str, "_Node"] = field(default_factory=dict)


class SuffixTrie:
    """Trie of reversed words answering longest-common-suffix queries.

    Each node remembers the index of the shortest word passing through it,
    the earliest one among words of equal length.
    """

    def __init__(self, words: Iterable[str]) -> None:
        self._words = list(words)
        if not self._words:
            raise ValueError("at least one word is required")
        self._root = _Node(0)
        for index, word in enumerate(self._words):
            if len(word) < len(self._words[self._root.index]):
                self._root.index = index
            self._insert(index, word)

    def _insert(self, index: int, word: str) -> None:
        node = self._root
        for char in reversed(word):
            child = node.children.get(char)
            if child is None:
                child = node.children[char] = _Node(index)
            node = child
            if len(self._words[node.index]) > len(word):
                node.index = index

    def lookup(self, query: str) -> int:
        """Return the index of the best word sharing the longest suffix with ``query``."""
        node = self._root
        result = node.index
        for char in reversed(query):
            child = node.children.get(char)
            if child is None:
                return result
            node = child
            result = node.index
        return result


def string_indices(words: Iterable[str], queries: Iterable[str]) -> list[int]:
    """Answer each query with the index of its best longest-common-suffix word."""
    trie = SuffixTrie(words)
    return [trie.lookup(query) for query in queries]