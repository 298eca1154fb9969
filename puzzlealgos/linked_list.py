"""Singly linked lists and merging of sorted lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({list(self)!r})"


def from_values(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding the values in order; None when empty."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: ListNode | None) -> list[int]:
    """Return the values of a linked list as a Python list."""
    return [] if head is None else list(head)


def merge_two_lists(first: ListNode | None, second: ListNode | None) -> ListNode | None:
    """Splice two sorted lists into one sorted list; ties take the first list's node."""
    anchor = ListNode()
    tail = anchor
    while first is not None and second is not None:
        if first.val <= second.val:
            tail.next = first
            first = first.next
        else:
            tail.next = second
            second = second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return anchor.next