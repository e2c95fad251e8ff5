"""Singly linked lists and a few operations on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class ListNode:
    """A node of a singly linked list."""

    val: int
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator["ListNode"]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node
            node = node.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; ``None`` when empty."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list starting at ``head``."""
    if head is None:
        return []
    return [node.val for node in head]


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop consecutive repeated values from a sorted list, in place."""
    if head is None or head.next is None:
        return head
    for node in head:
        while node.next is not None and node.val == node.next.val:
            node.next = node.next.next
    return head


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the ``n``-th node counted from the end of the list.

    A non-positive ``n`` leaves the list untouched.  When ``n`` exceeds the
    length, the second node is removed, or ``None`` is returned if there is
    no second node.
    """
    if head is None:
        return None
    if n <= 0:
        return head

    prev = head
    count = 0
    for _ in head:
        if count > n:
            prev = prev.next  # type: ignore[assignment]
        count += 1

    if count == n:
        return head.next
    if prev.next is None:
        return None
    prev.next = prev.next.next
    return head