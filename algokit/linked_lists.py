"""Singly linked list node type and common list algorithms."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

__all__ = [
    "ListNode",
    "reverse_list",
    "merge_sorted_lists",
    "delete_node",
    "delete_duplicates",
    "middle_node",
]


@dataclass(eq=False)
class ListNode:
    """A singly linked list node holding an integer value."""

    val: int = 0
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return its new head."""
    prev: ListNode | None = None
    while head is not None:
        head.next, prev, head = prev, head, head.next
    return prev


def merge_sorted_lists(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Splice two ascending lists into one ascending list and return its head.

    On equal values the node from ``l1`` comes first.
    """
    dummy = ListNode()
    tail = dummy
    while l1 is not None and l2 is not None:
        if l1.val <= l2.val:
            tail.next, l1 = l1, l1.next
        else:
            tail.next, l2 = l2, l2.next
        tail = tail.next
    tail.next = l1 if l1 is not None else l2
    return dummy.next


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list given only the node itself.

    The node must not be the last one: its successor's value is copied into
    it and the successor is unlinked.
    """
    successor = node.next
    if successor is None:
        raise ValueError("cannot delete the last node of a list")
    node.val = successor.val
    node.next = successor.next


def delete_duplicates(head: ListNode | None) -> ListNode | None:
    """Drop repeated values from an ascending list in place and return its head."""
    node = head
    while node is not None and node.next is not None:
        if node.val == node.next.val:
            node.next = node.next.next
        else:
            node = node.next
    return head


def middle_node(head: ListNode | None) -> ListNode | None:
    """Return the middle node; for an even length, the second of the two middles."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
    return slow