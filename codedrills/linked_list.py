"""Singly linked list node and the drills that operate on it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return [node.val for node in _nodes(head)]


def delete_middle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Remove the node at index ``len // 2`` and return the head."""
    if head is None or head.next is None:
        return None
    count = sum(1 for _ in _nodes(head))
    before = head
    for _ in range(count // 2 - 1):
        before = before.next
    before.next = before.next.next
    return head


def pair_sum(head: Optional[ListNode]) -> int:
    """Largest sum of a node and its twin; never below zero."""
    values = to_values(head)
    half = len(values) // 2
    twins = zip(values[:half], reversed(values[len(values) - half:]))
    return max([0, *(a + b for a, b in twins)])


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node, the second of two middles for even lengths."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def odd_even_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Regroup nodes so odd positions come first, then even positions."""
    if head is None or head.next is None:
        return head
    odd_anchor = ListNode()
    even_anchor = ListNode()
    odd, even = odd_anchor, even_anchor
    is_odd = True
    for node in list(_nodes(head)):
        if is_odd:
            odd.next = node
            odd = node
        else:
            even.next = node
            even = node
        is_odd = not is_odd
    even.next = None
    odd.next = even_anchor.next
    return odd_anchor.next


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return the new head."""
    previous: Optional[ListNode] = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous