"""A minimal singly linked list and operations on it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: Any = 0
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[Any]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def from_iterable(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """The first node shared by both lists, or None."""
    first, second = head_a, head_b
    while first is not second:
        first = head_b if first is None else first.next
        second = head_a if second is None else second.next
    return first


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    previous: Optional[ListNode] = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous