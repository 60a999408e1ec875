"""Singly linked list nodes and list-editing drills."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list of integers."""

    val: int
    next: Optional[ListNode] = None


def _iter_nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def make_link_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; None when empty."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def format_list(head: Optional[ListNode]) -> str:
    """Render a list as ``"1 -> 2 -> "``; an empty list renders as ``""``."""
    return "".join(f"{node.val} -> " for node in _iter_nodes(head))


def to_list(head: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list as a Python list."""
    return [node.val for node in _iter_nodes(head)]


def remove_elements(head: Optional[ListNode], val: int) -> Optional[ListNode]:
    """Unlink every node whose value equals ``val`` and return the new head."""
    dummy = ListNode(0, head)
    prev = dummy
    while prev.next is not None:
        if prev.next.val == val:
            prev.next = prev.next.next
        else:
            prev = prev.next
    return dummy.next


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Remove the ``n``-th node counted from the end and return the new head.

    A list of at most one node always becomes empty. Otherwise ``n`` must lie
    between 1 and the length of the list.
    """
    nodes = list(_iter_nodes(head))
    if len(nodes) <= 1:
        return None
    if not 1 <= n <= len(nodes):
        raise ValueError(f"n must be between 1 and {len(nodes)}, got {n}")
    if n == len(nodes):
        return nodes[1]
    before = nodes[len(nodes) - n - 1]
    before.next = nodes[len(nodes) - n].next
    return nodes[0]