"""Singly linked list nodes and removal of consecutive duplicates."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass
class ListNode:
    """A node of a singly linked list."""

    val: Any
    next: ListNode | None = None


def build_list(values: Iterable[Any]) -> ListNode | None:
    """Build a linked list from ``values`` and return its head, or ``None`` if empty."""
    head: ListNode | None = None
    tail: ListNode | None = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def list_values(head: ListNode | None) -> list[Any]:
    """Return the values of the list starting at ``head``."""
    values = []
    while head is not None:
        values.append(head.val)
        head = head.next
    return values


def delete_duplicates(head: ListNode | None) -> ListNode | None:
    """Unlink nodes equal to their predecessor, in place, and return the head."""
    current = head
    while current is not None and current.next is not None:
        if current.val == current.next.val:
            current.next = current.next.next
        else:
            current = current.next
    return head