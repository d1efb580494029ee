"""Singly linked list nodes and algorithms that walk them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def build_list(values: Iterable[int]) -> ListNode | None:
    """Link the values into a list and return its head, or None when empty."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: ListNode | None) -> list[int]:
    """Return the values held by the list starting at head."""
    return [] if head is None else list(head)


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as lists of digits, least significant first."""
    digits: list[int] = []
    carry = 0
    first, second = l1, l2
    while first is not None or second is not None:
        total = carry
        if first is not None:
            total += first.val
            first = first.next
        if second is not None:
            total += second.val
            second = second.next
        carry, digit = divmod(total, 10)
        digits.append(digit)
    if carry:
        digits.append(carry)
    return build_list(digits)


def nodes_between_critical_points(head: ListNode | None) -> list[int]:
    """Return the smallest and largest distance between critical points.

    A critical point is a local maximum or minimum strictly inside the list.
    When fewer than two exist, [-1, -1] is returned.
    """
    values = list_values(head)
    critical = [
        position
        for position, (before, current, after) in enumerate(
            zip(values, values[1:], values[2:]), start=1
        )
        if (current > before and current > after) or (current < before and current < after)
    ]
    if len(critical) < 2:
        return [-1, -1]
    smallest = min(later - earlier for earlier, later in zip(critical, critical[1:]))
    return [smallest, critical[-1] - critical[0]]


def merge_nodes(head: ListNode | None) -> ListNode | None:
    """Replace every run of nodes between two zeros by one node holding their sum."""
    sums: list[int] = []
    running = 0
    for value in list_values(head)[1:]:
        if value == 0:
            sums.append(running)
            running = 0
        else:
            running += value
    return build_list(sums)