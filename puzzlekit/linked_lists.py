"""Singly linked lists and the puzzles built on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from math import gcd

_EMPTY_CELL = -1


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


def from_values(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: ListNode | None) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return list(head) if head is not None else []


def insert_greatest_common_divisors(head: ListNode | None) -> ListNode | None:
    """Insert between every two adjacent nodes a node holding their gcd.

    The list is changed in place and its head is returned.
    """
    node = head
    while node is not None and node.next is not None:
        following = node.next
        node.next = ListNode(gcd(node.val, following.val), following)
        node = following
    return head


def _spiral_positions(m: int, n: int) -> Iterator[tuple[int, int]]:
    top, bottom, left, right = 0, m - 1, 0, n - 1
    while top <= bottom and left <= right:
        for col in range(left, right + 1):
            yield top, col
        top += 1
        for row in range(top, bottom + 1):
            yield row, right
        right -= 1
        for col in range(right, left - 1, -1):
            yield bottom, col
        bottom -= 1
        for row in range(bottom, top - 1, -1):
            yield row, left
        left += 1


def spiral_matrix(m: int, n: int, head: ListNode | None) -> list[list[int]]:
    """Lay the list's values clockwise into an ``m`` by ``n`` matrix.

    Cells left without a value hold -1.
    """
    grid = [[_EMPTY_CELL] * n for _ in range(m)]
    values = iter(head) if head is not None else iter(())
    for (row, col), value in zip(_spiral_positions(m, n), values):
        grid[row][col] = value
    return grid