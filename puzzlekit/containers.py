"""Bounded deques, stacks with range increments, calendars and stack reordering."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass


class CircularDeque:
    """A double-ended queue holding at most ``k`` items.

    An empty deque always accepts an item, whatever its capacity.
    """

    def __init__(self, k: int) -> None:
        self.capacity = k
        self._items: deque[int] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def _has_room(self) -> bool:
        return not self._items or len(self._items) < self.capacity

    def insert_front(self, value: int) -> bool:
        if not self._has_room():
            return False
        self._items.appendleft(value)
        return True

    def insert_last(self, value: int) -> bool:
        if not self._has_room():
            return False
        self._items.append(value)
        return True

    def delete_front(self) -> bool:
        if not self._items:
            return False
        self._items.popleft()
        return True

    def delete_last(self) -> bool:
        if not self._items:
            return False
        self._items.pop()
        return True

    def get_front(self) -> int:
        """The front item, or -1 when empty."""
        return self._items[0] if self._items else -1

    def get_rear(self) -> int:
        """The rear item, or -1 when empty."""
        return self._items[-1] if self._items else -1

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity


class CustomStack:
    """A bounded stack that can add a value to its bottom ``k`` items."""

    def __init__(self, max_size: int) -> None:
        self.max_size = max_size
        self._items: list[int] = []
        # Pending increments, applied lazily to every item at or below an index.
        self._pending: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, x: int) -> None:
        """Push ``x`` unless the stack is full."""
        if len(self._items) < self.max_size:
            self._items.append(x)
            self._pending.append(0)

    def pop(self) -> int:
        """Pop and return the top item, or -1 when empty."""
        if not self._items:
            return -1
        extra = self._pending.pop()
        if self._pending:
            self._pending[-1] += extra
        return self._items.pop() + extra

    def increment(self, k: int, val: int) -> None:
        """Add ``val`` to the bottom ``k`` items (all of them if fewer)."""
        if not self._items or k <= 0:
            return
        self._pending[min(len(self._items), k) - 1] += val


@dataclass
class _Booking:
    start: int
    end: int
    left: _Booking | None = None
    right: _Booking | None = None


class MyCalendar:
    """A calendar that refuses any booking overlapping an existing one."""

    def __init__(self) -> None:
        self._root: _Booking | None = None

    def book(self, start: int, end: int) -> bool:
        """Book the half-open interval [start, end) if it is free."""
        if self._root is None:
            self._root = _Booking(start, end)
            return True
        node = self._root
        while True:
            if node.start >= end:
                if node.left is None:
                    node.left = _Booking(start, end)
                    return True
                node = node.left
            elif node.end <= start:
                if node.right is None:
                    node.right = _Booking(start, end)
                    return True
                node = node.right
            else:
                return False


class MyCalendarTwo:
    """A calendar that refuses any booking causing a triple overlap."""

    def __init__(self) -> None:
        self._changes: dict[int, int] = {}

    def _shift(self, start: int, end: int, amount: int) -> None:
        self._changes[start] = self._changes.get(start, 0) + amount
        self._changes[end] = self._changes.get(end, 0) - amount

    def book(self, start: int, end: int) -> bool:
        """Book [start, end) unless some moment would then be booked three times."""
        self._shift(start, end, 1)
        active = 0
        for moment in sorted(self._changes):
            active += self._changes[moment]
            if active > 2:
                self._shift(start, end, -1)
                return False
        return True


def reverse_stack(stack: list[int]) -> None:
    """Reverse a stack (top at the end of the list) in place."""
    stack.reverse()


def sort_stack(stack: list[int]) -> None:
    """Sort a stack in place so that its greatest item is on top."""
    stack.sort()