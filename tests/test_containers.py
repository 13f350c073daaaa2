import pytest

from puzzlekit.containers import (
    CircularDeque,
    CustomStack,
    MyCalendar,
    MyCalendarTwo,
    reverse_stack,
    sort_stack,
)


def test_circular_deque_worked_example():
    dq = CircularDeque(3)
    assert dq.insert_last(1) is True
    assert dq.insert_last(2) is True
    assert dq.insert_front(3) is True
    assert dq.insert_front(4) is False
    assert dq.get_rear() == 2
    assert dq.is_full() is True
    assert dq.delete_last() is True
    assert dq.insert_front(4) is True
    assert dq.get_front() == 4


def test_circular_deque_empty_state():
    dq = CircularDeque(2)
    assert dq.is_empty() is True
    assert dq.get_front() == -1
    assert dq.get_rear() == -1
    assert dq.delete_front() is False
    assert dq.delete_last() is False


def test_circular_deque_order_and_length():
    dq = CircularDeque(4)
    for value in (10, 20):
        dq.insert_last(value)
    dq.insert_front(5)
    assert len(dq) == 3
    assert dq.get_front() == 5
    assert dq.get_rear() == 20
    assert dq.delete_front() is True
    assert dq.get_front() == 10
    assert dq.delete_last() is True
    assert dq.delete_last() is True
    assert dq.is_empty() is True


def test_circular_deque_empty_accepts_despite_zero_capacity():
    dq = CircularDeque(0)
    assert dq.insert_last(7) is True
    assert dq.get_front() == 7
    assert dq.insert_front(8) is False


def test_custom_stack_worked_example():
    stack = CustomStack(3)
    stack.push(1)
    stack.push(2)
    assert stack.pop() == 2
    stack.push(2)
    stack.push(3)
    stack.push(4)
    assert len(stack) == 3
    stack.increment(5, 100)
    stack.increment(2, 100)
    assert stack.pop() == 103
    assert stack.pop() == 202
    assert stack.pop() == 201
    assert stack.pop() == -1


def test_custom_stack_increment_bottom_only():
    stack = CustomStack(5)
    values = [10, 20, 30]
    for value in values:
        stack.push(value)
    stack.increment(2, 5)
    popped = [stack.pop() for _ in values]
    assert popped == [30, 20 + 5, 10 + 5]


def test_custom_stack_increment_on_empty_is_ignored():
    stack = CustomStack(2)
    stack.increment(3, 50)
    stack.push(9)
    assert stack.pop() == 9


def test_custom_stack_increment_zero_k():
    stack = CustomStack(2)
    stack.push(4)
    stack.increment(0, 50)
    assert stack.pop() == 4


def test_my_calendar_worked_example():
    calendar = MyCalendar()
    assert calendar.book(10, 20) is True
    assert calendar.book(15, 25) is False
    assert calendar.book(20, 30) is True


def test_my_calendar_refuses_any_overlap():
    calendar = MyCalendar()
    assert calendar.book(40, 50) is True
    assert calendar.book(10, 20) is True
    assert calendar.book(45, 46) is False
    assert calendar.book(5, 11) is False
    assert calendar.book(20, 40) is True
    assert calendar.book(50, 60) is True


def test_my_calendar_two_worked_example():
    calendar = MyCalendarTwo()
    assert calendar.book(10, 20) is True
    assert calendar.book(50, 60) is True
    assert calendar.book(10, 40) is True
    assert calendar.book(5, 15) is False
    assert calendar.book(5, 10) is True
    assert calendar.book(25, 55) is True


def test_my_calendar_two_refused_booking_leaves_no_trace():
    calendar = MyCalendarTwo()
    assert calendar.book(0, 10) is True
    assert calendar.book(0, 10) is True
    assert calendar.book(5, 6) is False
    assert calendar.book(10, 20) is True
    assert calendar.book(10, 20) is True


@pytest.mark.parametrize("items", [[], [1], [1, 2, 3, 4], [3, 3, 1]])
def test_reverse_stack(items):
    stack = list(items)
    reverse_stack(stack)
    assert stack == items[::-1]


def test_reverse_stack_twice_restores():
    items = [7, 1, 9, 4]
    stack = list(items)
    reverse_stack(stack)
    reverse_stack(stack)
    assert stack == items


@pytest.mark.parametrize("items", [[], [5], [3, 1], [11, 2, 32, 3, 41], [2, 2, 1]])
def test_sort_stack_puts_greatest_on_top(items):
    stack = list(items)
    sort_stack(stack)
    assert stack == sorted(items)
    if stack:
        assert stack[-1] == max(items)