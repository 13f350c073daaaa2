"""Puzzles over decimal digits: lexicographic order of numbers and the best digit swap."""

from __future__ import annotations


def _subtree_size(prefix: int, n: int) -> int:
    """How many numbers in 1..n start with the digits of ``prefix``."""
    size = 0
    low, high = prefix, prefix + 1
    while low <= n:
        size += min(high, n + 1) - low
        low *= 10
        high *= 10
    return size


def find_kth_number(n: int, k: int) -> int:
    """The k-th number (1-based) of 1..n in lexicographic order."""
    if not 1 <= k <= n:
        raise ValueError(f"k must lie between 1 and {n}")
    current = 1
    position = 1
    while position < k:
        steps = _subtree_size(current, n)
        if position + steps <= k:
            current += 1
            position += steps
        else:
            current *= 10
            position += 1
    return current


def lexical_order(n: int) -> list[int]:
    """The numbers 1..n in lexicographic order."""
    order: list[int] = []
    value = 1
    for _ in range(n):
        order.append(value)
        if value * 10 <= n:
            value *= 10
        else:
            while value == n or value % 10 == 9:
                value //= 10
            value += 1
    return order


def maximum_swap(num: int) -> int:
    """The largest number reachable by swapping at most two digits of ``num``."""
    if num < 0:
        raise ValueError("num must not be negative")
    digits = list(str(num))
    best = sorted(digits, reverse=True)
    for index, (have, want) in enumerate(zip(digits, best)):
        if have != want:
            break
    else:
        return num
    swap_at = len(digits) - 1 - digits[::-1].index(want)
    digits[index], digits[swap_at] = digits[swap_at], digits[index]
    return int("".join(digits))