"""String puzzles: vowel parity, diverse strings, brackets, boolean expressions and more."""

from __future__ import annotations

import heapq
import operator
from collections import Counter
from functools import cache

_VOWEL_BITS = {"a": 1, "e": 2, "i": 4, "o": 8, "u": 16}
_HASH_MOD = 1_000_000_009
_HASH_BASE = 256
_OPERATORS = {"+": operator.add, "-": operator.sub, "*": operator.mul}


def longest_even_vowel_substring(s: str) -> int:
    """Length of the longest substring holding every vowel an even number of times."""
    first_seen = {0: -1}
    parity = 0
    longest = 0
    for index, letter in enumerate(s):
        parity ^= _VOWEL_BITS.get(letter, 0)
        if parity in first_seen:
            longest = max(longest, index - first_seen[parity])
        else:
            first_seen[parity] = index
    return longest


def longest_diverse_string(a: int, b: int, c: int) -> str:
    """The longest string of at most a 'a's, b 'b's and c 'c's with no letter thrice in a row."""
    heap = [
        (-count, -ord(letter), letter)
        for count, letter in ((a, "a"), (b, "b"), (c, "c"))
        if count > 0
    ]
    heapq.heapify(heap)
    out: list[str] = []
    while heap:
        count, rank, letter = heapq.heappop(heap)
        if out[-2:] == [letter, letter]:
            if not heap:
                break
            other_count, other_rank, other = heapq.heappop(heap)
            out.append(other)
            if other_count + 1:
                heapq.heappush(heap, (other_count + 1, other_rank, other))
            heapq.heappush(heap, (count, rank, letter))
        else:
            out.append(letter)
            if count + 1:
                heapq.heappush(heap, (count + 1, rank, letter))
    return "".join(out)


def min_add_to_make_valid(s: str) -> int:
    """How many brackets must be added to balance ``s``; any other character closes."""
    open_count = 0
    unmatched_close = 0
    for ch in s:
        if ch == "(":
            open_count += 1
        elif open_count:
            open_count -= 1
        else:
            unmatched_close += 1
    return open_count + unmatched_close


def _evaluate(op: str, operands: str) -> bool:
    if op == "!":
        return operands != "t"
    if len(operands) == 1:
        return operands == "t"
    if op == "|":
        return "t" in operands
    return "f" not in operands


def parse_bool_expr(expression: str) -> bool:
    """Evaluate an expression built from t, f, !(..), &(..,..) and |(..,..)."""
    stack: list[str] = []
    for ch in expression:
        if ch == ",":
            continue
        if ch != ")":
            stack.append(ch)
            continue
        operands = []
        while stack and stack[-1] != "(":
            operands.append(stack.pop())
        if len(stack) < 2:
            raise ValueError(f"unbalanced expression: {expression!r}")
        stack.pop()
        op = stack.pop()
        stack.append("t" if _evaluate(op, "".join(operands)) else "f")
    if not stack:
        raise ValueError("empty expression")
    return stack[-1] == "t"


def check_inclusion(s1: str, s2: str) -> bool:
    """Whether some permutation of ``s1`` is a substring of ``s2``."""
    width = len(s1)
    if len(s2) < width:
        return False
    wanted = Counter(s1)
    window = Counter(s2[:width])
    if window == wanted:
        return True
    for leaving, entering in zip(s2, s2[width:]):
        window[entering] += 1
        window[leaving] -= 1
        if not window[leaving]:
            del window[leaving]
        if window == wanted:
            return True
    return False


def _repeat_of_length(s: str, codes: list[int], size: int) -> str:
    """The first substring of length ``size`` found a second time, or ''."""
    if size == 0:
        return ""
    digest = 0
    for code in codes[:size]:
        digest = (digest * _HASH_BASE + code) % _HASH_MOD
    seen: dict[int, list[int]] = {digest: [0]}
    leading = pow(_HASH_BASE, size - 1, _HASH_MOD)
    for start in range(1, len(s) - size + 1):
        digest = (
            (digest - codes[start - 1] * leading) * _HASH_BASE + codes[start + size - 1]
        ) % _HASH_MOD
        candidate = s[start : start + size]
        if any(s[earlier : earlier + size] == candidate for earlier in seen.get(digest, ())):
            return candidate
        seen.setdefault(digest, []).append(start)
    return ""


def longest_dup_substring(s: str) -> str:
    """The longest substring that occurs at least twice (occurrences may overlap)."""
    codes = [ord(ch) - ord("a") + 1 for ch in s]
    low, high = 0, len(s)
    best = ""
    while low <= high:
        mid = (low + high) // 2
        found = _repeat_of_length(s, codes, mid)
        if found:
            best = found
            low = mid + 1
        else:
            high = mid - 1
    return best


def max_unique_split(s: str) -> int:
    """The most pieces ``s`` can be cut into with no piece repeated."""
    used: set[str] = set()

    def best_from(start: int) -> int:
        best = 0
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if piece not in used:
                used.add(piece)
                best = max(best, 1 + best_from(end))
                used.remove(piece)
        return best

    return best_from(0)


def diff_ways_to_compute(expression: str) -> list[int]:
    """All values of ``expression`` under every way of parenthesising it."""

    @cache
    def values(left: int, right: int) -> tuple[int, ...]:
        results: list[int] = []
        for index in range(left, right):
            apply = _OPERATORS.get(expression[index])
            if apply is not None:
                results.extend(
                    apply(first, second)
                    for first in values(left, index)
                    for second in values(index + 1, right)
                )
        return tuple(results) if results else (int(expression[left:right]),)

    return list(values(0, len(expression)))


def find_kth_bit(n: int, k: int) -> str:
    """The k-th character (1-based) of S_n, where S_1 = '0' and
    S_i = S_(i-1) + '1' + reverse(invert(S_(i-1)))."""
    if n < 1 or not 1 <= k < (1 << n):
        raise ValueError(f"no bit {k} in string {n}")
    inverted = False
    while True:
        if n == 1:
            bit = 0
            break
        middle = 1 << (n - 1)
        if k == middle:
            bit = 1
            break
        if k > middle:
            k = (1 << n) - k
            inverted = not inverted
        n -= 1
    return str(bit ^ inverted)