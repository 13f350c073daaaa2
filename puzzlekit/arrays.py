"""Array puzzles: candies, subset ORs, team skills, interval groups, jumps and more."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Sequence
from functools import reduce
from itertools import accumulate
from math import gcd
from operator import or_


def candy(ratings: Sequence[int]) -> int:
    """The fewest candies for children in a row, each getting at least one and
    more than any neighbour with a lower rating."""
    size = len(ratings)
    if size == 0:
        return 0
    total = 1
    i = 1
    while i < size:
        if ratings[i] == ratings[i - 1]:
            total += 1
            i += 1
            continue
        peak = 1
        while i < size and ratings[i] > ratings[i - 1]:
            peak += 1
            i += 1
            total += peak
        down = 1
        while i < size and ratings[i] < ratings[i - 1]:
            total += down
            down += 1
            i += 1
        if down > peak:
            total += down - peak
    return total


def count_max_or_subsets(nums: Sequence[int]) -> int:
    """How many subsets (the empty one included) reach the greatest possible bitwise OR."""
    target = reduce(or_, nums, 0)
    counts: Counter[int] = Counter({0: 1})
    for value in nums:
        extended: Counter[int] = Counter()
        for combined, ways in counts.items():
            extended[combined | value] += ways
        counts.update(extended)
    return counts[target]


def divide_players(skill: Sequence[int]) -> int:
    """The total chemistry of pairing players into teams of equal skill, or -1.

    A team's chemistry is the product of its two players' skills.
    """
    if len(skill) < 2:
        raise ValueError("at least two players are needed")
    teams = len(skill) // 2
    total = sum(skill)
    if total % teams:
        return -1
    team_skill = total // teams
    remaining = Counter(skill)
    chemistry = 0
    for player in skill:
        partner = team_skill - player
        if remaining[partner] == 0:
            return -1
        chemistry += player * partner
        remaining[partner] -= 1
    return chemistry // 2


def min_groups(intervals: Sequence[Sequence[int]]) -> int:
    """The fewest groups of pairwise disjoint closed intervals covering all intervals."""
    ordered = sorted(intervals)
    ends = [end for _, end in ordered]
    heapq.heapify(ends)
    active = 0
    most = 0
    for start, _ in ordered:
        while ends and start > ends[0]:
            heapq.heappop(ends)
            active -= 1
        active += 1
        most = max(most, active)
    return most


def jump(nums: Sequence[int]) -> int:
    """The fewest jumps from the first to the last index, each at most nums[i] long."""
    last = len(nums) - 1
    near = far = jumps = 0
    while far < last:
        farthest = max(index + step for index, step in enumerate(nums[near : far + 1], near))
        if farthest <= far:
            raise ValueError("the last index cannot be reached")
        near, far = far + 1, farthest
        jumps += 1
    return jumps


def max_width_ramp(nums: Sequence[int]) -> int:
    """The greatest j - i with i < j and nums[i] <= nums[j], or 0 if there is none."""
    if not nums:
        raise ValueError("nums is empty")
    suffix_max = list(accumulate(reversed(nums), max))[::-1]
    left, right, best = 0, 1, 0
    while right < len(nums):
        if suffix_max[right] >= nums[left]:
            best = max(best, right - left)
            right += 1
        else:
            left += 1
    return best


def count_pairs(nums: Sequence[int], k: int) -> int:
    """How many pairs i < j have nums[i] * nums[j] divisible by k."""
    if k < 1:
        raise ValueError("k must be positive")
    seen: Counter[int] = Counter()
    pairs = 0
    for value in nums:
        common = gcd(value, k)
        pairs += sum(ways for divisor, ways in seen.items() if divisor * common % k == 0)
        seen[common] += 1
    return pairs


def num_rabbits(answers: Sequence[int]) -> int:
    """The fewest rabbits in a forest given each asked rabbit's count of same-coloured others."""
    total = 0
    for answer, count in Counter(answers).items():
        group = answer + 1
        total += -(-count // group) * group
    return total


def min_subarray(nums: Sequence[int], p: int) -> int:
    """The shortest subarray (not the whole array) whose removal leaves a sum
    divisible by ``p``; 0 if none is needed and -1 if impossible."""
    if p < 1:
        raise ValueError("p must be positive")
    remainder = sum(nums) % p
    if remainder == 0:
        return 0
    size = len(nums)
    last_seen = {0: -1}
    prefix = 0
    shortest = size
    for index, value in enumerate(nums):
        prefix = (prefix + value) % p
        wanted = (prefix - remainder) % p
        if wanted in last_seen:
            shortest = min(shortest, index - last_seen[wanted])
        last_seen[prefix] = index
    return -1 if shortest == size else shortest


def smallest_range(nums: Sequence[Sequence[int]]) -> list[int]:
    """The narrowest [low, high] holding at least one value of every sorted list."""
    if not nums or any(not values for values in nums):
        raise ValueError("every list must hold at least one value")
    heap = [(values[0], which, 0) for which, values in enumerate(nums)]
    heapq.heapify(heap)
    low = heap[0][0]
    high = current_high = max(values[0] for values in nums)
    while heap[0][2] + 1 < len(nums[heap[0][1]]):
        _, which, position = heapq.heappop(heap)
        position += 1
        value = nums[which][position]
        heapq.heappush(heap, (value, which, position))
        current_high = max(current_high, value)
        current_low = heap[0][0]
        if high - low > current_high - current_low:
            low, high = current_low, current_high
    return [low, high]


def smallest_chair(times: Sequence[Sequence[int]], target_friend: int) -> int:
    """The chair taken by ``target_friend`` when each arriving friend takes the
    lowest free chair and chairs are freed at leaving time."""
    if not 0 <= target_friend < len(times):
        raise IndexError(f"no friend {target_friend}")
    arrivals = sorted((start, end, friend) for friend, (start, end) in enumerate(times))
    free = list(range(len(times)))
    leaving: list[tuple[int, int]] = []
    chair_of: dict[int, int] = {}
    for start, end, friend in arrivals:
        while leaving and start >= leaving[0][0]:
            _, gone = heapq.heappop(leaving)
            heapq.heappush(free, chair_of[gone])
        heapq.heappush(leaving, (end, friend))
        chair_of[friend] = heapq.heappop(free)
    return chair_of[target_friend]