"""Binary trees and level-based tree puzzles."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_MISSING = object()


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None

    @property
    def children(self) -> list[TreeNode]:
        return [child for child in (self.left, self.right) if child is not None]


def from_level_order(values: Iterable[int | None]) -> TreeNode | None:
    """Build a tree from a level-order listing where None marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending = deque([root])

    def take() -> object:
        value = next(items, _MISSING)
        return value if value is _MISSING or value is None else TreeNode(value)

    while pending:
        node = pending.popleft()
        left = take()
        if left is _MISSING:
            break
        if left is not None:
            node.left = left
            pending.append(left)
        right = take()
        if right is _MISSING:
            break
        if right is not None:
            node.right = right
            pending.append(right)
    return root


def to_level_order(root: TreeNode | None) -> list[int | None]:
    """Return the level-order listing of a tree, without trailing Nones."""
    listing: list[int | None] = []
    pending: deque[TreeNode | None] = deque([root] if root is not None else [])
    while pending:
        node = pending.popleft()
        if node is None:
            listing.append(None)
            continue
        listing.append(node.val)
        pending.append(node.left)
        pending.append(node.right)
    while listing and listing[-1] is None:
        listing.pop()
    return listing


def _levels(root: TreeNode | None) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [child for node in level for child in node.children]


def tree_queries(root: TreeNode | None, queries: Iterable[int]) -> list[int]:
    """For each query, the tree height after removing the subtree at that value.

    Each query is answered against the original tree.
    """
    if root is None:
        raise ValueError("the tree is empty")
    levels = list(_levels(root))
    heights: dict[int, int] = {}
    for level in reversed(levels):
        for node in level:
            below = [heights[child.val] for child in node.children]
            heights[node.val] = 1 + max(below, default=-1)

    depth_of: dict[int, int] = {}
    leaders: list[list[tuple[int, int]]] = []
    for depth, level in enumerate(levels):
        for node in level:
            depth_of[node.val] = depth
        leaders.append(heapq.nlargest(2, ((heights[n.val], n.val) for n in level)))

    answers = []
    for value in queries:
        if value not in depth_of:
            raise ValueError(f"value {value} is not in the tree")
        depth = depth_of[value]
        best = leaders[depth]
        best_height, best_value = best[0]
        if best_value != value:
            answers.append(depth + best_height)
        elif len(best) > 1:
            answers.append(depth + best[1][0])
        else:
            answers.append(depth - 1)
    return answers


def replace_value_in_tree(root: TreeNode | None) -> TreeNode | None:
    """Replace every value by the sum of its cousins' values, in place."""
    if root is None:
        return None
    root.val = 0
    level = [root]
    while level:
        next_level = [child for node in level for child in node.children]
        level_sum = sum(child.val for child in next_level)
        for node in level:
            family = node.children
            siblings_sum = sum(child.val for child in family)
            for child in family:
                child.val = level_sum - siblings_sum
        level = next_level
    return root


def flip_equiv(root1: TreeNode | None, root2: TreeNode | None) -> bool:
    """Whether the trees become equal after swapping children at some nodes."""
    if root1 is None and root2 is None:
        return True
    if root1 is None or root2 is None or root1.val != root2.val:
        return False
    return (
        flip_equiv(root1.left, root2.left) and flip_equiv(root1.right, root2.right)
    ) or (flip_equiv(root1.right, root2.left) and flip_equiv(root1.left, root2.right))


def kth_largest_level_sum(root: TreeNode | None, k: int) -> int:
    """The k-th largest sum of values on one level, or -1 with fewer than k levels."""
    if k < 1:
        raise ValueError("k must be at least 1")
    sums = [sum(node.val for node in level) for level in _levels(root)]
    if len(sums) < k:
        return -1
    return heapq.nlargest(k, sums)[-1]