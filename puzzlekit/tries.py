"""Prefix-tree puzzles: covering a target with word prefixes, folder pruning, prefix scores."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    count: int = 0
    terminal: bool = False


def _insert(root: _TrieNode, parts: Iterable[str]) -> _TrieNode:
    """Add a key to the trie, counting each node passed, and return its last node."""
    node = root
    for part in parts:
        node = node.children.setdefault(part, _TrieNode())
        node.count += 1
    return node


def min_valid_strings(words: Iterable[str], target: str) -> int:
    """The fewest prefixes of ``words`` whose concatenation is ``target``, or -1."""
    root = _TrieNode()
    for word in words:
        _insert(root, word)
    size = len(target)
    best: list[float] = [math.inf] * (size + 1)
    best[size] = 0
    for start in range(size - 1, -1, -1):
        node: _TrieNode | None = root
        for end, letter in enumerate(target[start:], start):
            node = node.children.get(letter)
            if node is None:
                break
            best[start] = min(best[start], best[end + 1] + 1)
    return -1 if best[0] == math.inf else int(best[0])


def _path_parts(path: str) -> list[str]:
    return path[1:].split("/")


def remove_subfolders(folders: Sequence[str]) -> list[str]:
    """The folders that are not inside another listed folder, sorted and unique."""
    root = _TrieNode()
    for folder in folders:
        _insert(root, _path_parts(folder)).terminal = True
    kept: set[str] = set()
    for folder in folders:
        node = root
        prefix: list[str] = []
        for part in _path_parts(folder):
            if node.terminal:
                break
            prefix.append(part)
            node = node.children[part]
        kept.add("".join(f"/{part}" for part in prefix))
    return sorted(kept)


def sum_prefix_scores(words: Sequence[str]) -> list[int]:
    """For each word, the sum over its prefixes of how many words start with that prefix."""
    root = _TrieNode()
    for word in words:
        _insert(root, word)
    scores = []
    for word in words:
        node = root
        score = 0
        for letter in word:
            node = node.children[letter]
            score += node.count
        scores.append(score)
    return scores