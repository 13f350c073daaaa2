"""Algorithms for classic array, string, digit, linked-list, tree, trie, grid and container puzzles."""

__version__ = "0.1.0"