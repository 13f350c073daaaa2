"""Grid puzzles: counting all-ones squares and the safest path past thieves."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Sequence

_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def count_squares(matrix: Sequence[Sequence[int]]) -> int:
    """How many square submatrices consist entirely of ones."""
    total = 0
    above: list[int] = []
    for row_index, row in enumerate(matrix):
        current: list[int] = []
        for col_index, cell in enumerate(row):
            if row_index == 0 or col_index == 0:
                size = cell
            elif cell:
                size = 1 + min(above[col_index - 1], above[col_index], current[col_index - 1])
            else:
                size = 0
            current.append(size)
            total += size
        above = current
    return total


def _neighbours(row: int, col: int, rows: int, cols: int):
    for dr, dc in _STEPS:
        r, c = row + dr, col + dc
        if 0 <= r < rows and 0 <= c < cols:
            yield r, c


def _thief_distances(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    rows, cols = len(grid), len(grid[0])
    distance: list[list[int | None]] = [[None] * cols for _ in range(rows)]
    queue: deque[tuple[int, int]] = deque()
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == 1:
                distance[r][c] = 0
                queue.append((r, c))
    while queue:
        r, c = queue.popleft()
        for nr, nc in _neighbours(r, c, rows, cols):
            if distance[nr][nc] is None:
                distance[nr][nc] = distance[r][c] + 1
                queue.append((nr, nc))
    return [[d or 0 for d in row] for row in distance]


def maximum_safeness_factor(grid: Sequence[Sequence[int]]) -> int:
    """The best, over paths from the top-left to the bottom-right cell, of the
    smallest distance from any path cell to a thief (cells holding 1)."""
    if not grid or not grid[0]:
        raise ValueError("the grid is empty")
    distance = _thief_distances(grid)
    rows, cols = len(distance), len(distance[0])
    target = (rows - 1, cols - 1)
    heap = [(-distance[0][0], 0, 0)]
    visited = {(0, 0)}
    while heap:
        negative_safety, r, c = heapq.heappop(heap)
        safety = -negative_safety
        if (r, c) == target:
            return safety
        for nr, nc in _neighbours(r, c, rows, cols):
            if (nr, nc) not in visited:
                visited.add((nr, nc))
                heapq.heappush(heap, (-min(safety, distance[nr][nc]), nr, nc))
    return distance[0][0]