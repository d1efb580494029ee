"""Problems set on grids and matrices."""

from __future__ import annotations

import math
from collections.abc import Sequence


def champagne_tower(poured: int, query_row: int, query_glass: int) -> float:
    """Return how full a glass of the champagne tower is, between 0 and 1."""
    row: list[float] = [float(poured)] + [0.0] * query_row
    for _ in range(query_row):
        previous = row
        row = []
        for j, above in enumerate(previous):
            left = max((previous[j - 1] - 1) / 2.0, 0.0) if j else 0.0
            right = max((above - 1) / 2.0, 0.0)
            row.append(left + right)
    return min(1.0, row[query_glass])


def largest_submatrix(matrix: Sequence[Sequence[int]]) -> int:
    """Return the largest all-ones area reachable by rearranging whole columns."""
    if not matrix or not matrix[0]:
        raise ValueError("the matrix must not be empty")
    heights = [0] * len(matrix[0])
    best = 0
    for row in matrix:
        heights = [height + 1 if cell else 0 for height, cell in zip(heights, row)]
        for width, height in enumerate(sorted(heights, reverse=True), start=1):
            best = max(best, width * height)
    return best


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Return the smallest sum along a path moving only right or down."""
    if not grid or not grid[0]:
        raise ValueError("the grid must not be empty")
    columns = len(grid[0])
    below: list[float] = [math.inf] * (columns + 1)
    for r, row in enumerate(reversed(grid)):
        current: list[float] = [math.inf] * (columns + 1)
        for c in range(columns - 1, -1, -1):
            if r == 0 and c == columns - 1:
                current[c] = row[c]
            else:
                current[c] = row[c] + min(current[c + 1], below[c])
        below = current
    return int(below[0])


def is_reachable_at_time(sx: int, sy: int, fx: int, fy: int, t: int) -> bool:
    """Tell whether (fx, fy) can be reached from (sx, sy) in exactly t king moves."""
    distance = max(abs(sx - fx), abs(sy - fy))
    if distance == 0:
        return t != 1
    return distance <= t