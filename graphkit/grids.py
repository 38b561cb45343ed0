"""Searches over rectangular grids."""

from __future__ import annotations

from collections.abc import Sequence

_STEPS = ((1, 0), (-1, 0), (0, -1), (0, 1))


def max_area_of_island(grid: Sequence[Sequence[int]]) -> int:
    """Return the size of the largest 4-connected group of cells equal to 1.

    The grid is not modified.
    """
    rows = len(grid)
    if rows == 0:
        return 0
    cols = len(grid[0])
    seen: set[tuple[int, int]] = set()
    best = 0
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell != 1 or (i, j) in seen:
                continue
            seen.add((i, j))
            stack = [(i, j)]
            area = 0
            while stack:
                r, c = stack.pop()
                area += 1
                for dr, dc in _STEPS:
                    nr, nc = r + dr, c + dc
                    if (
                        0 <= nr < rows
                        and 0 <= nc < cols
                        and (nr, nc) not in seen
                        and grid[nr][nc] == 1
                    ):
                        seen.add((nr, nc))
                        stack.append((nr, nc))
            best = max(best, area)
    return best


def word_exists(board: Sequence[Sequence[str]], word: str) -> bool:
    """Tell whether ``word`` can be spelled by a path of adjacent cells, each used once."""
    if not board:
        return False
    rows = len(board)
    cols = len(board[0])
    used: set[tuple[int, int]] = set()

    def search(index: int, i: int, j: int) -> bool:
        if index == len(word):
            return True
        if not (0 <= i < rows and 0 <= j < cols) or (i, j) in used:
            return False
        if board[i][j] != word[index]:
            return False
        used.add((i, j))
        try:
            return any(search(index + 1, i + di, j + dj) for di, dj in _STEPS)
        finally:
            used.discard((i, j))

    return any(search(0, i, j) for i in range(rows) for j in range(cols))