"""Backtracking searches on square grids."""

from __future__ import annotations

from collections.abc import Sequence

Grid = list[list[int]]


def rat_in_maze(maze: Sequence[Sequence[int]]) -> Grid | None:
    """Find a path from the top-left to the bottom-right cell of a square maze.

    Open cells hold 1. The rat tries to move down first, then right. The
    returned grid marks the path with 1; None means there is no path. The
    exit cell itself counts as reached without being checked.
    """
    grid = [list(row) for row in maze]
    n = len(grid)
    if any(len(row) != n for row in grid):
        raise ValueError("maze must be square")
    path: Grid = [[0] * n for _ in range(n)]

    def walk(x: int, y: int) -> bool:
        if x == n - 1 and y == n - 1:
            path[x][y] = 1
            return True
        if x < n and y < n and grid[x][y] == 1:
            path[x][y] = 1
            if walk(x + 1, y) or walk(x, y + 1):
                return True
            path[x][y] = 0
        return False

    return path if walk(0, 0) else None


def n_queens(n: int) -> Grid | None:
    """Place ``n`` queens on an ``n`` by ``n`` board so none attacks another.

    Rows are filled top to bottom, trying columns left to right; the first
    placement found is returned with queens marked 1, or None if none exists.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    board: Grid = [[0] * n for _ in range(n)]
    columns: set[int] = set()
    falling: set[int] = set()
    rising: set[int] = set()

    def place(row: int) -> bool:
        if row >= n:
            return True
        for col in range(n):
            if col in columns or row - col in falling or row + col in rising:
                continue
            board[row][col] = 1
            columns.add(col)
            falling.add(row - col)
            rising.add(row + col)
            if place(row + 1):
                return True
            board[row][col] = 0
            columns.discard(col)
            falling.discard(row - col)
            rising.discard(row + col)
        return False

    return board if place(0) else None