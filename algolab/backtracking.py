"""Backtracking searches: maze paths, permutations and the N-queens puzzle."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")


def rat_in_maze(maze: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Find a path from the top-left to the bottom-right cell moving only down or right.

    Open cells hold 1. Returns a grid marking the path with 1, or None if there is none.
    """
    grid = [list(row) for row in maze]
    n = len(grid)
    if any(len(row) != n for row in grid):
        raise ValueError("maze must be square")
    path = [[0] * n for _ in range(n)]

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


def permutations_distinct(values: Iterable[T]) -> list[list[T]]:
    """Return every ordering of the values, generated by swapping into place."""
    items = list(values)
    result: list[list[T]] = []

    def permute(index: int) -> None:
        if index == len(items):
            result.append(items.copy())
            return
        for i in range(index, len(items)):
            items[i], items[index] = items[index], items[i]
            permute(index + 1)
            items[i], items[index] = items[index], items[i]

    permute(0)
    return result


def unique_permutations(values: Iterable[T]) -> list[list[T]]:
    """Return every distinct ordering of the values, in ascending order."""
    result: list[list[T]] = []

    def helper(items: list[T], index: int) -> None:
        if index == len(items):
            result.append(items)
            return
        for i in range(index, len(items)):
            if i != index and items[i] == items[index]:
                continue
            items[i], items[index] = items[index], items[i]
            helper(items.copy(), index + 1)

    helper(sorted(values), 0)
    return result


def n_queens(n: int) -> list[list[int]] | None:
    """Place n non-attacking queens row by row; return the board (1 = queen) or None."""
    if n < 0:
        raise ValueError("n must not be negative")
    board = [[0] * n for _ in range(n)]
    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> bool:
        if row >= n:
            return True
        for col in range(n):
            if col in columns or row - col in diagonals or row + col in anti_diagonals:
                continue
            board[row][col] = 1
            columns.add(col)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            if place(row + 1):
                return True
            board[row][col] = 0
            columns.discard(col)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)
        return False

    return board if place(0) else None