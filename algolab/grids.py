"""Board and grid puzzles: snakes and ladders, and capturing surrounded regions."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

BOARD_START = 1
BOARD_END = 100
DIE_FACES = 6


def _check_jumps(kind: str, jumps: Mapping[int, int]) -> None:
    for start, end in jumps.items():
        if not (BOARD_START <= start <= BOARD_END and BOARD_START <= end <= BOARD_END):
            raise ValueError(f"{kind} {start} -> {end} leaves the board")


def snakes_and_ladders(ladders: Mapping[int, int], snakes: Mapping[int, int]) -> int | None:
    """Return the fewest die rolls from square 1 to square 100, or None if unreachable.

    Each roll may be any face from 1 to 6. Landing on the foot of a ladder or the
    head of a snake moves the token to its other end; ladders take precedence.
    """
    _check_jumps("ladder", ladders)
    _check_jumps("snake", snakes)

    visited = {BOARD_START}
    frontier = [BOARD_START]
    moves = 0
    found = False
    while frontier and not found:
        following: list[int] = []
        for square in frontier:
            for roll in range(1, DIE_FACES + 1):
                target = square + roll
                if target == BOARD_END:
                    found = True
                if target > BOARD_END:
                    continue
                if target in ladders:
                    destination = ladders[target]
                elif target in snakes:
                    destination = snakes[target]
                else:
                    destination = target
                if destination not in visited:
                    visited.add(destination)
                    following.append(destination)
                    if destination == BOARD_END:
                        found = True
        frontier = following
        moves += 1
    return moves if found else None


def capture_surrounded(board: Sequence[Sequence[str]]) -> list[list[str]]:
    """Flip every 'O' region that does not touch the border into 'X'.

    Returns a new board; the input is left unchanged.
    """
    grid = [list(row) for row in board]
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    if any(len(row) != cols for row in grid):
        raise ValueError("board rows must all have the same length")

    def on_border(r: int, c: int) -> bool:
        return r in (0, rows - 1) or c in (0, cols - 1)

    safe: set[tuple[int, int]] = set()
    stack = [
        (r, c)
        for r in range(rows)
        for c in range(cols)
        if on_border(r, c) and grid[r][c] == "O"
    ]
    while stack:
        r, c = stack.pop()
        if (r, c) in safe:
            continue
        safe.add((r, c))
        for dr, dc in ((0, 1), (0, -1), (-1, 0), (1, 0)):
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < cols and grid[nr][nc] == "O" and (nr, nc) not in safe:
                stack.append((nr, nc))

    return [
        ["X" if cell == "O" and (r, c) not in safe else cell for c, cell in enumerate(row)]
        for r, row in enumerate(grid)
    ]