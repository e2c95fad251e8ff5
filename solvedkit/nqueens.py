"""The n-queens puzzle."""

from __future__ import annotations

from collections.abc import Sequence

_DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0), (1, 1), (-1, 1), (-1, -1), (1, -1))


def solve_n_queens(n: int) -> list[list[str]]:
    """Every placement of ``n`` non-attacking queens.

    Boards are lists of row strings with ``'Q'`` and ``'.'``; they come in
    ascending order of the queens' columns, row by row.
    """
    if n <= 0:
        return []
    solutions: list[list[str]] = []
    columns: list[int] = []
    used_cols: set[int] = set()
    used_diag: set[int] = set()
    used_anti: set[int] = set()

    def place(row: int) -> None:
        if row == n:
            solutions.append(["." * c + "Q" + "." * (n - c - 1) for c in columns])
            return
        for col in range(n):
            if col in used_cols or row - col in used_diag or row + col in used_anti:
                continue
            columns.append(col)
            used_cols.add(col)
            used_diag.add(row - col)
            used_anti.add(row + col)
            place(row + 1)
            columns.pop()
            used_cols.remove(col)
            used_diag.remove(row - col)
            used_anti.remove(row + col)

    place(0)
    return solutions


def count_queens(board: Sequence[str]) -> int:
    """Number of queens on the board."""
    return sum(row.count("Q") for row in board)


def check_queen(row: int, col: int, n: int, board: Sequence[str]) -> bool:
    """Whether a queen can go on the empty cell ``(row, col)`` without being attacked."""
    if board[row][col] != ".":
        return False
    for dr, dc in _DIRECTIONS:
        r, c = row + dr, col + dc
        while 0 <= r < n and 0 <= c < n:
            if board[r][c] == "Q":
                return False
            r, c = r + dr, c + dc
    return True