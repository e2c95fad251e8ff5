"""Connected regions on character grids."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

from solvedkit.disjointset import DisjointSet


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Count groups of ``'1'`` cells joined horizontally or vertically."""
    visited: set[tuple[int, int]] = set()
    count = 0
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == "0" or (r, c) in visited:
                continue
            count += 1
            visited.add((r, c))
            stack = [(r, c)]
            while stack:
                pr, pc = stack.pop()
                for nr, nc in ((pr - 1, pc), (pr, pc + 1), (pr + 1, pc), (pr, pc - 1)):
                    if (
                        0 <= nr < len(grid)
                        and 0 <= nc < len(grid[nr])
                        and grid[nr][nc] == "1"
                        and (nr, nc) not in visited
                    ):
                        visited.add((nr, nc))
                        stack.append((nr, nc))
    return count


def num_islands_union_find(grid: Sequence[Sequence[str]]) -> int:
    """Same count as ``num_islands``, using a disjoint-set forest."""
    rows = len(grid)
    if rows == 0:
        return 0
    cols = len(grid[0])
    forest = DisjointSet(rows * cols)
    land: list[int] = []
    for r in range(rows):
        for c in range(cols):
            if grid[r][c] == "0":
                continue
            index = r * cols + c
            land.append(index)
            if c + 1 < cols and grid[r][c + 1] == "1":
                forest.merge(index, index + 1)
            if r + 1 < rows and grid[r + 1][c] == "1":
                forest.merge(index, index + cols)
    return sum(1 for index in land if forest.find(index) == index)


def solve_surrounded(board: MutableSequence[MutableSequence[str]]) -> None:
    """Flip to ``'X'`` every ``'O'`` region that does not touch the border.

    The board is changed in place; boards of two rows or fewer are left alone.
    """
    rows = len(board)
    if rows <= 2:
        return
    cols = len(board[0])
    forest = DisjointSet(rows * cols)
    open_cells: list[int] = []
    for r in range(rows):
        for c in range(cols):
            if board[r][c] != "O":
                continue
            index = r * cols + c
            open_cells.append(index)
            if c < cols - 1 and board[r][c + 1] == "O":
                forest.merge(index, index + 1)
            if r < rows - 1 and board[r + 1][c] == "O":
                forest.merge(index, index + cols)

    border = {
        forest.find(r * cols + c)
        for r in range(rows)
        for c in range(cols)
        if (r in (0, rows - 1) or c in (0, cols - 1)) and board[r][c] == "O"
    }
    for index in open_cells:
        if forest.find(index) not in border:
            r, c = divmod(index, cols)
            board[r][c] = "X"