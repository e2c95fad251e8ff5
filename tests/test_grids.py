import copy

import pytest

from solvedkit.grids import num_islands, num_islands_union_find, solve_surrounded

GRID_ONE = ["11110", "11010", "11000", "00000"]
GRID_TWO = ["11000", "11000", "00100", "00011"]


def _board(rows):
    return [list(row) for row in rows]


def test_num_islands_examples():
    assert num_islands(GRID_ONE) == 1
    assert num_islands(GRID_TWO) == 3


@pytest.mark.parametrize(
    "grid",
    [GRID_ONE, GRID_TWO, ["1"], ["0"], ["101", "010", "101"], ["111", "101", "111"]],
)
def test_implementations_agree(grid):
    assert num_islands_union_find(grid) == num_islands(grid)


def test_empty_grid():
    assert num_islands([]) == num_islands_union_find([]) == 0


def test_checkerboard_counts_every_land_cell():
    grid = ["1010", "0101", "1010"]
    land = sum(row.count("1") for row in grid)
    assert num_islands(grid) == land
    assert num_islands_union_find(grid) == land


def test_solve_surrounded_example():
    board = _board(["XXXX", "XOOX", "XXOX", "XOXX"])
    solve_surrounded(board)
    assert board == _board(["XXXX", "XXXX", "XXXX", "XOXX"])


def test_border_regions_survive():
    board = _board(["XOX", "OXO", "XOX"])
    original = copy.deepcopy(board)
    solve_surrounded(board)
    assert board == original


def test_small_board_untouched():
    board = _board(["XOX", "XOX"])
    original = copy.deepcopy(board)
    solve_surrounded(board)
    assert board == original


def test_flipping_only_removes_inner_cells():
    board = _board(["XOXOXO", "OXOXOX", "XOXOXO", "OXOXOX"])
    original = copy.deepcopy(board)
    solve_surrounded(board)
    rows, cols = len(board), len(board[0])
    for r in range(rows):
        for c in range(cols):
            on_border = r in (0, rows - 1) or c in (0, cols - 1)
            if on_border or original[r][c] == "X":
                assert board[r][c] == original[r][c]
            else:
                assert board[r][c] == "X"


def test_connected_to_border_kept():
    board = _board(["XXXX", "XOOO", "XOXX", "XXXX"])
    original = copy.deepcopy(board)
    solve_surrounded(board)
    assert board == original