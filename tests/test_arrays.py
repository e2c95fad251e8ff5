import pytest

from solvedkit.arrays import (
    find_peak_element,
    is_valid_sudoku,
    k_smallest_pairs,
    product_except_self,
    remove_duplicates,
    remove_duplicates_map,
    rotate,
    search_range,
    search_rotated,
    top_k_frequent,
    unique_paths,
    unique_paths_with_obstacles,
)


def test_k_smallest_pairs_example():
    assert k_smallest_pairs([1, 7, 11], [2, 4, 6], 3) == [[1, 2], [1, 4], [1, 6]]


def test_k_smallest_pairs_mixed():
    assert k_smallest_pairs([1, 7, 11], [2, 4, 9], 3) == [[1, 2], [1, 4], [7, 2]]


def test_k_smallest_pairs_empty_and_large_k():
    assert k_smallest_pairs([1, 2], [], 3) == []
    assert len(k_smallest_pairs([1, 2], [3], 10)) == 2


def test_find_peak_element():
    assert find_peak_element([1, 2, 3, 1]) == 2
    assert find_peak_element([3, 2, 1]) == 0
    assert find_peak_element([1, 2, 3]) == 2
    assert find_peak_element([2, 2]) == 1
    assert find_peak_element([]) == -1


def test_product_except_self():
    assert product_except_self([1, 2, 3, 4]) == [24, 12, 8, 6]
    assert product_except_self([1, 2, 3, 4]) == [24, 12, 8, 6]


def test_product_except_self_short_is_unchanged():
    assert product_except_self([3, 5]) == [3, 5]


def test_remove_duplicates():
    nums = [0, 0, 1, 1, 1, 2, 2, 3, 3, 4]
    assert remove_duplicates(nums) == 5
    assert nums == [0, 1, 2, 3, 4]


def test_remove_duplicates_map():
    nums = [1, 1, 2]
    assert remove_duplicates_map(nums) == 2
    assert nums[:2] == [1, 2]


def test_rotate_1():
    matrix = [[4]]
    rotate(matrix)
    assert matrix == [[4]]


def test_rotate_2():
    matrix = [[1, 2], [4, 3]]
    rotate(matrix)
    assert matrix == [[4, 1], [3, 2]]


def test_rotate_3():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    rotate(matrix)
    assert matrix == [[7, 4, 1], [8, 5, 2], [9, 6, 3]]


def test_rotate_4():
    matrix = [[5, 1, 9, 11], [2, 4, 8, 10], [13, 3, 6, 7], [15, 14, 12, 16]]
    rotate(matrix)
    assert matrix == [[15, 13, 2, 5], [14, 3, 4, 1], [12, 6, 8, 9], [16, 7, 10, 11]]


def test_search_range():
    assert search_range([5, 7, 7, 8, 8, 10], 8) == [3, 4]
    assert search_range([5, 7, 7, 8, 8, 10], 6) == [-1, -1]
    assert search_range([], 1) == [-1, -1]


def test_search_rotated_finds_every_value():
    nums = [4, 5, 6, 7, 10, 1, 2]
    for index, value in enumerate(nums):
        assert search_rotated(nums, value) == index


def test_search_rotated_missing():
    assert search_rotated([4, 5, 6, 7, 10, 1, 2], 3) == -1
    assert search_rotated([], 3) == -1
    assert search_rotated([3], 3) == 0


def test_top_k_frequent():
    assert top_k_frequent([1], 1) == [1]
    assert top_k_frequent([2, 1, 1, 1, 2, 2, 3], 2) == [1, 2]


def test_unique_paths():
    assert unique_paths(3, 2) == 3
    assert unique_paths(7, 3) == 28


def test_unique_paths_rejects_empty_grid():
    with pytest.raises(ValueError):
        unique_paths(0, 3)


def test_unique_paths_with_obstacles():
    assert unique_paths_with_obstacles([[1]]) == 0
    assert unique_paths_with_obstacles([[0, 0, 0], [0, 1, 0], [0, 0, 0]]) == 2
    assert unique_paths_with_obstacles([]) == 0


def test_unique_paths_with_obstacles_does_not_mutate():
    grid = [[0, 1], [0, 0]]
    assert unique_paths_with_obstacles(grid) == 1
    assert grid == [[0, 1], [0, 0]]


VALID_BOARD = [
    ".87654321",
    "2........",
    "3........",
    "4........",
    "5........",
    "6........",
    "7........",
    "8........",
    "9........",
]


def test_is_valid_sudoku_true():
    assert is_valid_sudoku(VALID_BOARD) is True


def test_is_valid_sudoku_box_repeat():
    board = list(VALID_BOARD)
    board[1] = "2.8......"
    assert is_valid_sudoku(board) is False


def test_is_valid_sudoku_column_repeat():
    board = list(VALID_BOARD)
    board[4] = "5......2."
    assert is_valid_sudoku(board) is False


def test_is_valid_sudoku_bad_cell():
    board = list(VALID_BOARD)
    board[1] = "2x......."
    with pytest.raises(ValueError):
        is_valid_sudoku(board)