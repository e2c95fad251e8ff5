"""Problems on integer arrays and matrices."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections import Counter
from collections.abc import MutableSequence, Sequence
from heapq import nsmallest
from itertools import product


def k_smallest_pairs(nums1: Sequence[int], nums2: Sequence[int], k: int) -> list[list[int]]:
    """The ``k`` pairs ``[a, b]`` (a from nums1, b from nums2) with the smallest sums."""
    if not nums1 or not nums2:
        return []
    pairs = product(nums1, nums2)
    return [[a, b] for a, b in nsmallest(max(k, 0), pairs, key=sum)]


def find_peak_element(nums: Sequence[int]) -> int:
    """Index of the first element greater than both neighbours.

    Missing neighbours count as minus infinity.  When no such element exists
    the last index is returned (``-1`` for an empty sequence).
    """
    minus_inf = float("-inf")
    for index, value in enumerate(nums):
        prev = nums[index - 1] if index > 0 else minus_inf
        nxt = nums[index + 1] if index + 1 < len(nums) else minus_inf
        if prev < value > nxt:
            return index
    return len(nums) - 1


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Product of all other elements for each position.

    Sequences of two or fewer elements are returned unchanged.
    """
    if len(nums) <= 2:
        return list(nums)

    prefix = [nums[0]]
    for value in nums[1:]:
        prefix.append(prefix[-1] * value)

    suffix = [nums[-1]]
    for value in reversed(nums[:-1]):
        suffix.append(suffix[-1] * value)
    suffix.reverse()

    middle = [prefix[i - 1] * suffix[i + 1] for i in range(1, len(nums) - 1)]
    return [suffix[1], *middle, prefix[-2]]


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Drop adjacent repeats from a sorted list in place; return the new length."""
    nums[:] = [value for index, value in enumerate(nums) if index == 0 or value != nums[index - 1]]
    return len(nums)


def remove_duplicates_map(nums: MutableSequence[int]) -> int:
    """Move the distinct values, in first-seen order, to the front of ``nums``.

    Returns how many distinct values there are; the tail is left as it was.
    """
    seen: set[int] = set()
    for value in list(nums):
        if value not in seen:
            nums[len(seen)] = value
            seen.add(value)
    return len(seen)


def rotate(matrix: MutableSequence[MutableSequence[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise, in place."""
    if len(matrix) <= 1:
        return
    rotated = [list(column) for column in zip(*reversed(matrix))]
    for row, values in zip(matrix, rotated):
        row[:] = values


def search_range(nums: Sequence[int], target: int) -> list[int]:
    """First and last index of ``target`` in sorted ``nums``, or ``[-1, -1]``."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return [-1, -1]
    return [first, bisect_right(nums, target) - 1]


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated sorted sequence, or ``-1``."""
    pivot = next(
        (index + 1 for index in range(len(nums) - 1) if nums[index] > nums[index + 1]),
        None,
    )
    ordered = list(nums) if pivot is None else [*nums[pivot:], *nums[:pivot]]

    index = bisect_left(ordered, target)
    if index == len(ordered) or ordered[index] != target:
        return -1
    if pivot is None:
        return index
    tail = len(nums) - pivot
    return index + pivot if index < tail else index - tail


def top_k_frequent(nums: Sequence[int], k: int) -> list[int]:
    """The ``k`` most frequent values; ties go to the smaller value."""
    counts = Counter(nums)
    ranked = sorted(counts, key=lambda value: (-counts[value], value))
    return ranked[: max(k, 0)]


def unique_paths(m: int, n: int) -> int:
    """Number of right/down paths across an ``m`` by ``n`` grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    row = [1] * n
    for _ in range(1, m):
        for c in range(1, n):
            row[c] += row[c - 1]
    return row[-1]


def unique_paths_with_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Number of right/down paths avoiding cells marked ``1``."""
    if not grid or not grid[0]:
        return 0
    if grid[-1][-1] == 1:
        return 0
    width = len(grid[0])
    row = [0] * width
    row[0] = 1
    for cells in grid:
        for c in range(width):
            if cells[c] == 1:
                row[c] = 0
            elif c > 0:
                row[c] += row[c - 1]
    return row[-1]


def _no_repeats(cells: Sequence[str]) -> bool:
    digits = []
    for cell in cells:
        if cell == ".":
            continue
        if len(cell) != 1 or not "0" <= cell <= "9":
            raise ValueError(f"unexpected sudoku cell {cell!r}")
        digits.append(cell)
    return len(digits) == len(set(digits))


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Whether no row, column or 3x3 box of a 9x9 board repeats a digit.

    Empty cells are ``'.'``.
    """
    rows = [list(board[r][:9]) for r in range(9)]
    columns = [[rows[r][c] for r in range(9)] for c in range(9)]
    boxes = [
        [rows[r][c] for r in range(br, br + 3) for c in range(bc, bc + 3)]
        for br in range(0, 9, 3)
        for bc in range(0, 9, 3)
    ]
    return all(_no_repeats(group) for group in (*rows, *columns, *boxes))