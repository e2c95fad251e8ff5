"""Search challenges on grids, trees and number lists."""

from __future__ import annotations

from bisect import bisect_left
from collections import Counter, deque
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

_NO_CUT = 1_000_000_000
_MISSING_RANGE = 103

_NEIGHBOURS_8 = ((-1, 0), (-1, 1), (0, 1), (1, 1), (1, 0), (1, -1), (0, -1), (-1, -1))
_NEIGHBOURS_4 = ((0, -1), (0, 1), (-1, 0), (1, 0))


def largest_region(matrix: Sequence[Sequence[int]]) -> int:
    """Size of the largest group of filled cells joined in any of 8 directions.

    Returns ``-1`` when no cell is filled.  The input is not changed.
    """
    filled = [[bool(cell) for cell in row] for row in matrix]
    best = -1
    for r, row in enumerate(filled):
        for c, cell in enumerate(row):
            if not cell:
                continue
            row[c] = False
            size = 0
            stack = [(r, c)]
            while stack:
                pr, pc = stack.pop()
                size += 1
                for dr, dc in _NEIGHBOURS_8:
                    nr, nc = pr + dr, pc + dc
                    if 0 <= nr < len(filled) and 0 <= nc < len(filled[nr]) and filled[nr][nc]:
                        filled[nr][nc] = False
                        stack.append((nr, nc))
            best = max(best, size)
    return best


@dataclass(eq=False)
class _Step:
    row: int
    col: int
    parent: Optional["_Step"]
    fork: bool = False


def count_luck(grid: Sequence[str], k: int) -> bool:
    """Whether the wand is waved exactly ``k`` times on the way from ``M`` to ``*``.

    The forest holds open cells ``'.'`` and trees ``'X'``; a wave happens at
    every cell of the path offering more than one way on.
    """
    cells = [list(row) for row in grid]
    start = next(
        ((r, row.index("M")) for r, row in enumerate(cells) if "M" in row),
        None,
    )
    if start is None:
        raise ValueError("the forest has no starting cell 'M'")

    queue = deque([_Step(start[0], start[1], None)])
    last: Optional[_Step] = None
    while queue:
        step = queue.popleft()
        if cells[step.row][step.col] == "*":
            last = step
            break
        cells[step.row][step.col] = "X"
        exits = 0
        for dr, dc in _NEIGHBOURS_4:
            r, c = step.row + dr, step.col + dc
            if 0 <= r < len(cells) and 0 <= c < len(cells[r]) and cells[r][c] in ".*":
                queue.append(_Step(r, c, step))
                exits += 1
        step.fork = exits > 1

    waves = 0
    node = last
    while node is not None:
        if node.fork:
            waves += 1
        node = node.parent
    return waves == k


def cut_the_tree(values: Sequence[int], edges: Sequence[tuple[int, int]]) -> int:
    """Smallest difference between the two trees left after cutting one edge.

    Nodes are numbered from 1; ``values[i]`` belongs to node ``i + 1``.
    A tree with no edge to cut gives 1000000000.
    """
    size = len(values)
    adjacency: list[list[int]] = [[] for _ in range(size + 1)]
    for p, s in edges:
        for node in (p, s):
            if not 1 <= node <= size:
                raise ValueError(f"node {node} is outside 1..{size}")
        adjacency[p].append(s)
        adjacency[s].append(p)
    if size == 0:
        return _NO_CUT

    order: list[int] = []
    parent = [0] * (size + 1)
    visited = [False] * (size + 1)
    visited[1] = True
    stack = [1]
    while stack:
        node = stack.pop()
        order.append(node)
        for nxt in adjacency[node]:
            if not visited[nxt]:
                visited[nxt] = True
                parent[nxt] = node
                stack.append(nxt)

    subtree = [0] * (size + 1)
    for node in reversed(order):
        subtree[node] += values[node - 1]
        if node != 1:
            subtree[parent[node]] += subtree[node]

    total = subtree[1]
    return min(
        (abs(subtree[node] - (total - subtree[node])) for node in order if node != 1),
        default=_NO_CUT,
    ) if len(order) > 1 else _NO_CUT


def gridland_metro(n: int, m: int, tracks: Sequence[tuple[int, int, int]]) -> int:
    """Cells of an ``n`` by ``m`` city free for lampposts.

    Each track is ``(row, first column, last column)``.  A new track is
    folded into every span of its row that holds one of its ends.
    """
    rows: dict[int, list[list[int]]] = {}
    for row, first, last in tracks:
        spans = rows.get(row)
        if spans is None:
            rows[row] = [[first, last]]
            continue
        merged = False
        for span in spans:
            if span[0] <= first <= span[1] or span[0] <= last <= span[1]:
                span[0] = min(span[0], first)
                span[1] = max(span[1], last)
                merged = True
        if not merged:
            spans.append([first, last])

    free = sum(m - sum(hi - lo + 1 for lo, hi in spans) for spans in rows.values())
    return free + (n - len(rows)) * m


def radio_transmitters(houses: Sequence[int], k: int) -> int:
    """Transmitters of range ``k`` placed on houses to cover every house."""
    nums = sorted(houses)
    size = len(nums)
    count = 0
    ix = 0
    while ix < size:
        reach = nums[ix] + k
        center = next(
            (p for p in range((k + ix) % size, ix, -1) if nums[p] <= reach),
            -1,
        )
        count += 1
        if center != -1:
            ix = center
            limit = nums[center] + k
            for a in range(center + 1, min(center + k, size - 1) + 1):
                if nums[a] > limit:
                    break
                ix += 1
        ix += 1
    return count


def icecream_parlor(money: int, costs: Sequence[int]) -> Optional[tuple[int, int]]:
    """1-based positions of two flavours costing exactly ``money``, or ``None``."""
    items = sorted(
        ((cost, position) for position, cost in enumerate(costs, 1) if cost < money),
        key=lambda item: item[0],
    )
    prices = [cost for cost, _ in items]
    for index, (cost, position) in enumerate(items):
        wanted = money - cost
        lo, hi = (0, index) if cost >= money // 2 else (index + 1, len(items))
        found = bisect_left(prices, wanted, lo, hi)
        if found != hi and prices[found] + cost == money:
            other = items[found][1]
            return (min(position, other), max(position, other))
    return None


def knightl_bfs(n: int, a: int, b: int) -> int:
    """Moves a KnightL(a, b) needs from the corner to the opposite corner.

    The search starts after the first move, on cell ``(a, b)``.  Returns
    ``-1`` when the far corner cannot be reached.
    """
    if not (0 <= a < n and 0 <= b < n):
        raise ValueError(f"move ({a}, {b}) does not fit a board of size {n}")
    moves = (
        (a, b), (a, -b), (-a, b), (-a, -b),
        (b, a), (b, -a), (-b, a), (-b, -a),
    )
    seen = {(a, b)}
    queue = deque([(a, b, 1)])
    while queue:
        r, c, level = queue.popleft()
        if r == n - 1 and c == n - 1:
            return level
        for dr, dc in moves:
            nr, nc = r + dr, c + dc
            if 0 <= nr < n and 0 <= nc < n and (nr, nc) not in seen:
                seen.add((nr, nc))
                queue.append((nr, nc, level + 1))
    return -1


def knightl_moves(n: int) -> list[list[int]]:
    """Table of ``knightl_bfs(n, a, b)`` for ``a`` and ``b`` in ``1 .. n - 1``."""
    return [[knightl_bfs(n, a, b) for b in range(1, n)] for a in range(1, n)]


def missing_numbers(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Ascending values occurring more often in the longer list than the shorter.

    All values must lie within a span of 103 numbers.
    """
    values = [*a, *b]
    if not values:
        return []
    low = min(values)
    if max(values) - low >= _MISSING_RANGE:
        raise ValueError(f"values must lie within a span of {_MISSING_RANGE}")
    counts_a, counts_b = Counter(a), Counter(b)
    high, other = (counts_b, counts_a) if len(b) > len(a) else (counts_a, counts_b)
    return sorted(value for value in high if high[value] - other[value] >= 1)


def count_pairs(nums: Sequence[int], k: int) -> int:
    """Elements ``x`` not below ``k`` for which ``x - k`` also occurs."""
    present = set(nums)
    return sum(1 for value in nums if value >= k and value - k in present)


def balanced_sums(nums: Sequence[int]) -> bool:
    """Whether some element has equal sums to its left and to its right."""
    if not nums:
        raise ValueError("cannot balance an empty sequence")
    total = sum(nums)
    left = 0
    for value in nums:
        if left == total - left - value:
            return True
        left += value
    return False