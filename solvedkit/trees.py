"""Binary trees: level traversals, shape checks and search-tree operations."""

from __future__ import annotations

from bisect import bisect_left
from collections import deque
from dataclasses import dataclass
from typing import Optional

from solvedkit.linkedlists import ListNode, list_values


@dataclass
class TreeNode:
    """A node of a binary tree."""

    val: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _levels(root: Optional[TreeNode]) -> list[list[int]]:
    """Values of the tree grouped by depth, top first."""
    levels: list[list[int]] = []
    queue = deque([(0, root)] if root is not None else [])
    while queue:
        depth, node = queue.popleft()
        if depth == len(levels):
            levels.append([])
        levels[depth].append(node.val)
        for child in (node.left, node.right):
            if child is not None:
                queue.append((depth + 1, child))
    return levels


def _levels_with_gaps(root: TreeNode) -> list[list[Optional[int]]]:
    """Like ``_levels`` but missing children appear as ``None``."""
    levels: list[list[Optional[int]]] = []
    queue: deque = deque([(0, root)])
    while queue:
        depth, node = queue.popleft()
        if depth == len(levels):
            levels.append([])
        if node is None:
            levels[depth].append(None)
            continue
        levels[depth].append(node.val)
        queue.append((depth + 1, node.left))
        queue.append((depth + 1, node.right))
    return levels


def average_of_levels(root: Optional[TreeNode]) -> list[float]:
    """Mean value of the nodes on each level, top first."""
    return [sum(level) / len(level) for level in _levels(root)]


def level_order_bottom(root: Optional[TreeNode]) -> list[list[int]]:
    """Values grouped by level, deepest level first."""
    return _levels(root)[::-1]


def is_complete_tree(root: Optional[TreeNode]) -> bool:
    """Whether every level is full except the last, which fills from the left."""
    if root is None:
        return True
    levels = _levels_with_gaps(root)
    *upper, last = levels[:-1]
    if any(value is None for level in upper for value in level):
        return False
    seen_gap = False
    for value in last:
        if value is None:
            seen_gap = True
        elif seen_gap:
            return False
    return True


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Whether the tree reads the same on every level from either side."""
    if root is None:
        return True
    return all(level == level[::-1] for level in _levels_with_gaps(root))


def sorted_list_to_bst(head: Optional[ListNode]) -> Optional[TreeNode]:
    """Build a height-balanced search tree from a sorted linked list."""

    def build(values: list[int]) -> Optional[TreeNode]:
        if not values:
            return None
        mid = len(values) // 2
        return TreeNode(values[mid], build(values[:mid]), build(values[mid + 1 :]))

    return build(list_values(head))


def delete_node(root: Optional[TreeNode], key: int) -> Optional[TreeNode]:
    """Remove ``key`` from a search tree and return the new root."""
    if root is None:
        return None
    if key < root.val:
        root.left = delete_node(root.left, key)
        return root
    if key > root.val:
        root.right = delete_node(root.right, key)
        return root
    if root.left is None:
        return root.right
    if root.right is None:
        return root.left
    successor = root.right
    while successor.left is not None:
        successor = successor.left
    root.val = successor.val
    root.right = delete_node(root.right, successor.val)
    return root


def preorder(root: Optional[TreeNode]) -> list[int]:
    """Values in node, left, right order."""
    if root is None:
        return []
    return [root.val, *preorder(root.left), *preorder(root.right)]


def in_order(root: Optional[TreeNode]) -> list[int]:
    """Values in left, node, right order."""
    if root is None:
        return []
    return [*in_order(root.left), root.val, *in_order(root.right)]


def find_target(root: Optional[TreeNode], k: int) -> bool:
    """Whether two distinct nodes of a search tree add up to ``k``."""
    values = in_order(root)
    if len(values) <= 1:
        return False
    for position, value in enumerate(values):
        diff = k - value
        index = bisect_left(values, diff)
        if index == len(values) or index == position:
            continue
        if values[index] == diff:
            return True
    return False