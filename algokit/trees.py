"""Binary and n-ary tree problems: path sums, balance and structural equality."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Optional


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


@dataclass
class GenericTreeNode:
    """A tree node with any number of ordered children."""

    data: int
    children: list[GenericTreeNode] = field(default_factory=list)


def has_path_sum(root: Optional[TreeNode], target: int) -> bool:
    """Tell whether some root-to-leaf path adds up to ``target``."""
    if root is None:
        return False
    remaining = target - root.val
    if root.left is None and root.right is None:
        return remaining == 0
    return has_path_sum(root.left, remaining) or has_path_sum(root.right, remaining)


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Tell whether every node's subtrees differ in height by at most one."""
    return _balanced_height(root) is not None


def _balanced_height(node: Optional[TreeNode]) -> Optional[int]:
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left is None:
        return None
    right = _balanced_height(node.right)
    if right is None or abs(left - right) > 1:
        return None
    return 1 + max(left, right)


def are_identical(first: Optional[GenericTreeNode], second: Optional[GenericTreeNode]) -> bool:
    """Tell whether two trees hold the same data in the same shape."""
    if first is None or second is None:
        return first is second
    if first.data != second.data or len(first.children) != len(second.children):
        return False
    return all(are_identical(a, b) for a, b in zip(first.children, second.children))


def parse_level_order(values: Iterable[int]) -> GenericTreeNode:
    """Build a tree from level-order input.

    The input is the root's data, then for each node in breadth-first order
    its number of children followed by their data.
    """
    stream = iter(values)

    def take(what: str) -> int:
        try:
            return next(stream)
        except StopIteration:
            raise ValueError(f"input ended while reading {what}") from None

    root = GenericTreeNode(take("the root"))
    pending = deque([root])
    while pending:
        node = pending.popleft()
        count = take("a child count")
        if count < 0:
            raise ValueError(f"child count must not be negative: {count}")
        for _ in range(count):
            child = GenericTreeNode(take("child data"))
            node.children.append(child)
            pending.append(child)
    return root