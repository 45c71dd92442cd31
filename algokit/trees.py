"""Binary trees: construction from traversals and traversal orders."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class TreeNode:
    """A binary tree node."""

    value: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def build_tree(preorder: Sequence[Any], inorder: Sequence[Any]) -> Optional[TreeNode]:
    """Rebuild a binary tree from its preorder and inorder traversals."""
    pre = list(preorder)
    ino = list(inorder)
    if len(pre) != len(ino):
        raise ValueError("traversals must have the same length")

    def build(pre_lo: int, pre_hi: int, in_lo: int, in_hi: int) -> Optional[TreeNode]:
        if pre_hi < pre_lo or in_hi < in_lo:
            return None
        root = pre[pre_lo]
        if pre_lo == pre_hi:
            return TreeNode(root)
        try:
            split = ino.index(root, in_lo, in_hi + 1)
        except ValueError:
            raise ValueError(f"{root!r} is missing from the inorder traversal") from None
        left_end = pre_lo + split - in_lo
        left = build(pre_lo + 1, left_end, in_lo, split - 1)
        right = build(left_end + 1, pre_hi, split + 1, in_hi)
        return TreeNode(root, left, right)

    return build(0, len(pre) - 1, 0, len(ino) - 1)


def inorder(root: Optional[TreeNode]) -> list[Any]:
    """Return values in left, node, right order."""
    values: list[Any] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        values.append(node.value)
        node = node.right
    return values


def level_order(root: Optional[TreeNode]) -> list[Any]:
    """Return values level by level, left to right."""
    if root is None:
        return []
    values: list[Any] = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        values.append(node.value)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return values