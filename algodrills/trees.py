"""Binary tree nodes and algorithms over them."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import chain


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def largest_values(root: TreeNode | None) -> list[int]:
    """Return the largest value found on each row of the tree, top down."""
    result: list[int] = []
    level = [] if root is None else [root]
    while level:
        result.append(max(node.val for node in level))
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return result


def validate_binary_tree_nodes(
    n: int, left_child: Sequence[int], right_child: Sequence[int]
) -> bool:
    """Tell whether the child arrays describe exactly one valid binary tree."""
    has_parent = [False] * n
    for child in chain(left_child[:n], right_child[:n]):
        if child != -1:
            has_parent[child] = True
    root = next((node for node, parented in enumerate(has_parent) if not parented), None)
    if root is None:
        return False

    visited = [False] * n
    queue = deque([root])
    remaining = n
    while queue:
        node = queue.popleft()
        visited[node] = True
        remaining -= 1
        for child in (left_child[node], right_child[node]):
            if child == -1:
                continue
            if visited[child]:
                return False
            queue.append(child)
    return remaining == 0