"""Binary tree of integers built from and flattened to level-order arrays."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

_NULL = -1


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; identity, not value, defines equality."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_tree(data: Sequence[int]) -> Optional[TreeNode]:
    """Build a tree from level-order values where -1 marks a missing node."""
    if not data or data[0] == _NULL:
        return None
    root = TreeNode(data[0])
    parents = deque([root])
    values = list(data[1:])
    for start in range(0, len(values), 2):
        node = parents.popleft()
        for side, value in zip(("left", "right"), values[start:start + 2]):
            if value != _NULL:
                child = TreeNode(value)
                setattr(node, side, child)
                parents.append(child)
    return root


def tree_to_values(root: Optional[TreeNode]) -> list[int]:
    """Flatten a tree to level order, -1 for missing nodes, trailing -1 dropped."""
    result: list[int] = []
    pending: deque[Optional[TreeNode]] = deque([root] if root else [])
    while pending:
        node = pending.popleft()
        if node is None:
            result.append(_NULL)
        else:
            result.append(node.val)
            pending.extend((node.left, node.right))
    while result and result[-1] == _NULL:
        result.pop()
    return result


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Return True when both trees have the same shape and values."""
    if p is None or q is None:
        return p is q
    return (
        p.val == q.val
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(max_depth(root.left), max_depth(root.right)) + 1


def format_tree(root: Optional[TreeNode]) -> str:
    """Render a tree level by level, one line per level, "nil" for gaps."""
    if root is None:
        return "nil\n"
    lines = []
    level: list[Optional[TreeNode]] = [root]
    while level:
        lines.append("".join("nil " if n is None else f"{n.val} " for n in level))
        level = [c for n in level if n is not None for c in (n.left, n.right)]
    return "".join(line + "\n" for line in lines)


def print_tree(root: Optional[TreeNode]) -> None:
    """Print the level-by-level rendering of a tree."""
    print(format_tree(root), end="")