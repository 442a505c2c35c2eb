"""Binary tree node type and common tree algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

__all__ = [
    "TreeNode",
    "is_same_tree",
    "is_symmetric",
    "level_order",
    "max_depth",
    "has_path_sum",
    "preorder",
    "postorder",
    "inorder",
    "right_side_view",
    "build_tree",
    "diameter",
]


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """Return True if both trees have identical shape and values."""
    if p is None or q is None:
        return p is q
    return (
        p.val == q.val
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )


def _is_mirror(a: TreeNode | None, b: TreeNode | None) -> bool:
    if a is None or b is None:
        return a is b
    return a.val == b.val and _is_mirror(a.left, b.right) and _is_mirror(a.right, b.left)


def is_symmetric(root: TreeNode | None) -> bool:
    """Return True if the tree is a mirror image of itself."""
    if root is None:
        return True
    return _is_mirror(root.left, root.right)


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Return node values grouped by depth, top to bottom, left to right."""
    levels: list[list[int]] = []
    current = [root] if root is not None else []
    while current:
        levels.append([node.val for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def max_depth(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def has_path_sum(root: TreeNode | None, target: int) -> bool:
    """Return True if some root-to-leaf path sums to ``target``."""
    if root is None:
        return False
    if root.left is None and root.right is None:
        return root.val == target
    remaining = target - root.val
    return has_path_sum(root.left, remaining) or has_path_sum(root.right, remaining)


def _preorder(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield node.val
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.val


def _inorder(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.val
        yield from _inorder(node.right)


def preorder(root: TreeNode | None) -> list[int]:
    """Return values in root, left, right order."""
    return list(_preorder(root))


def postorder(root: TreeNode | None) -> list[int]:
    """Return values in left, right, root order."""
    return list(_postorder(root))


def inorder(root: TreeNode | None) -> list[int]:
    """Return values in left, root, right order."""
    return list(_inorder(root))


def right_side_view(root: TreeNode | None) -> list[int]:
    """Return the value of the rightmost node at each depth."""
    view: list[int] = []

    def visit(node: TreeNode | None, depth: int) -> None:
        if node is None:
            return
        if depth == len(view):
            view.append(node.val)
        visit(node.right, depth + 1)
        visit(node.left, depth + 1)

    visit(root, 0)
    return view


def build_tree(descriptions: Iterable[Sequence[int]]) -> TreeNode:
    """Build a tree from ``[parent, child, is_left]`` triples and return its root.

    ``is_left`` equal to 1 places the child on the left, anything else on the
    right. The root is the parent that never appears as a child.
    """
    children: dict[int, list[int | None]] = {}
    child_values: set[int] = set()
    for parent, child, is_left in descriptions:
        slots = children.setdefault(parent, [None, None])
        child_values.add(child)
        slots[0 if is_left == 1 else 1] = child

    root_val = next((p for p in children if p not in child_values), None)
    if root_val is None:
        raise ValueError("descriptions do not define a root node")

    root = TreeNode(root_val)
    seen = {root_val}
    pending = [root]
    while pending:
        node = pending.pop()
        left_val, right_val = children.get(node.val, (None, None))
        for value, side in ((left_val, "left"), (right_val, "right")):
            if value is None:
                continue
            if value in seen:
                raise ValueError(f"node {value} is reached more than once")
            seen.add(value)
            child = TreeNode(value)
            setattr(node, side, child)
            pending.append(child)
    return root


def diameter(root: TreeNode | None) -> int:
    """Return the number of edges on the longest path between any two nodes."""
    best = 0

    def height(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        best = max(best, left + right)
        return 1 + max(left, right)

    height(root)
    return best