"""Binary tree nodes, level-order construction and tree drills."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree of integers."""

    val: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def build_tree(values: Sequence[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order ``values``, where None marks a missing node.

    Missing nodes have no children listed for them. An empty sequence or a
    missing root gives None.
    """
    if not values or values[0] is None:
        return None
    root = TreeNode(values[0])
    queue = deque([root])
    rest = iter(values[1:])
    while queue:
        current = queue.popleft()
        try:
            left = next(rest)
        except StopIteration:
            break
        if left is not None:
            current.left = TreeNode(left)
            queue.append(current.left)
        try:
            right = next(rest)
        except StopIteration:
            break
        if right is not None:
            current.right = TreeNode(right)
            queue.append(current.right)
    return root


def _inorder(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    if root is None:
        return
    yield from _inorder(root.left)
    yield root
    yield from _inorder(root.right)


def inorder_values(root: Optional[TreeNode]) -> list[int]:
    """Return the node values in in-order (left, node, right)."""
    return [node.val for node in _inorder(root)]


def _mirrors(a: Optional[TreeNode], b: Optional[TreeNode]) -> bool:
    if a is None or b is None:
        return a is b
    return a.val == b.val and _mirrors(a.left, b.right) and _mirrors(a.right, b.left)


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Whether the tree is a mirror image of itself around its centre."""
    return root is None or _mirrors(root.left, root.right)


def max_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest path from the root down to a leaf."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def min_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the shortest path from the root down to a leaf."""
    if root is None:
        return 0
    if root.left is None:
        return 1 + min_depth(root.right)
    if root.right is None:
        return 1 + min_depth(root.left)
    return 1 + min(min_depth(root.left), min_depth(root.right))


def count_nodes(root: Optional[TreeNode]) -> int:
    """Total number of nodes in the tree."""
    if root is None:
        return 0
    return 1 + count_nodes(root.left) + count_nodes(root.right)


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Whether, at every node, the left subtree is at most one level deeper
    than the right subtree.

    Only the left side is bounded: a right subtree may be any amount deeper.
    """
    if root is None:
        return True
    return (
        max_depth(root.left) - max_depth(root.right) <= 1
        and is_balanced(root.left)
        and is_balanced(root.right)
    )


def binary_tree_paths(root: Optional[TreeNode]) -> list[str]:
    """One entry per empty child link, in pre-order.

    Each entry is the value of the node the empty link hangs from followed by
    ``"->"``; an empty tree has a single unlabelled link and gives ``[""]``.
    """

    def walk(node: Optional[TreeNode], label: str) -> Iterator[str]:
        if node is None:
            yield label
            return
        own = f"{node.val}->"
        yield from walk(node.left, own)
        yield from walk(node.right, own)

    return list(walk(root, ""))


def sum_of_left_leaves(root: Optional[TreeNode]) -> int:
    """Sum of the values of every node that is the left child of its parent."""

    def walk(node: Optional[TreeNode], is_left: bool) -> int:
        if node is None:
            return 0
        own = node.val if is_left else 0
        return own + walk(node.left, True) + walk(node.right, False)

    return walk(root, False)


def find_bottom_left_value(root: Optional[TreeNode]) -> int:
    """Value of the leftmost node on the deepest level of a non-empty tree."""
    if root is None:
        raise ValueError("tree must have at least one node")
    level = [root]
    while True:
        below = [child for node in level for child in (node.left, node.right) if child]
        if not below:
            return level[0].val
        level = below


def has_path_sum(root: Optional[TreeNode], target_sum: int) -> bool:
    """Whether some root-to-leaf path has values adding up to ``target_sum``."""

    def sums(node: TreeNode, running: int) -> Iterator[int]:
        running += node.val
        if node.left is None and node.right is None:
            yield running
            return
        for child in (node.left, node.right):
            if child is not None:
                yield from sums(child, running)

    if root is None:
        return False
    return any(total == target_sum for total in sums(root, 0))


def trim_bst(root: Optional[TreeNode], low: int, high: int) -> Optional[TreeNode]:
    """Remove from a binary search tree every node outside ``[low, high]``.

    The tree is edited in place; kept nodes keep their ancestor relations.
    Returns the new root, which may differ from ``root`` or be None.
    """
    if root is None:
        return None
    if root.val < low:
        return trim_bst(root.right, low, high)
    if root.val > high:
        return trim_bst(root.left, low, high)
    root.left = trim_bst(root.left, low, high)
    root.right = trim_bst(root.right, low, high)
    return root