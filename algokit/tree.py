"""Binary tree puzzles: traversals, construction, search trees and path sums."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from itertools import pairwise


@dataclass(eq=False)
class TreeNode:
    """One node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def tree_from_level_order(values: Iterable[int | None]) -> TreeNode | None:
    """Build a tree from level-order values where None marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for is_left in (True, False):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is None:
                continue
            child = TreeNode(value)
            if is_left:
                node.left = child
            else:
                node.right = child
            queue.append(child)
    return root


def build_tree(preorder: Sequence[int], inorder: Sequence[int]) -> TreeNode | None:
    """Rebuild a tree of distinct values from its preorder and inorder traversals."""
    if len(preorder) != len(inorder):
        raise ValueError("traversals must have the same length")
    end = object()
    pre_i = in_i = 0

    def build(limit: object) -> TreeNode | None:
        nonlocal pre_i, in_i
        if pre_i >= len(preorder):
            return None
        if limit is not end and inorder[in_i] == limit:
            in_i += 1
            return None
        node = TreeNode(preorder[pre_i])
        pre_i += 1
        node.left = build(node.val)
        node.right = build(limit)
        return node

    return build(end)


def _levels(root: TreeNode | None) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [child for node in level for child in (node.left, node.right) if child is not None]


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Node values grouped by depth, left to right."""
    return [[node.val for node in level] for level in _levels(root)]


def average_of_levels(root: TreeNode | None) -> list[float]:
    """Mean node value at each depth."""
    return [sum(node.val for node in level) / len(level) for level in _levels(root)]


def right_side_view(root: TreeNode | None) -> list[int]:
    """Value of the rightmost node at each depth."""
    return [level[-1].val for level in _levels(root)]


def _height(node: TreeNode | None, go_left: bool) -> int:
    height = 0
    while node is not None:
        node = node.left if go_left else node.right
        height += 1
    return height


def count_nodes(root: TreeNode | None) -> int:
    """Number of nodes in a complete binary tree."""
    if root is None:
        return 0
    left = _height(root, True)
    if left == _height(root, False):
        return 2**left - 1
    return count_nodes(root.left) + count_nodes(root.right) + 1


def _preorder(root: TreeNode | None) -> Iterator[TreeNode]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _inorder(root: TreeNode | None) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def flatten(root: TreeNode | None) -> None:
    """Turn the tree in place into a right-leaning chain in preorder."""
    nodes = list(_preorder(root))
    for node, following in pairwise(nodes):
        node.left = None
        node.right = following


def invert_tree(root: TreeNode | None) -> TreeNode | None:
    """Mirror the tree in place and return its root."""
    for node in _preorder(root):
        node.left, node.right = node.right, node.left
    return root


def kth_smallest(root: TreeNode | None, k: int) -> int:
    """The ``k``-th smallest value (1-based) of a binary search tree."""
    if k >= 1:
        for position, node in enumerate(_inorder(root), 1):
            if position == k:
                return node.val
    raise ValueError(f"tree has no element number {k}")


def lowest_common_ancestor(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """Deepest node having both ``p`` and ``q`` as descendants (a node descends from itself)."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def bst_lowest_common_ancestor(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """Lowest common ancestor of ``p`` and ``q`` in a binary search tree, found by value."""
    node = root
    while node is not None:
        if p.val > node.val and q.val > node.val:
            node = node.right
        elif p.val < node.val and q.val < node.val:
            node = node.left
        else:
            return node
    return None


def min_abs_difference(root: TreeNode | None) -> int:
    """Smallest difference between consecutive in-order values of a binary search tree."""
    values = [node.val for node in _inorder(root)]
    if len(values) < 2:
        raise ValueError("tree needs at least two nodes")
    return min(b - a for a, b in pairwise(values))


def is_symmetric(root: TreeNode | None) -> bool:
    """True if the tree is a mirror image of itself."""

    def mirror(a: TreeNode | None, b: TreeNode | None) -> bool:
        if a is None or b is None:
            return a is b
        return a.val == b.val and mirror(a.left, b.right) and mirror(a.right, b.left)

    return root is None or mirror(root.left, root.right)


def is_valid_bst(root: TreeNode | None) -> bool:
    """True if every node lies strictly between the bounds set by its ancestors."""

    def valid(node: TreeNode | None, low: float, high: float) -> bool:
        if node is None:
            return True
        if not low < node.val < high:
            return False
        return valid(node.left, low, node.val) and valid(node.right, node.val, high)

    return valid(root, float("-inf"), float("inf"))


def has_path_sum(root: TreeNode | None, target_sum: int) -> bool:
    """True if some root-to-leaf path sums to ``target_sum``."""
    if root is None:
        return False
    remaining = target_sum - root.val
    if root.left is None and root.right is None:
        return remaining == 0
    return has_path_sum(root.left, remaining) or has_path_sum(root.right, remaining)