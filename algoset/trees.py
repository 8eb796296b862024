"""Binary tree traversals and exercises."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from algoset.linked_list import ListNode


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree, with an optional ``next`` link."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None
    next: TreeNode | None = None


def build_tree(values: Sequence[int | None]) -> TreeNode | None:
    """Build a tree from level-order ``values`` where ``None`` marks a gap."""
    if not values or values[0] is None:
        return None
    items = iter(values)
    root = TreeNode(next(items))
    pending = deque([root])
    while pending:
        node = pending.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                pending.append(child)
    return root


def _levels(root: TreeNode | None) -> Iterator[list[TreeNode]]:
    if root is None:
        return
    current = [root]
    while current:
        yield current
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Return the values of each level, left to right."""
    return [[node.val for node in level] for level in _levels(root)]


def zigzag_level_order(root: TreeNode | None) -> list[list[int]]:
    """Return the levels in spiral order: left to right, then right to left."""
    return [
        values if depth % 2 == 0 else values[::-1]
        for depth, values in enumerate(level_order(root))
    ]


def sorted_levels(root: TreeNode | None) -> list[list[int]]:
    """Return the values of each level in ascending order."""
    return [sorted(values) for values in level_order(root)]


def reverse_level_order(root: TreeNode | None) -> list[list[int]]:
    """Return the level-order values read backwards, level by level.

    The deepest level comes first and each level runs right to left.
    """
    return [values[::-1] for values in reversed(level_order(root))]


def _mirrors(left: TreeNode | None, right: TreeNode | None) -> bool:
    if left is None or right is None:
        return left is right
    return (
        left.val == right.val
        and _mirrors(left.left, right.right)
        and _mirrors(left.right, right.left)
    )


def is_symmetric(root: TreeNode | None) -> bool:
    """Return True if the tree is a mirror image of itself."""
    return root is None or _mirrors(root.left, root.right)


def has_path_sum(root: TreeNode | None, target_sum: int) -> bool:
    """Return True if some root-to-leaf path adds up to ``target_sum``."""
    if root is None:
        return False
    remaining = target_sum - root.val
    if root.left is None and root.right is None:
        return remaining == 0
    return has_path_sum(root.left, remaining) or has_path_sum(root.right, remaining)


def diameter(root: TreeNode | None) -> int:
    """Return the number of edges on the longest path between two nodes."""
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


def _count(root: TreeNode | None) -> int:
    if root is None:
        return 0
    return 1 + _count(root.left) + _count(root.right)


def can_split_by_edge(root: TreeNode | None) -> bool:
    """Return True if removing one edge leaves two trees of equal size."""
    total = _count(root)
    if total == 0 or total % 2:
        return False
    half = total // 2
    found = False

    def size(node: TreeNode | None) -> int:
        nonlocal found
        if node is None or found:
            return 0
        result = 1 + size(node.left) + size(node.right)
        if result == half:
            found = True
        return result

    size(root)
    return found


def generate_trees(inorder: Sequence[int]) -> list[TreeNode | None]:
    """Return every binary tree whose inorder traversal is ``inorder``."""

    def build(start: int, end: int) -> list[TreeNode | None]:
        if start > end:
            return [None]
        trees: list[TreeNode | None] = []
        for index in range(start, end + 1):
            for left in build(start, index - 1):
                for right in build(index + 1, end):
                    trees.append(TreeNode(inorder[index], left, right))
        return trees

    return build(0, len(inorder) - 1)


def _inorder_nodes(root: TreeNode | None) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def populate_next(root: TreeNode | None) -> None:
    """Point each node's ``next`` at its inorder successor, the last at None."""
    nodes = list(_inorder_nodes(root))
    for node, successor in zip(nodes, nodes[1:]):
        node.next = successor
    if nodes:
        nodes[-1].next = None


def complete_tree_from_list(head: ListNode | None) -> TreeNode | None:
    """Build a complete binary tree whose level order is the linked list."""
    if head is None:
        return None
    root = TreeNode(head.val)
    parents = deque([root])
    item = head.next
    while item is not None:
        parent = parents.popleft()
        parent.left = TreeNode(item.val)
        parents.append(parent.left)
        item = item.next
        if item is not None:
            parent.right = TreeNode(item.val)
            parents.append(parent.right)
            item = item.next
    return root