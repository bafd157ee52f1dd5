"""Binary tree exercises: construction, traversal and several tree queries."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare and hash by identity."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_tree(values: Iterable[int | None]) -> TreeNode | None:
    """Build a tree from a level-order list where None marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                queue.append(child)
    return root


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


def inorder_values(root: TreeNode | None) -> list[int]:
    """Return the node values in in-order sequence."""
    return [node.val for node in _inorder(root)]


def find_node(root: TreeNode | None, value: int) -> TreeNode | None:
    """Return the first node (in-order) holding ``value``, or None."""
    return next((node for node in _inorder(root) if node.val == value), None)


def lca_deepest_leaves(root: TreeNode | None) -> TreeNode | None:
    """Return the lowest common ancestor of the deepest leaves."""
    heights: dict[TreeNode, int] = {}

    def height(node: TreeNode | None) -> int:
        if node is None:
            return 0
        if node not in heights:
            heights[node] = max(height(node.left), height(node.right)) + 1
        return heights[node]

    node = root
    while node is not None:
        left, right = height(node.left), height(node.right)
        if left == right:
            return node
        node = node.left if left > right else node.right
    return None


def sum_even_grandparent(root: TreeNode | None) -> int:
    """Sum the values of nodes whose grandparent has an even value."""
    total = 0
    stack: list[tuple[TreeNode, int | None, int | None]] = []
    if root is not None:
        stack.append((root, None, None))
    while stack:
        node, parent, grandparent = stack.pop()
        if grandparent is not None and grandparent % 2 == 0:
            total += node.val
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, node.val, parent))
    return total


def sum_root_to_leaf_numbers(root: TreeNode | None) -> int:
    """Sum the numbers spelled by the digits along every root-to-leaf path."""
    total = 0
    stack: list[tuple[TreeNode, int]] = []
    if root is not None:
        stack.append((root, 0))
    while stack:
        node, number = stack.pop()
        number = number * 10 + node.val
        if node.left is None and node.right is None:
            total += number
            continue
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, number))
    return total


def distance_k(root: TreeNode | None, target: TreeNode, k: int) -> list[int]:
    """Return the values of all nodes exactly ``k`` edges away from ``target``."""
    parents: dict[TreeNode, TreeNode] = {}
    queue = deque([root] if root is not None else [])
    while queue:
        current = queue.popleft()
        for child in (current.left, current.right):
            if child is not None:
                parents[child] = current
                queue.append(child)

    visited = {target}
    level_queue = deque([target])
    level = 0
    while level_queue and level != k:
        level += 1
        for _ in range(len(level_queue)):
            node = level_queue.popleft()
            for neighbour in (node.left, node.right, parents.get(node)):
                if neighbour is not None and neighbour not in visited:
                    visited.add(neighbour)
                    level_queue.append(neighbour)
    return [node.val for node in level_queue]


def recover_tree(root: TreeNode | None) -> None:
    """Repair, in place, a search tree in which two values were swapped."""
    first: TreeNode | None = None
    end: TreeNode | None = None
    prev: TreeNode | None = None
    for node in _inorder(root):
        if prev is not None and node.val < prev.val:
            if first is None:
                first = prev
            end = node
        prev = node
    if first is not None and end is not None:
        first.val, end.val = end.val, first.val