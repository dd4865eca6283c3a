"""Measurements and shape checks for binary trees."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bintree.node import Node


def _walk(tree: Node | None) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _levels(tree: Node | None) -> int:
    """Number of levels in the tree (0 for an empty tree, 1 for a single node)."""
    levels = 0
    level = [tree] if tree is not None else []
    while level:
        levels += 1
        level = [child for node in level for child in (node.left, node.right) if child is not None]
    return levels


def height(tree: Node | None) -> int:
    """Height in edges: 0 for an empty tree or a single leaf."""
    return max(_levels(tree) - 1, 0)


def depth(node: Node | None) -> int:
    """Number of edges from the node up to the root; 0 for None."""
    count = 0
    while node is not None and node.parent is not None:
        count += 1
        node = node.parent
    return count


def size(tree: Node | None) -> int:
    """Number of nodes in the tree."""
    return sum(1 for _ in _walk(tree))


def leaves(tree: Node | None) -> int:
    """Number of nodes with no children."""
    return sum(1 for node in _walk(tree) if node.left is None and node.right is None)


def internal_nodes(tree: Node | None) -> int:
    """Number of nodes with at least one child."""
    return sum(1 for node in _walk(tree) if node.left is not None or node.right is not None)


def balance(tree: Node | None) -> int:
    """Balance factor: left subtree levels minus right subtree levels; 0 for None."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Node | None) -> bool:
    """True if every node has either zero or two children; False for None."""
    if tree is None:
        return False
    return all((node.left is None) == (node.right is None) for node in _walk(tree))


def is_perfect(tree: Node | None) -> bool:
    """True if every level is completely filled; False for None."""
    if tree is None:
        return False
    return size(tree) == 2 ** _levels(tree) - 1