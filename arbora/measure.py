"""Measurements and shape checks of binary trees."""

from __future__ import annotations

from .node import Node


def _levels(tree: Node | None) -> int:
    """Number of nodes on the longest root-to-leaf path; 0 for an empty tree."""
    if tree is None:
        return 0
    return 1 + max(_levels(tree.left), _levels(tree.right))


def height(tree: Node | None) -> int:
    """Return the number of edges on the longest downward path; 0 for None or a leaf."""
    return max(_levels(tree) - 1, 0)


def size(tree: Node | None) -> int:
    """Return the number of nodes in the tree."""
    if tree is None:
        return 0
    return 1 + size(tree.left) + size(tree.right)


def count_leaves(tree: Node | None) -> int:
    """Return the number of nodes without children."""
    if tree is None:
        return 0
    if tree.is_leaf():
        return 1
    return count_leaves(tree.left) + count_leaves(tree.right)


def count_internal(tree: Node | None) -> int:
    """Return the number of nodes with at least one child."""
    if tree is None or tree.is_leaf():
        return 0
    return 1 + count_internal(tree.left) + count_internal(tree.right)


def balance(tree: Node | None) -> int:
    """Return the height of the left subtree minus that of the right subtree."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Node | None) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    if tree.is_leaf():
        return True
    if tree.left is not None and tree.right is not None:
        return is_full(tree.left) and is_full(tree.right)
    return False


def _perfect_or_empty(tree: Node | None) -> bool:
    if tree is None or tree.is_leaf():
        return True
    if tree.left is None or tree.right is None:
        return False
    return (
        _levels(tree.left) == _levels(tree.right)
        and _perfect_or_empty(tree.left)
        and _perfect_or_empty(tree.right)
    )


def is_perfect(tree: Node | None) -> bool:
    """Return True if all internal nodes have two children and all leaves share a level."""
    return tree is not None and _perfect_or_empty(tree)


def is_complete(tree: Node | None) -> bool:
    """Return True if every level is full except possibly the last, filled from the left."""
    if tree is None:
        return False
    if tree.is_leaf():
        return True
    left_levels = _levels(tree.left)
    right_levels = _levels(tree.right)
    if left_levels == right_levels:
        return _perfect_or_empty(tree.left) and is_complete(tree.right)
    if left_levels == right_levels + 1:
        return is_complete(tree.left) and _perfect_or_empty(tree.right)
    return False