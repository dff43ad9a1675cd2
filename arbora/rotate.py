"""Left and right rotations of binary trees."""

from __future__ import annotations

from .node import Node


def rotate_left(tree: Node | None) -> Node | None:
    """Rotate the tree left and return the new root.

    The returned root is detached: its parent is None. A tree without a right
    child is returned unchanged except that it, too, loses its parent link.
    """
    if tree is None:
        return None
    pivot = tree.right
    tree.parent = pivot
    if pivot is None:
        return tree
    tree.right = pivot.left
    pivot.left = tree
    pivot.parent = None
    if tree.right is not None:
        tree.right.parent = tree
    return pivot


def rotate_right(tree: Node | None) -> Node | None:
    """Rotate the tree right and return the new root.

    The returned root is detached: its parent is None. A tree without a left
    child is returned unchanged except that it, too, loses its parent link.
    """
    if tree is None:
        return None
    pivot = tree.left
    tree.parent = pivot
    if pivot is None:
        return tree
    tree.left = pivot.right
    pivot.right = tree
    pivot.parent = None
    if tree.left is not None:
        tree.left.parent = tree
    return pivot