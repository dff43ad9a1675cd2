"""Binary search trees: checking, insertion, lookup and removal."""

from __future__ import annotations

from collections.abc import Iterable

from .node import Node


def _all_less(tree: Node | None, bound: int) -> bool:
    if tree is None:
        return True
    return tree.value < bound and _all_less(tree.left, bound) and _all_less(tree.right, bound)


def _all_greater(tree: Node | None, bound: int) -> bool:
    if tree is None:
        return True
    return (
        tree.value > bound
        and _all_greater(tree.left, bound)
        and _all_greater(tree.right, bound)
    )


def is_bst(tree: Node | None) -> bool:
    """Return True if the tree is a valid binary search tree without duplicates."""
    if tree is None:
        return False
    if not (_all_less(tree.left, tree.value) and _all_greater(tree.right, tree.value)):
        return False
    return (tree.left is None or is_bst(tree.left)) and (
        tree.right is None or is_bst(tree.right)
    )


def bst_insert(root: Node | None, value: int) -> Node | None:
    """Insert value into the tree and return the new node.

    With no root the new node is returned as the root of a new tree. A value
    already present is ignored and None is returned.
    """
    if root is None:
        return Node(value)
    node = root
    while node.value != value:
        if value < node.value:
            if node.left is None:
                node.left = Node(value, parent=node)
                return node.left
            node = node.left
        else:
            if node.right is None:
                node.right = Node(value, parent=node)
                return node.right
            node = node.right
    return None


def array_to_bst(values: Iterable[int]) -> Node | None:
    """Build a binary search tree by inserting values in order; duplicates are ignored."""
    root: Node | None = None
    for value in values:
        node = bst_insert(root, value)
        if root is None:
            root = node
    return root


def bst_search(tree: Node | None, value: int) -> Node | None:
    """Return the node holding value, or None."""
    node = tree
    while node is not None:
        if node.value == value:
            return node
        node = node.right if node.value < value else node.left
    return None


def _minimum(tree: Node) -> Node:
    while tree.left is not None:
        tree = tree.left
    return tree


def bst_remove(root: Node | None, value: int) -> Node | None:
    """Remove value from the tree and return the root of what remains.

    A node with two children takes the smallest value of its right subtree,
    which is then removed from there.
    """
    if root is None:
        return None
    if value < root.value:
        root.left = bst_remove(root.left, value)
        return root
    if value > root.value:
        root.right = bst_remove(root.right, value)
        return root
    if root.left is not None and root.right is not None:
        successor = _minimum(root.right)
        root.value = successor.value
        root.right = bst_remove(root.right, successor.value)
        return root
    child = root.left if root.left is not None else root.right
    if child is not None:
        child.parent = root.parent
    root.parent = root.left = root.right = None
    return child