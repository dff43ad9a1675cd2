"""AVL trees: checking, insertion, removal and construction from arrays."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .bst import bst_remove, is_bst
from .measure import balance, is_complete
from .node import Node
from .rotate import rotate_left, rotate_right


def is_avl(tree: Node | None) -> bool:
    """Return True if the tree is a binary search tree whose shape is complete."""
    return is_bst(tree) and is_complete(tree)


def _rebalance_after_insert(node: Node, value: int) -> Node:
    """Rotate node if the insertion of value unbalanced it; return the subtree root."""
    parent = node.parent
    factor = balance(node)
    result: Node | None = node
    if factor > 1 and node.left is not None and value < node.left.value:
        result = rotate_right(node)
    elif factor < -1 and node.right is not None and value > node.right.value:
        result = rotate_left(node)
    elif factor > 1 and node.left is not None and value > node.left.value:
        node.left = rotate_left(node.left)
        result = rotate_right(node)
    elif factor < -1 and node.right is not None and value < node.right.value:
        node.right = rotate_right(node.right)
        result = rotate_left(node)
    assert result is not None
    result.parent = parent
    return result


def _insert(tree: Node, value: int) -> tuple[Node, Node | None]:
    if value < tree.value:
        if tree.left is None:
            tree.left = Node(value, parent=tree)
            return tree, tree.left
        tree.left, inserted = _insert(tree.left, value)
    elif value > tree.value:
        if tree.right is None:
            tree.right = Node(value, parent=tree)
            return tree, tree.right
        tree.right, inserted = _insert(tree.right, value)
    else:
        return tree, None
    if inserted is None:
        return tree, None
    return _rebalance_after_insert(tree, value), inserted


def avl_insert(root: Node | None, value: int) -> tuple[Node, Node | None]:
    """Insert value into the AVL tree.

    Returns the root after rebalancing and the new node, which is None when
    the value was already present.
    """
    if root is None:
        node = Node(value)
        return node, node
    return _insert(root, value)


def array_to_avl(values: Iterable[int]) -> Node | None:
    """Build an AVL tree by inserting values in order; duplicates are ignored."""
    root: Node | None = None
    for value in values:
        root, _ = avl_insert(root, value)
    return root


def _rebalance_all(tree: Node | None) -> Node | None:
    """Rebalance every subtree bottom-up with single rotations."""
    if tree is None or tree.is_leaf():
        return tree
    parent = tree.parent
    tree.left = _rebalance_all(tree.left)
    tree.right = _rebalance_all(tree.right)
    factor = balance(tree)
    result: Node | None = tree
    if factor > 1:
        result = rotate_right(tree)
    elif factor < -1:
        result = rotate_left(tree)
    assert result is not None
    result.parent = parent
    return result


def avl_remove(root: Node | None, value: int) -> Node | None:
    """Remove value from the AVL tree and return the rebalanced root."""
    return _rebalance_all(bst_remove(root, value))


def _build(values: Sequence[int], parent: Node | None) -> Node | None:
    if not values:
        return None
    middle = (len(values) - 1) // 2
    node = Node(values[middle], parent=parent)
    node.left = _build(values[:middle], node)
    node.right = _build(values[middle + 1 :], node)
    return node


def sorted_array_to_avl(values: Iterable[int]) -> Node | None:
    """Build a balanced tree from sorted values without any rotation."""
    return _build(list(values), None)