"""Max binary heaps stored as linked binary trees."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .measure import height, is_complete, size
from .node import Node


def _all_below(tree: Node | None, bound: int) -> bool:
    if tree is None:
        return True
    return (
        tree.value < bound
        and _all_below(tree.left, bound)
        and _all_below(tree.right, bound)
    )


def is_heap(tree: Node | None) -> bool:
    """Return True if the tree is a complete tree where every node exceeds its descendants."""
    if tree is None:
        return False
    if not (_all_below(tree.left, tree.value) and _all_below(tree.right, tree.value)):
        return False
    if tree.left is not None and not is_heap(tree.left):
        return False
    if tree.right is not None and not is_heap(tree.right):
        return False
    return is_complete(tree)


def _sift_up(node: Node) -> Node:
    """Swap values upward while the parent is smaller; return the node holding the value."""
    while node.parent is not None and node.value > node.parent.value:
        node.value, node.parent.value = node.parent.value, node.value
        node = node.parent
    return node


def heap_insert(root: Node | None, value: int) -> tuple[Node, Node]:
    """Insert value into the heap.

    Returns the root of the heap and the node that holds the value once it
    has risen to its place.
    """
    if root is None:
        node = Node(value)
        return node, node
    # The binary form of the new node's 1-based level-order position, without
    # its leading 1, spells the path from the root: 0 for left, 1 for right.
    path = bin(size(root) + 1)[3:]
    parent: Node | None = root
    for step in path[:-1]:
        assert parent is not None
        parent = parent.right if step == "1" else parent.left
        if parent is None:
            raise ValueError("tree is not a complete binary tree")
    assert parent is not None
    node = Node(value, parent=parent)
    if path[-1] == "1":
        parent.right = node
    else:
        parent.left = node
    return root, _sift_up(node)


def array_to_heap(values: Iterable[int]) -> Node | None:
    """Build a max heap by inserting values in order."""
    root: Node | None = None
    for value in values:
        root, _ = heap_insert(root, value)
    return root


def _preorder_with_depth(tree: Node | None, depth: int = 0) -> Iterator[tuple[Node, int]]:
    if tree is None:
        return
    yield tree, depth
    yield from _preorder_with_depth(tree.left, depth + 1)
    yield from _preorder_with_depth(tree.right, depth + 1)


def _last_node(tree: Node) -> Node:
    """Return the last node, in pre-order, on the deepest level."""
    deepest = height(tree)
    last = tree
    for node, depth in _preorder_with_depth(tree):
        if depth == deepest:
            last = node
    return last


def _sift_down(node: Node) -> None:
    """Swap values downward with the larger child until the node exceeds it."""
    while node.left is not None:
        child = node.left
        if node.right is not None and not node.left.value > node.right.value:
            child = node.right
        if node.value > child.value:
            break
        node.value, child.value = child.value, node.value
        node = child


def heap_extract(root: Node | None) -> tuple[Node | None, int]:
    """Remove the root value of the heap.

    Returns the root of what remains, None once the heap is empty, and the
    value taken out. Raises IndexError on an empty heap.
    """
    if root is None:
        raise IndexError("extract from an empty heap")
    value = root.value
    if root.is_leaf():
        return None, value
    last = _last_node(root)
    root.value = last.value
    parent = last.parent
    assert parent is not None
    if parent.right is not None:
        parent.right = None
    else:
        parent.left = None
    last.parent = None
    _sift_down(root)
    return root, value


def heap_to_sorted_array(heap: Node | None) -> list[int]:
    """Empty the heap and return its values in descending order."""
    values: list[int] = []
    while heap is not None:
        heap, value = heap_extract(heap)
        values.append(value)
    return values