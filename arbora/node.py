"""Binary tree nodes and the relations between them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer and links to its parent and children.

    Nodes compare and hash by identity, so they can be kept in sets.
    """

    value: int
    parent: Node | None = field(default=None, repr=False)
    left: Node | None = field(default=None, repr=False)
    right: Node | None = field(default=None, repr=False)

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; an existing left child becomes its left child."""
        node = Node(value, parent=self, left=self.left)
        if node.left is not None:
            node.left.parent = node
        self.left = node
        return node

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; an existing right child becomes its right child."""
        node = Node(value, parent=self, right=self.right)
        if node.right is not None:
            node.right.parent = node
        self.right = node
        return node

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def depth(self) -> int:
        """Return the number of edges between this node and the root."""
        return sum(1 for _ in self.ancestors()) - 1

    def sibling(self) -> Node | None:
        """Return the other child of this node's parent, or None."""
        if self.parent is None:
            return None
        if self is self.parent.left:
            return self.parent.right
        return self.parent.left

    def uncle(self) -> Node | None:
        """Return the sibling of this node's parent, or None."""
        if self.parent is None:
            return None
        return self.parent.sibling()

    def ancestors(self) -> Iterator[Node]:
        """Yield this node, then each of its ancestors up to the root."""
        node: Node | None = self
        while node is not None:
            yield node
            node = node.parent


def lowest_common_ancestor(first: Node | None, second: Node | None) -> Node | None:
    """Return the deepest node that is an ancestor of both nodes, or None."""
    if first is None or second is None:
        return None
    seen = set(second.ancestors())
    return next((node for node in first.ancestors() if node in seen), None)