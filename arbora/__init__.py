"""Linked binary trees: plain trees, search trees, AVL trees and max heaps."""

__version__ = "0.1.0"

__all__ = ["node", "traversal", "measure", "rotate", "printer", "bst", "avl", "heap"]