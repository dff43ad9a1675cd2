"""Text rendering of binary trees."""

from __future__ import annotations

import sys
from typing import TextIO

from .measure import height
from .node import Node


def _put(row: list[str], start: int, text: str) -> None:
    """Write text into a row of characters, growing the row with spaces."""
    end = start + len(text)
    if end > len(row):
        row.extend(" " * (end - len(row)))
    row[start:end] = text


def _render(tree: Node | None, offset: int, depth: int, rows: list[list[str]]) -> int:
    """Draw a subtree into rows and return the width it takes up."""
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    label = f"({tree.value:03d})"
    width = len(label)
    left = _render(tree.left, offset, depth + 1, rows)
    right = _render(tree.right, offset + left + width, depth + 1, rows)
    _put(rows[depth], offset + left, label)
    if depth and is_left:
        _put(rows[depth - 1], offset + left + width // 2, "-" * (width + right))
        _put(rows[depth - 1], offset + left + width // 2, ".")
    elif depth:
        _put(rows[depth - 1], offset - width // 2, "-" * (left + width))
        _put(rows[depth - 1], offset + left + width // 2, ".")
    return left + width + right


def format_tree(tree: Node | None) -> str:
    """Return a drawing of the tree, one line per level, each ending in a newline."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(height(tree) + 1)]
    _render(tree, 0, 0, rows)
    return "".join("".join(row).rstrip(" ") + "\n" for row in rows)


def print_tree(tree: Node | None, file: TextIO | None = None) -> None:
    """Write the drawing of the tree to file, standard output by default."""
    (file if file is not None else sys.stdout).write(format_tree(tree))