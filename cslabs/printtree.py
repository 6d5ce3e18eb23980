"""Draw a binary tree as ASCII art.

A node is any object with ``key``, ``left`` and ``right`` attributes; a
missing child is ``None``.
"""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO

EMPTY = "(empty)"


def _print_height(node: Any) -> int:
    if node is None:
        return -1
    return 1 + max(_print_height(node.left), _print_height(node.right))


def _put(row: list[str], pos: int, ch: str) -> None:
    if 0 <= pos < len(row):
        row[pos] = ch


def _draw_subtree(node: Any, rows: list[list[str]], left: int, top: int, width: int) -> None:
    text = str(node.key)
    row = rows[top]
    half = width // 2
    start_shift = 1 - (len(text) - 1) // 2

    for i, ch in enumerate(text):
        if left + half + i >= len(row):
            break
        _put(row, left + half + start_shift + i, ch)

    branch_offset = (width + 3) >> 3
    center = left + half

    if node.left is not None:
        left_center = left + (half - 1) // 2
        branch_pos = center - branch_offset + 1
        for pos in range(center + start_shift - 2, branch_pos, -1):
            _put(row, pos, "_")
        _put(rows[top + 1], branch_pos, "/")
        for pos in range(branch_pos - 1, left_center + 2, -1):
            _put(rows[top + 1], pos, "_")
        _draw_subtree(node.left, rows, left, top + 2, half - 1)

    if node.right is not None:
        right_center = left + half + 2 + (half - 1) // 2
        branch_pos = center + branch_offset + 1
        for pos in range(center + start_shift + len(text) + 1, branch_pos):
            _put(row, pos, "_")
        _put(rows[top + 1], branch_pos, "\\")
        for pos in range(branch_pos + 1, right_center):
            _put(rows[top + 1], pos, "_")
        _draw_subtree(node.right, rows, left + half + 2, top + 2, half - 1)


def format_tree(root: Optional[Any]) -> str:
    """Return the drawing of the tree rooted at ``root``, one line per row."""
    if root is None:
        return EMPTY + "\n"

    height = _print_height(root)
    width = (4 << height) - 3
    rows = [[" "] * (width + 4) for _ in range(2 * height + 1)]
    _draw_subtree(root, rows, 0, 0, width)
    return "".join("".join(row) + "\n" for row in rows)


def print_tree(root: Optional[Any], out: Optional[TextIO] = None) -> None:
    """Write the drawing of the tree to ``out`` (standard output by default)."""
    (out if out is not None else sys.stdout).write(format_tree(root))