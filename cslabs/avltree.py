"""A self-balancing AVL tree mapping keys to values."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

from cslabs.printtree import format_tree


class _Node:
    __slots__ = ("key", "value", "left", "right", "height")

    def __init__(self, key: Any, value: Any) -> None:
        self.key = key
        self.value = value
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None
        self.height = 0


def _height(node: Optional[_Node]) -> int:
    return -1 if node is None else node.height


def _update_height(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


class AVLTree:
    """An AVL tree; every rotation it performs is logged by name to ``out``.

    Equal keys are stored to the right, so duplicates are kept.
    """

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self._root: Optional[_Node] = None
        self._out = out

    # public interface

    def insert(self, key: Any, value: Any) -> None:
        """Insert ``key`` with ``value``, rebalancing on the way back up."""
        self._root = self._insert(self._root, key, value)

    def remove(self, key: Any) -> None:
        """Remove ``key``; a missing key leaves the contents unchanged."""
        self._root = self._remove(self._root, key)

    def find(self, key: Any) -> Any:
        """Return the value stored for ``key``, or ``None`` when absent."""
        node = self._root
        while node is not None:
            if key == node.key:
                return node.value
            node = node.left if key < node.key else node.right
        return None

    def clear(self) -> None:
        """Remove every node."""
        self._root = None

    def render(self) -> str:
        """Return the ASCII drawing of the tree."""
        return format_tree(self._root)

    def print(self, out: Optional[TextIO] = None) -> None:
        """Write the drawing of the tree to ``out`` (standard output by default)."""
        (out if out is not None else sys.stdout).write(self.render())

    def set_output(self, out: Optional[TextIO]) -> None:
        """Send rotation names to ``out`` from now on."""
        self._out = out

    def __copy__(self) -> "AVLTree":
        clone = AVLTree()
        clone._root = self._copy(self._root)
        return clone

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in key order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key, node.value
            node = node.right

    def __len__(self) -> int:
        return sum(1 for _ in self)

    # internals

    def _log(self, name: str) -> None:
        out = self._out if self._out is not None else sys.stdout
        out.write(name + "\n")

    def _copy(self, node: Optional[_Node]) -> Optional[_Node]:
        if node is None:
            return None
        new = _Node(node.key, node.value)
        new.height = node.height
        new.left = self._copy(node.left)
        new.right = self._copy(node.right)
        return new

    def _insert(self, node: Optional[_Node], key: Any, value: Any) -> _Node:
        if node is None:
            node = _Node(key, value)
        elif key < node.key:
            node.left = self._insert(node.left, key, value)
        else:
            node.right = self._insert(node.right, key, value)
        return self._rebalance(node)

    def _remove(self, node: Optional[_Node], key: Any) -> Optional[_Node]:
        if node is None:
            return None
        if key < node.key:
            node.left = self._remove(node.left, key)
            return self._rebalance(node)
        if key > node.key:
            node.right = self._remove(node.right, key)
            return self._rebalance(node)

        if node.left is None and node.right is None:
            return None
        if node.left is not None and node.right is not None:
            pred = node.left
            while pred.right is not None:
                pred = pred.right
            pred.key, node.key = node.key, pred.key
            pred.value, node.value = node.value, pred.value
            node.left = self._remove(node.left, key)
        else:
            node = node.left if node.left is not None else node.right
        return self._rebalance(node)

    def _rotate_left(self, t: _Node) -> _Node:
        self._log("rotateLeft")
        new_root = t.right
        t.right = new_root.left
        new_root.left = t
        _update_height(t)
        _update_height(new_root)
        return new_root

    def _rotate_right(self, t: _Node) -> _Node:
        self._log("rotateRight")
        new_root = t.left
        t.left = new_root.right
        new_root.right = t
        _update_height(t)
        _update_height(new_root)
        return new_root

    def _rotate_left_right(self, t: _Node) -> _Node:
        self._log("rotateLeftRight")
        t.left = self._rotate_left(t.left)
        return self._rotate_right(t)

    def _rotate_right_left(self, t: _Node) -> _Node:
        self._log("rotateRightLeft")
        t.right = self._rotate_right(t.right)
        return self._rotate_left(t)

    def _rebalance(self, node: _Node) -> _Node:
        balance = _height(node.left) - _height(node.right)
        if balance > 1:
            if _height(node.left.left) > _height(node.left.right):
                return self._rotate_right(node)
            return self._rotate_left_right(node)
        if balance < -1:
            if _height(node.right.right) > _height(node.right.left):
                return self._rotate_left(node)
            return self._rotate_right_left(node)
        _update_height(node)
        return node