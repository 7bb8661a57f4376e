"""Self-balancing AVL binary search tree."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterable, Optional


@dataclass(eq=False)
class _Node:
    data: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


def _height(node: Optional[_Node]) -> int:
    if node is None:
        return 0
    return 1 + max(_height(node.left), _height(node.right))


def _balance(node: _Node) -> int:
    return _height(node.left) - _height(node.right)


def _rotate_right(root: _Node) -> _Node:
    pivot = root.left
    root.left = pivot.right
    pivot.right = root
    return pivot


def _rotate_left(root: _Node) -> _Node:
    pivot = root.right
    root.right = pivot.left
    pivot.left = root
    return pivot


def _insert(root: Optional[_Node], item: Any) -> _Node:
    if root is None:
        return _Node(item)
    if item < root.data:
        root.left = _insert(root.left, item)
    else:
        root.right = _insert(root.right, item)

    balance = _balance(root)
    if balance > 1:
        if _balance(root.left) < 0:
            root.left = _rotate_left(root.left)
        return _rotate_right(root)
    if balance < -1:
        if _balance(root.right) > 0:
            root.right = _rotate_right(root.right)
        return _rotate_left(root)
    return root


def _min_node(root: _Node) -> _Node:
    while root.left is not None:
        root = root.left
    return root


def _delete(root: Optional[_Node], key: Any) -> Optional[_Node]:
    if root is None:
        return None
    if key < root.data:
        root.left = _delete(root.left, key)
    elif key > root.data:
        root.right = _delete(root.right, key)
    else:
        if root.right is None:
            return root.left
        if root.left is None:
            return root.right
        successor = _min_node(root.right)
        root.data = successor.data
        root.right = _delete(root.right, successor.data)
    return root


class AVLTree:
    """AVL tree that rebalances on insertion; deletion removes without rebalancing."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._root: Optional[_Node] = None
        for item in items:
            self.insert(item)

    def insert(self, item: Any) -> None:
        """Insert an item; equal items go to the right subtree."""
        self._root = _insert(self._root, item)

    def delete(self, key: Any) -> None:
        """Remove one occurrence of key, if present."""
        self._root = _delete(self._root, key)

    def level_order(self) -> list:
        """Return the stored items in breadth-first order."""
        result = []
        queue = deque([self._root] if self._root is not None else [])
        while queue:
            node = queue.popleft()
            result.append(node.data)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        return _height(self._root)