"""Plain binary tree with level-order or path-directed insertion and traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class Node:
    """A binary tree node."""

    value: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def _preorder(node: Optional[Node]) -> Iterator[Any]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: Optional[Node]) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _postorder(node: Optional[Node]) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


class BinaryTree:
    """An unordered binary tree."""

    def __init__(self) -> None:
        self.root: Optional[Node] = None

    def insert_level_order(self, value: Any) -> Node:
        """Place value in the first free child slot, scanning breadth-first."""
        new_node = Node(value)
        if self.root is None:
            self.root = new_node
            return new_node
        queue = deque([self.root])
        while queue:
            node = queue.popleft()
            if node.left is None:
                node.left = new_node
                return new_node
            queue.append(node.left)
            if node.right is None:
                node.right = new_node
                return new_node
            queue.append(node.right)
        raise AssertionError("unreachable: a binary tree always has a free slot")

    def insert_at(self, value: Any, path: str) -> Node:
        """Place value at the empty slot reached by following 'l'/'r' steps from the root."""
        directions = list(path)
        invalid = [d for d in directions if d not in ("l", "r")]
        if invalid:
            raise ValueError(f"invalid direction {invalid[0]!r}; use 'l' or 'r'")
        if self.root is None:
            if directions:
                raise ValueError("the tree is empty; the root takes an empty path")
            self.root = Node(value)
            return self.root
        if not directions:
            raise ValueError("the root is already occupied")

        node = self.root
        last = len(directions) - 1
        for step, direction in enumerate(directions):
            attr = "left" if direction == "l" else "right"
            child = getattr(node, attr)
            if child is None:
                if step != last:
                    raise ValueError("path continues past an empty slot")
                new_node = Node(value)
                setattr(node, attr, new_node)
                return new_node
            node = child
        raise ValueError("path ends at an occupied node")

    def breadth_first(self) -> list:
        """Values in level order."""
        result = []
        queue = deque([self.root] if self.root is not None else [])
        while queue:
            node = queue.popleft()
            result.append(node.value)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result

    def preorder(self) -> list:
        return list(_preorder(self.root))

    def inorder(self) -> list:
        return list(_inorder(self.root))

    def postorder(self) -> list:
        return list(_postorder(self.root))

    def morris_inorder(self) -> list:
        """In-order traversal without a stack, by temporarily threading the tree."""
        result = []
        current = self.root
        while current is not None:
            if current.left is None:
                result.append(current.value)
                current = current.right
                continue
            predecessor = current.left
            while predecessor.right is not None and predecessor.right is not current:
                predecessor = predecessor.right
            if predecessor.right is None:
                predecessor.right = current
                current = current.left
            else:
                predecessor.right = None
                result.append(current.value)
                current = current.right
        return result