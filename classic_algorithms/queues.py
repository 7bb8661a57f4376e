"""FIFO queue stored as a circular singly linked list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class _QueueNode:
    data: Any
    next: Optional["_QueueNode"] = None


class CircularQueue:
    """Queue whose rear node links back to the front node."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._front: Optional[_QueueNode] = None
        self._rear: Optional[_QueueNode] = None
        self._size = 0
        for value in values:
            self.enqueue(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Iterate once around the ring, front to rear."""
        node = self._front
        for _ in range(self._size):
            yield node.data
            node = node.next

    def enqueue(self, value: Any) -> None:
        node = _QueueNode(value)
        if self._front is None:
            node.next = node
            self._front = self._rear = node
        else:
            node.next = self._front
            self._rear.next = node
            self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        if self._front is None:
            raise IndexError("dequeue from an empty queue")
        node = self._front
        if self._size == 1:
            self._front = self._rear = None
        else:
            self._front = node.next
            self._rear.next = self._front
        self._size -= 1
        return node.data

    def traverse(self) -> list:
        """Values front to rear, followed by the front value reached again via the ring."""
        values = list(self)
        if self._rear is not None:
            values.append(self._rear.next.data)
        return values