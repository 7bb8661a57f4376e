"""Linked lists: one kept in a fixed node pool, and pointer nodes with selection sort."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional

_NIL = -1


class PoolExhaustedError(Exception):
    """Raised when the node pool has no free node left."""


class ArrayLinkedList:
    """Singly linked list whose nodes live in a fixed-size pool addressed by index."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._data: list = [None] * capacity
        self._next: list = [i + 1 for i in range(capacity)]
        if capacity:
            self._next[-1] = _NIL
        self._head = _NIL
        self._avail = 0 if capacity else _NIL
        self._size = 0

    def _get_node(self) -> int:
        if self._avail == _NIL:
            raise PoolExhaustedError("no free node left in the pool")
        index = self._avail
        self._avail = self._next[index]
        return index

    def _indices(self) -> Iterator[int]:
        index = self._head
        while index != _NIL:
            yield index
            index = self._next[index]

    def __iter__(self) -> Iterator[Any]:
        return (self._data[index] for index in self._indices())

    def __len__(self) -> int:
        return self._size

    def insert_at_beginning(self, value: Any) -> None:
        index = self._get_node()
        self._data[index] = value
        self._next[index] = self._head
        self._head = index
        self._size += 1

    def insert_at_end(self, value: Any) -> None:
        if self._head == _NIL:
            self.insert_at_beginning(value)
            return
        index = self._get_node()
        *_, tail = self._indices()
        self._data[index] = value
        self._next[index] = _NIL
        self._next[tail] = index
        self._size += 1

    def display(self) -> str:
        """Values joined by '->' and ending in '-1', the end marker."""
        return "".join(f"{value}->" for value in self) + str(_NIL)


@dataclass(eq=False)
class ListNode:
    """A singly linked list node."""

    data: Any
    link: Optional["ListNode"] = None


def from_iterable(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a linked list in the given order; return its head (None when empty)."""
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.link = node
        tail = node
    return head


def to_list(head: Optional[ListNode]) -> list:
    result = []
    while head is not None:
        result.append(head.data)
        head = head.link
    return result


def selection_sort_linked_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort by relinking nodes, moving the first smallest remaining node each pass; return the new head."""
    sorted_head: Optional[ListNode] = None
    sorted_tail: Optional[ListNode] = None
    while head is not None:
        min_prev: Optional[ListNode] = None
        min_node = head
        prev, current = head, head.link
        while current is not None:
            if current.data < min_node.data:
                min_prev, min_node = prev, current
            prev, current = current, current.link
        if min_prev is None:
            head = min_node.link
        else:
            min_prev.link = min_node.link
        min_node.link = None
        if sorted_tail is None:
            sorted_head = min_node
        else:
            sorted_tail.link = min_node
        sorted_tail = min_node
    return sorted_head