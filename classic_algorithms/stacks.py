"""LIFO stack with an optional capacity limit."""

from __future__ import annotations

from typing import Any, Iterator, Optional


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when popping or peeking an empty stack."""


class Stack:
    """Stack holding at most ``capacity`` items; ``None`` means no limit."""

    def __init__(self, capacity: Optional[int] = 100) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the bottom of the stack to the top."""
        return iter(list(self._items))

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return self.capacity is not None and len(self._items) >= self.capacity

    def push(self, item: Any) -> None:
        if self.is_full():
            raise StackOverflowError("stack is full")
        self._items.append(item)

    def pop(self) -> Any:
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1]