"""Fixed-capacity binary min-heap."""

from __future__ import annotations

from typing import Any


class HeapOverflowError(Exception):
    """Raised when inserting into a full heap."""


class MinHeap:
    """Array-backed min-heap with a fixed capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list = []

    def __len__(self) -> int:
        return len(self._items)

    def _swap(self, i: int, j: int) -> None:
        self._items[i], self._items[j] = self._items[j], self._items[i]

    def _sift_up(self, index: int) -> None:
        while index:
            parent = (index - 1) // 2
            if self._items[parent] <= self._items[index]:
                break
            self._swap(index, parent)
            index = parent

    def _heapify(self, index: int) -> None:
        size = len(self._items)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and self._items[child] < self._items[smallest]:
                    smallest = child
            if smallest == index:
                return
            self._swap(index, smallest)
            index = smallest

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"heap index {index} out of range")

    def insert_key(self, key: Any) -> None:
        if len(self._items) >= self.capacity:
            raise HeapOverflowError("could not insert key: heap is full")
        self._items.append(key)
        self._sift_up(len(self._items) - 1)

    def decrease_key(self, index: int, new_value: Any) -> None:
        """Lower the key at index to new_value."""
        self._check_index(index)
        if new_value > self._items[index]:
            raise ValueError("new value is larger than the current key")
        self._items[index] = new_value
        self._sift_up(index)

    def extract_min(self) -> Any:
        if not self._items:
            raise IndexError("extract from an empty heap")
        root = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._heapify(0)
        return root

    def delete_key(self, index: int) -> None:
        """Remove the key stored at index."""
        self._check_index(index)
        while index:
            parent = (index - 1) // 2
            self._swap(index, parent)
            index = parent
        self.extract_min()

    def get_min(self) -> Any:
        if not self._items:
            raise IndexError("empty heap has no minimum")
        return self._items[0]