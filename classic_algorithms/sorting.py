"""Comparison sorts over sequences and a plain text rendering of values."""

from __future__ import annotations

from typing import Any, Iterable, List


def bubble_sort(values: Iterable[Any]) -> List[Any]:
    """Return a new list sorted ascending by repeated adjacent swaps."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for i in range(end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def _merge(left: List[Any], right: List[Any]) -> List[Any]:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> List[Any]:
    """Return a new list sorted ascending; equal items keep their input order."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def format_values(values: Iterable[Any]) -> str:
    """Values separated by single spaces."""
    return " ".join(str(value) for value in values)