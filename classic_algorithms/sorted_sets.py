"""Set operations over ascending sequences by a single merging pass."""

from __future__ import annotations

from typing import Any, Iterable, List


def sorted_intersection(a: Iterable[Any], b: Iterable[Any]) -> List[Any]:
    """Items common to two ascending sequences, each match consuming one from each side."""
    left, right = list(a), list(b)
    result = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            i += 1
        elif left[i] > right[j]:
            j += 1
        else:
            result.append(left[i])
            i += 1
            j += 1
    return result


def sorted_union(a: Iterable[Any], b: Iterable[Any]) -> List[Any]:
    """Merge two ascending sequences, emitting a matched pair only once."""
    left, right = list(a), list(b)
    result = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            result.append(left[i])
            i += 1
        elif left[i] > right[j]:
            result.append(right[j])
            j += 1
        else:
            result.append(left[i])
            i += 1
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result