"""Huffman tree construction and prefix-code assignment."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Hashable, Iterable, Iterator, Optional, Tuple, Union

Frequencies = Union[Mapping, Iterable[Tuple[Hashable, int]]]


@dataclass(eq=False)
class HuffmanNode:
    """A Huffman tree node; internal nodes carry no symbol."""

    freq: int
    symbol: Any = None
    left: Optional["HuffmanNode"] = None
    right: Optional["HuffmanNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def build_huffman_tree(frequencies: Frequencies) -> HuffmanNode:
    """Build a Huffman tree from a symbol-to-frequency mapping or (symbol, freq) pairs."""
    pairs = frequencies.items() if isinstance(frequencies, Mapping) else frequencies
    order = itertools.count()
    heap = [(freq, next(order), HuffmanNode(freq, symbol)) for symbol, freq in pairs]
    if not heap:
        raise ValueError("at least one symbol is required")
    heapq.heapify(heap)
    while len(heap) > 1:
        left_freq, _, left = heapq.heappop(heap)
        right_freq, _, right = heapq.heappop(heap)
        total = left_freq + right_freq
        heapq.heappush(heap, (total, next(order), HuffmanNode(total, None, left, right)))
    return heap[0][2]


def _walk(node: Optional[HuffmanNode], prefix: str) -> Iterator[Tuple[Any, str]]:
    if node is None:
        return
    if node.is_leaf:
        yield node.symbol, prefix
        return
    yield from _walk(node.left, prefix + "0")
    yield from _walk(node.right, prefix + "1")


def huffman_codes(frequencies: Frequencies) -> dict:
    """Map each symbol to its code: '0' for a left branch, '1' for a right one."""
    return dict(_walk(build_huffman_tree(frequencies), ""))