"""Trie over lowercase ASCII words."""

from __future__ import annotations

from dataclasses import dataclass, field
from string import ascii_lowercase

_ALPHABET = frozenset(ascii_lowercase)


@dataclass(eq=False)
class _TrieNode:
    children: dict = field(default_factory=dict)
    is_end: bool = False


def _validate(word: str) -> None:
    bad = [ch for ch in word if ch not in _ALPHABET]
    if bad:
        raise ValueError(f"character {bad[0]!r} is not a lowercase letter a-z")


class Trie:
    """Prefix tree storing words made of the letters a-z."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: str) -> None:
        _validate(word)
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
        node.is_end = True

    def search(self, word: str) -> bool:
        """Whether word was inserted as a whole word."""
        _validate(word)
        node = self._root
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return False
        return node.is_end

    def delete(self, word: str) -> bool:
        """Remove word, pruning nodes no longer used; return whether it was present."""
        _validate(word)
        path = [self._root]
        node = self._root
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return False
            path.append(node)
        if not node.is_end:
            return False
        node.is_end = False
        for parent, ch in zip(reversed(path[:-1]), reversed(word)):
            child = parent.children[ch]
            if child.is_end or child.children:
                break
            del parent.children[ch]
        return True