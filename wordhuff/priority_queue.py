"""Huffman tree nodes and the sorted queue used to combine them."""

from __future__ import annotations

import bisect
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class HufNode:
    """A Huffman tree node; leaves carry a word, internal nodes only a key."""

    word: str
    key_word: str
    freq: int
    left: Optional[HufNode] = None
    right: Optional[HufNode] = None

    @classmethod
    def leaf(cls, word: str, freq: int) -> HufNode:
        return cls(word=word, key_word=word, freq=freq)

    @classmethod
    def internal(
        cls, freq: int, key_word: str, left: HufNode, right: HufNode
    ) -> HufNode:
        return cls(word="", key_word=key_word, freq=freq, left=left, right=right)

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _priority(node: HufNode) -> tuple[int, str]:
    # Higher frequency sorts first; ties by ascending key word.
    return (-node.freq, node.key_word)


class PriorityQueue:
    """Nodes kept sorted so the minimum (lowest frequency) sits at the end."""

    def __init__(self, nodes: Iterable[HufNode]) -> None:
        self._items = sorted(nodes, key=_priority)

    def __len__(self) -> int:
        return len(self._items)

    def find_min(self) -> HufNode:
        """Return the minimum node without removing it."""
        if not self._items:
            raise IndexError("find_min from an empty priority queue")
        return self._items[-1]

    def extract_min(self) -> HufNode:
        """Remove and return the minimum node."""
        if not self._items:
            raise IndexError("extract_min from an empty priority queue")
        return self._items.pop()

    def delete_min(self) -> None:
        """Remove the minimum node, if there is one."""
        if self._items:
            self._items.pop()

    def insert(self, node: HufNode) -> None:
        """Insert ``node`` after every node of equal or higher priority."""
        bisect.insort_right(self._items, node, key=_priority)