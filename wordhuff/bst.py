"""A binary search tree that counts word occurrences."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class WordTreeNode:
    """A word with the number of times it was inserted."""

    word: str
    count: int = 1
    left: Optional[WordTreeNode] = None
    right: Optional[WordTreeNode] = None


class WordBinSearchTree:
    """Unbalanced binary search tree keyed by word; duplicates raise the count."""

    def __init__(self) -> None:
        self._root: Optional[WordTreeNode] = None
        self._size = 0

    def insert(self, word: str) -> None:
        """Add one occurrence of ``word``."""
        if self._root is None:
            self._root = WordTreeNode(word)
            self._size += 1
            return
        node = self._root
        while True:
            if word < node.word:
                if node.left is None:
                    node.left = WordTreeNode(word)
                    self._size += 1
                    return
                node = node.left
            elif word > node.word:
                if node.right is None:
                    node.right = WordTreeNode(word)
                    self._size += 1
                    return
                node = node.right
            else:
                node.count += 1
                return

    def bulk_insert(self, words: Iterable[str]) -> None:
        """Insert every word in the given order."""
        for word in words:
            self.insert(word)

    def _find(self, word: str) -> Optional[WordTreeNode]:
        node = self._root
        while node is not None:
            if word < node.word:
                node = node.left
            elif word > node.word:
                node = node.right
            else:
                return node
        return None

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self._find(word) is not None

    def count_of(self, word: str) -> int:
        """Return how often ``word`` was inserted; raise KeyError if never."""
        node = self._find(word)
        if node is None:
            raise KeyError(word)
        return node.count

    def inorder(self) -> list[tuple[str, int]]:
        """Return ``(word, count)`` pairs in ascending word order."""
        result: list[tuple[str, int]] = []
        stack: list[WordTreeNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append((node.word, node.count))
            node = node.right
        return result

    def __len__(self) -> int:
        return self._size

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path; 0 when empty."""
        height = 0
        level = [self._root] if self._root is not None else []
        while level:
            height += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return height