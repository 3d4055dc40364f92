"""Huffman coding over whole words."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Optional, TextIO

from .files import ErrorKind, PipelineError
from .priority_queue import HufNode, PriorityQueue


def _stream_name(out: TextIO) -> str:
    name = getattr(out, "name", "")
    return str(name) if name is not None else ""


class HuffmanTree:
    """A Huffman tree whose leaves are words weighted by their counts."""

    def __init__(self, root: Optional[HufNode] = None) -> None:
        self.root = root

    @classmethod
    def build_from_counts(cls, counts: Iterable[tuple[str, int]]) -> HuffmanTree:
        """Build a tree from ``(word, count)`` pairs; no pairs give an empty tree.

        The two lowest-priority nodes are joined repeatedly, the first one
        extracted becoming the left child. A joined node is keyed by the
        smaller key word of its children.
        """
        leaves = [HufNode.leaf(word, count) for word, count in counts]
        if not leaves:
            return cls()
        queue = PriorityQueue(leaves)
        while len(queue) >= 2:
            first = queue.extract_min()
            second = queue.extract_min()
            key = min(first.key_word, second.key_word)
            queue.insert(
                HufNode.internal(first.freq + second.freq, key, first, second)
            )
        return cls(queue.extract_min())

    def _iter_codes(self) -> Iterator[tuple[str, str]]:
        # Preorder walk: left edges add "0", right edges add "1".
        if self.root is None:
            return
        stack: list[tuple[HufNode, str]] = [(self.root, "")]
        while stack:
            node, path = stack.pop()
            if node.is_leaf():
                yield node.word, path or "0"
                continue
            if node.right is not None:
                stack.append((node.right, path + "1"))
            if node.left is not None:
                stack.append((node.left, path + "0"))

    def assign_codes(self) -> list[tuple[str, str]]:
        """Return ``(word, code)`` pairs in preorder; a lone word gets code ``0``."""
        return list(self._iter_codes())

    def write_header(self, out: TextIO) -> None:
        """Write one ``word code`` line per leaf; an empty tree writes a newline."""
        try:
            if self.root is None:
                out.write("\n")
                return
            for word, code in self._iter_codes():
                out.write(f"{word} {code}\n")
        except (OSError, ValueError) as exc:
            raise PipelineError(ErrorKind.FAILED_TO_WRITE_FILE, _stream_name(out)) from exc

    def encode(self, tokens: Sequence[str], out: TextIO, wrap_cols: int = 80) -> None:
        """Write the code bits of ``tokens``, breaking lines every ``wrap_cols`` bits.

        No tokens write a single newline. A token with no code raises a
        PipelineError of kind ERR_TYPE_NOT_FOUND; bits already written stay.
        """
        codes = dict(self._iter_codes())
        name = _stream_name(out)
        try:
            if not tokens:
                out.write("\n")
                return
            column = 0
            for token in tokens:
                code = codes.get(token)
                if code is None:
                    raise PipelineError(ErrorKind.ERR_TYPE_NOT_FOUND, name)
                pending = code
                while pending:
                    room = wrap_cols - column if wrap_cols > 0 else len(pending)
                    piece, pending = pending[:room], pending[room:]
                    out.write(piece)
                    column += len(piece)
                    if column == wrap_cols:
                        out.write("\n")
                        column = 0
            if column != 0:
                out.write("\n")
        except (OSError, ValueError) as exc:
            raise PipelineError(ErrorKind.FAILED_TO_WRITE_FILE, name) from exc

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path; 0 when empty."""
        if self.root is None:
            return 0
        best = 0
        stack: list[tuple[HufNode, int]] = [(self.root, 1)]
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, depth + 1))
        return best