"""Command that tokenizes a text file and writes its word statistics and Huffman code."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from contextlib import contextmanager
from typing import Optional, TextIO

from .bst import WordBinSearchTree
from .files import (
    ErrorKind,
    PipelineError,
    base_name_without_txt,
    check_directory,
    check_readable_file,
    check_writable,
)
from .huffman import HuffmanTree
from .scanner import Scanner

DEFAULT_DIRECTORY = "input_output"
WRAP_COLUMNS = 80


@contextmanager
def _output(path: str) -> Iterator[TextIO]:
    try:
        handle = open(path, "w", encoding="utf-8")
    except OSError as exc:
        raise PipelineError(ErrorKind.UNABLE_TO_OPEN_FILE_FOR_WRITING, path) from exc
    with handle:
        try:
            yield handle
        except OSError as exc:
            raise PipelineError(ErrorKind.FAILED_TO_WRITE_FILE, path) from exc


def frequency_lines(counts: Iterable[tuple[str, int]]) -> list[str]:
    """Format ``(word, count)`` pairs by count descending, then word ascending."""
    ordered = sorted(counts, key=lambda pair: (-pair[1], pair[0]))
    return [f"{count:>10} {word}" for word, count in ordered]


def summary_lines(
    tree: WordBinSearchTree, counts: Sequence[tuple[str, int]], total: int
) -> list[str]:
    """Return the statistics lines printed after tokenizing."""
    if counts:
        height, unique = tree.height(), len(tree)
        frequencies = [count for _, count in counts]
        low, high = min(frequencies), max(frequencies)
    else:
        height = unique = low = high = 0
    return [
        f"BST height: {height}",
        f"BST unique words: {unique}",
        f"Total tokens: {total}",
        f"Min frequency: {low}",
        f"Max frequency: {high}",
    ]


def run(directory: str, file_name: str, out: Optional[TextIO] = None) -> None:
    """Process ``directory/file_name`` and write its ``.tokens``, ``.freq``, ``.hdr`` and ``.code`` files."""
    out = sys.stdout if out is None else out
    input_path = f"{directory}/{file_name}"
    base = base_name_without_txt(file_name)
    tokens_path = f"{directory}/{base}.tokens"
    freq_path = f"{directory}/{base}.freq"
    hdr_path = f"{directory}/{base}.hdr"
    code_path = f"{directory}/{base}.code"

    check_directory(directory)
    check_readable_file(input_path)
    for path in (tokens_path, freq_path, hdr_path, code_path):
        check_writable(path)

    words = Scanner(tokens_path).tokenize_to_file(tokens_path)

    tree = WordBinSearchTree()
    tree.bulk_insert(words)
    counts = tree.inorder()
    for line in summary_lines(tree, counts, len(words)):
        out.write(f"{line}\n")

    with _output(freq_path) as handle:
        lines = frequency_lines(counts)
        if not lines:
            handle.write("\n")
        for line in lines:
            handle.write(f"{line}\n")

    huffman = HuffmanTree.build_from_counts(counts)
    with _output(hdr_path) as handle:
        huffman.write_header(handle)
    with _output(code_path) as handle:
        huffman.encode(words, handle, WRAP_COLUMNS)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run on the file named by the single argument, inside ``input_output``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        sys.stderr.write("Usage: wordhuff <filename>\n")
        return 1
    try:
        run(DEFAULT_DIRECTORY, args[0])
    except PipelineError as exc:
        sys.stderr.write(f"{exc.message}\n")
        return exc.exit_code
    return 0