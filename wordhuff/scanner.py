"""Splitting text files into lowercase word tokens."""

from __future__ import annotations

import os
import re
from collections.abc import Iterator
from pathlib import Path

from .files import ErrorKind, PipelineError, StrPath

# ASCII letters with optional internal apostrophes; every other byte separates.
_WORD_PATTERN = re.compile(rb"[A-Za-z]+(?:'[A-Za-z]+)*")


def iter_tokens(data: bytes) -> Iterator[str]:
    """Yield the lowercase word tokens found in raw bytes.

    A token is a run of ASCII letters, possibly joined by single apostrophes
    each followed by a letter. Digits, punctuation, whitespace and non-ASCII
    bytes separate tokens.
    """
    for match in _WORD_PATTERN.finditer(data):
        yield match.group().decode("ascii").lower()


class Scanner:
    """Reads the ``.txt`` file that belongs to a ``.tokens`` path."""

    def __init__(self, input_path: StrPath) -> None:
        path = Path(input_path)
        directory = os.path.dirname(os.fspath(input_path))
        if directory:
            path = Path(directory) / f"{path.stem}.txt"
        self.input_path = path

    def tokenize(self) -> list[str]:
        """Return all tokens of the input file in order."""
        directory = os.path.dirname(os.fspath(self.input_path))
        if directory and not os.path.exists(directory):
            raise PipelineError(ErrorKind.DIR_NOT_FOUND, directory)
        if not self.input_path.exists():
            raise PipelineError(ErrorKind.FILE_NOT_FOUND, self.input_path)
        try:
            data = self.input_path.read_bytes()
        except OSError as exc:
            raise PipelineError(ErrorKind.UNABLE_TO_OPEN_FILE, self.input_path) from exc
        return list(iter_tokens(data))

    def tokenize_to_file(self, output_file: StrPath) -> list[str]:
        """Tokenize, write one token per line to ``output_file`` and return the tokens.

        An empty token list produces a file holding a single newline.
        """
        words = self.tokenize()
        try:
            handle = open(output_file, "w", encoding="ascii")
        except OSError as exc:
            raise PipelineError(
                ErrorKind.UNABLE_TO_OPEN_FILE_FOR_WRITING, output_file
            ) from exc
        with handle:
            try:
                if not words:
                    handle.write("\n")
                else:
                    for word in words:
                        handle.write(f"{word}\n")
            except OSError as exc:
                raise PipelineError(ErrorKind.FAILED_TO_WRITE_FILE, output_file) from exc
        return words