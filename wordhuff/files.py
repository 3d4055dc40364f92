"""Filesystem checks and the error type shared by the pipeline."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from os import PathLike
from pathlib import Path, PurePath
from typing import Union

StrPath = Union[str, "PathLike[str]"]


class ErrorKind(enum.Enum):
    """Kinds of failure; the values double as process exit codes."""

    FILE_NOT_FOUND = 1
    DIR_NOT_FOUND = 2
    UNABLE_TO_OPEN_FILE = 3
    ERR_TYPE_NOT_FOUND = 4
    UNABLE_TO_OPEN_FILE_FOR_WRITING = 5
    FAILED_TO_WRITE_FILE = 6


class PipelineError(Exception):
    """A failure of the word pipeline, tied to the file or directory involved."""

    def __init__(self, kind: ErrorKind, entity: StrPath = "") -> None:
        self.kind = kind
        self.entity = str(entity)
        super().__init__(self.message)

    @property
    def message(self) -> str:
        name = self.entity
        if self.kind is ErrorKind.FILE_NOT_FOUND:
            return f"Error: File {name} doesn't exist. Terminating..."
        if self.kind is ErrorKind.UNABLE_TO_OPEN_FILE:
            return f"Error: Unable to open '{name}'. Terminating..."
        if self.kind is ErrorKind.DIR_NOT_FOUND:
            return f"Error: Directory {name} doesn't exist. Terminating..."
        if self.kind is ErrorKind.UNABLE_TO_OPEN_FILE_FOR_WRITING:
            return f"Error: Unable to open {name} for writing. Terminating..."
        return "Error: Unknown error type. Terminating..."

    @property
    def exit_code(self) -> int:
        """The status a command exits with after reporting this error."""
        if self.kind in (
            ErrorKind.FILE_NOT_FOUND,
            ErrorKind.UNABLE_TO_OPEN_FILE,
            ErrorKind.DIR_NOT_FOUND,
            ErrorKind.UNABLE_TO_OPEN_FILE_FOR_WRITING,
        ):
            return self.kind.value
        return ErrorKind.ERR_TYPE_NOT_FOUND.value


def check_directory(name: StrPath) -> None:
    """Raise unless ``name`` is an existing directory."""
    if not Path(name).is_dir():
        raise PipelineError(ErrorKind.DIR_NOT_FOUND, name)


def check_regular_file(name: StrPath) -> None:
    """Raise unless ``name`` is an existing regular file."""
    if not Path(name).is_file():
        raise PipelineError(ErrorKind.FILE_NOT_FOUND, name)


def check_readable_file(filename: StrPath) -> None:
    """Raise unless ``filename`` is a regular file that can be opened for reading."""
    check_regular_file(filename)
    try:
        with open(filename, "rb"):
            pass
    except OSError as exc:
        raise PipelineError(ErrorKind.UNABLE_TO_OPEN_FILE, filename) from exc


def base_name_without_txt(filename: StrPath) -> str:
    """Return the final path component, dropping a ``.txt`` extension."""
    path = PurePath(filename)
    if path.suffix == ".txt":
        return path.stem
    return path.name


def check_writable(filename: StrPath) -> None:
    """Open ``filename`` for writing, truncating it; raise if that fails."""
    try:
        with open(filename, "w"):
            pass
    except OSError as exc:
        raise PipelineError(ErrorKind.UNABLE_TO_OPEN_FILE_FOR_WRITING, filename) from exc


def write_lines(filename: StrPath, lines: Iterable[str]) -> None:
    """Write each item of ``lines`` on its own line, replacing the file."""
    try:
        handle = open(filename, "w", encoding="utf-8")
    except OSError as exc:
        raise PipelineError(ErrorKind.UNABLE_TO_OPEN_FILE_FOR_WRITING, filename) from exc
    with handle:
        for line in lines:
            try:
                handle.write(f"{line}\n")
            except OSError as exc:
                raise PipelineError(ErrorKind.FAILED_TO_WRITE_FILE, filename) from exc