"""Argument sources: in-memory sequences and line-delimited argument files."""

from __future__ import annotations

import logging
import os
import pathlib
from typing import List, Sequence, Tuple, Union

_LOG = logging.getLogger(__name__)

FILE_SENTINEL = "@"

PathLike = Union[str, "os.PathLike[str]"]


class UnreadableArgumentFile(OSError):
    """Raised when an argument file cannot be opened, read or decoded."""

    def __init__(self, path: PathLike, reason: str) -> None:
        super().__init__(f"Cannot read argument file {os.fspath(path)!r}: {reason}")
        self.path = pathlib.Path(path)
        self.reason = reason


def read_argument_file(path: PathLike) -> List[str]:
    """Return the lines of *path*, one argument per line.

    Every line becomes an argument, empty lines included. A line terminator
    at the end of the file does not add an extra empty argument.
    """

    file_path = pathlib.Path(path)
    try:
        with file_path.open("r", encoding="utf-8", newline=None) as handle:
            content = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise UnreadableArgumentFile(file_path, str(exc)) from exc

    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    _LOG.debug("Loaded %d arguments from %s", len(lines), file_path)
    return lines


def indirect_path(argv: Sequence[str]) -> str | None:
    """Return the file named by a leading ``@path`` argument, if any."""

    if not argv:
        return None
    first = argv[0]
    if not first or first[0] != FILE_SENTINEL:
        return None
    return first[1:]


def resolve_arguments(argv: Sequence[str]) -> Tuple[str, ...]:
    """Return the effective argument vector for *argv*.

    When the first argument is ``@path`` the whole vector is replaced by the
    lines of that file; otherwise *argv* is used verbatim.
    """

    path = indirect_path(argv)
    if path is None:
        return tuple(argv)
    _LOG.debug("Reading arguments indirectly from %s", path)
    return tuple(read_argument_file(path))


def load_source(source: Union[Sequence[str], PathLike]) -> Tuple[str, ...]:
    """Resolve either an argument sequence or a file path into a vector."""

    if isinstance(source, (str, os.PathLike)):
        return tuple(read_argument_file(source))
    return resolve_arguments(list(source))
