"""
Line Reader - Scoped Access to Line-Oriented Input Files.

Opens an input file inside a context manager and yields numbered,
non-blank lines. The handle is closed on every exit path; failures to
open or read the file surface as InputFileError.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterable, Iterator, Tuple, Union

from spreader_detector.domain.errors import InputFileError

logger = logging.getLogger(__name__)

NumberedLine = Tuple[int, str]


def numbered_lines(lines: Iterable[str]) -> Iterator[NumberedLine]:
    """
    Number lines from 1 and drop whitespace-only ones.

    Args:
        lines: Raw lines, with or without trailing newlines

    Yields:
        (line_number, line) with the trailing newline stripped
    """
    for line_number, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        yield line_number, line


def _read_lines(handle: IO[str], path: str) -> Iterator[NumberedLine]:
    try:
        yield from numbered_lines(handle)
    except (OSError, UnicodeDecodeError) as exc:
        raise InputFileError(path, f"cannot be read: {exc}") from exc


@contextmanager
def open_lines(path: Union[str, Path]) -> Iterator[Iterator[NumberedLine]]:
    """
    Open ``path`` for reading and yield an iterator over its numbered lines.

    Raises:
        InputFileError: If the file cannot be opened or read
    """
    path_str = str(path)
    try:
        handle = open(path_str, encoding="utf-8")
    except OSError as exc:
        raise InputFileError(path_str, f"cannot be opened: {exc.strerror}") from exc

    logger.debug(f"Opened input file {path_str}")
    with handle:
        yield _read_lines(handle, path_str)
