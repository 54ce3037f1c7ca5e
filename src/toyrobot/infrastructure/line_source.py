"""Command line sources: files in argument order, or a stream.

Lines are trimmed and blank lines skipped.  Files are opened one at a
time as the previous one is exhausted, so a missing second file is only
discovered after the first has been fully consumed.  Undecodable bytes
become U+FFFD, so a garbled line fails to parse like any other bad line.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from pathlib import Path
from typing import TextIO

from toyrobot.domain.errors import StartupError


def iter_command_lines(
    stream: Iterable[str],
    *,
    prompt: Callable[[], None] | None = None,
) -> Iterator[str]:
    """Yield trimmed, non-empty lines from *stream*.

    *prompt* is called before each read (interactive sessions).
    """
    lines = iter(stream)
    while True:
        if prompt is not None:
            prompt()
        try:
            raw = next(lines)
        except StopIteration:
            return
        line = raw.strip()
        if line:
            yield line


def iter_file_lines(paths: Iterable[Path]) -> Iterator[str]:
    """Yield trimmed, non-empty lines from each file in turn.

    Raises:
        StartupError: when a file cannot be opened.  Lines of earlier
            files have already been yielded by then.
    """
    for path in paths:
        try:
            handle: TextIO = path.open(encoding="utf-8", errors="replace")
        except OSError as exc:
            msg = f"Failed to open file {path} for reading: {exc.strerror or exc}"
            raise StartupError(msg) from exc
        with handle:
            yield from iter_command_lines(handle)
