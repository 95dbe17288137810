"""Resolve CLI input paths into open binary streams for the core."""

from __future__ import annotations

from contextlib import ExitStack, contextmanager
from typing import BinaryIO, Iterator, List, Sequence

from .file import open_file
from .stdin import spool_stdin


@contextmanager
def open_sources(paths: Sequence[str]) -> Iterator[List[BinaryIO]]:
    """Open every path in *paths* (``-`` for stdin) and close them on exit.

    All paths are opened before anything is read, so a missing file fails
    the run up front.

    Raises:
        RuntimeError: If a path does not exist or is not a regular file.
    """
    with ExitStack() as stack:
        streams: List[BinaryIO] = []
        for p in paths:
            if p == "-":
                streams.append(stack.enter_context(spool_stdin()))
            else:
                streams.append(stack.enter_context(open_file(p)))
        yield streams
