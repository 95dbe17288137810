"""Physical line reading and logical record ("chunk") assembly.

A chunk is one log record. Without merging every physical line is its own
chunk. With merging, lines that are empty or start with whitespace are
continuation lines and get appended to the chunk before them (think stack
traces or wrapped messages). Merged lines are joined with ``b"\\n"``.

A chunk is dropped as soon as it grows past ``max_line_length`` bytes and
the rest of its continuation lines are skipped unbuffered, so the limit
applies to the whole record and also bounds the memory held per record.
"""

from __future__ import annotations

import logging
from typing import BinaryIO, Iterator, Optional

logger = logging.getLogger(__name__)


def iter_lines(stream: BinaryIO) -> Iterator[bytes]:
    """Yield physical lines from *stream* with ``\\n`` / ``\\r\\n`` stripped."""
    for raw in stream:
        if raw.endswith(b"\n"):
            raw = raw[:-1]
            if raw.endswith(b"\r"):
                raw = raw[:-1]
        yield raw


def too_long(buf: bytes, max_line_length: int) -> bool:
    """True if *buf* exceeds *max_line_length* (0 means no limit)."""
    return max_line_length > 0 and len(buf) > max_line_length


def is_continuation(line: bytes) -> bool:
    return not line or line[:1].isspace()


def iter_chunks(stream: BinaryIO, merge_lines: bool = False, max_line_length: int = 1000) -> Iterator[bytes]:
    """Group the physical lines of one source into chunks.

    Args:
        stream: Binary stream positioned at the start of the source.
        merge_lines: Append continuation lines to the preceding chunk.
        max_line_length: Drop chunks longer than this many bytes
            (0 disables the check).

    Yields:
        Each chunk that passed the length check, in input order. A chunk
        may be empty (an empty line with merging off).
    """
    current: Optional[bytearray] = None  # None = Empty state
    # Held chunk outgrew the limit; skip the rest of its continuation lines
    overflow = False

    for line in iter_lines(stream):
        if merge_lines and is_continuation(line) and (current is not None or overflow):
            if overflow:
                continue
            current += b"\n"
            current += line
        else:
            if current is not None:
                yield bytes(current)
            current = bytearray(line)
            overflow = False

        if too_long(current, max_line_length):
            logger.debug("dropping chunk over %d bytes", max_line_length)
            current = None
            overflow = True

    if current is not None:
        yield bytes(current)
