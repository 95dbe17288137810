"""First pass: corpus-wide word frequency counting."""

from __future__ import annotations

import logging
from collections import Counter
from typing import BinaryIO, Hashable, Iterable

from .chunks import iter_chunks
from .digest import TokenKey, digest_key

logger = logging.getLogger(__name__)


def rewind(stream: BinaryIO) -> None:
    """Seek *stream* back to its start so it can be read again by the next pass.

    Raises:
        OSError: If the stream is not seekable.
    """
    stream.seek(0)


def count_words(
    sources: Iterable[BinaryIO],
    max_line_length: int = 1000,
    key: TokenKey = digest_key,
    merge_lines: bool = False,
) -> Counter[Hashable]:
    """Count every whitespace-delimited token over all *sources*.

    Input is read in the same records the clustering pass uses (see
    ``iter_chunks``): a line, or a merged record with *merge_lines*. Records
    longer than *max_line_length* bytes are skipped entirely, so they never
    reach either table. Tokens are keyed by ``key(token)``: a 64-bit digest
    by default.

    Read errors propagate to the caller.
    """
    word_freq: Counter[Hashable] = Counter()

    for stream in sources:
        rewind(stream)
        for chunk in iter_chunks(stream, merge_lines, max_line_length):
            for token in chunk.split():
                word_freq[key(token)] += 1

    return word_freq
