"""Buffer standard input so it can be read by both passes."""

from __future__ import annotations

import shutil
import sys
import tempfile
from typing import BinaryIO, Optional

# Inputs up to this size stay in memory, larger ones roll over to a temp file
SPOOL_MAX_MEMORY = 16 * 1024 * 1024


def spool_stdin(stream: Optional[BinaryIO] = None) -> BinaryIO:
    """Copy *stream* (default: binary stdin) into a rewindable temp file."""
    src = stream if stream is not None else sys.stdin.buffer
    spool = tempfile.SpooledTemporaryFile(max_size=SPOOL_MAX_MEMORY, mode="w+b")
    shutil.copyfileobj(src, spool)
    spool.seek(0)
    return spool
