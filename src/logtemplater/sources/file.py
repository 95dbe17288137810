"""Open a plain log file for binary reading."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO


def open_file(path: str) -> BinaryIO:
    """Open the file at *path* in binary mode.

    Raises:
        RuntimeError: If *path* does not exist or is a directory.
    """
    p = Path(path)
    if not p.exists():
        raise RuntimeError(f"File not found: {p}")
    if p.is_dir():
        raise RuntimeError(f"Not a file: {p}")
    return p.open("rb")
