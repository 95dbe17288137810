"""Stderr logging setup for the CLI."""

from __future__ import annotations

import logging
import os
from typing import Optional

from .config import ConfigError

LOG_LEVEL_ENV = "LOGTEMPLATER_LOG_LEVEL"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure stdlib logging (stderr) once.

    Respects env var LOGTEMPLATER_LOG_LEVEL if `level` is None.

    Raises:
        ConfigError: If the level name is not one of ``LOG_LEVELS``.
    """
    lvl = (level or os.environ.get(LOG_LEVEL_ENV) or "WARNING").strip().upper()
    if lvl not in LOG_LEVELS:
        raise ConfigError(f"Unknown log level: {lvl!r} (choose from {', '.join(LOG_LEVELS)})")
    logging.basicConfig(level=getattr(logging, lvl), format=_DEFAULT_FORMAT)
