"""Logging setup for picker sessions.

The terminal is in raw mode while the picker runs, so records only ever go
to a file. Without a configured file the package logger stays silent.
"""

from __future__ import annotations

import logging
from pathlib import Path

PACKAGE_LOGGER = "fuzzypick"
LOG_FORMAT = "%(levelname)s - %(message)s"


def configure_logging(log_file: Path | None, level: int = logging.INFO) -> logging.Handler | None:
    """Attach a file handler to the package logger when ``log_file`` is set.

    Returns the handler so callers (and tests) can detach it again.
    """
    if log_file is None:
        return None
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
