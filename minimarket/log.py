"""Debug log wiring.

Textual owns the terminal, so diagnostics go to an append-only file instead
of stderr.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from minimarket.config import DEBUG_LOG_PATH

LOGGER_NAME = "minimarket"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_debug_log(path: str | Path = DEBUG_LOG_PATH, level: int = logging.DEBUG) -> logging.Logger:
    """Attach a file handler to the package logger once."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    target = Path(path)
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == os.path.abspath(target):
            return logger

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(target, encoding="utf-8")
    except OSError:
        # Logging must never interfere with app flow.
        return logger

    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    return logger
