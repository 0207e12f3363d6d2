"""Logging setup.

Raw mode owns the terminal, so log records only ever go to a file.
Without a configured path the package logger gets a ``NullHandler``.
"""

from __future__ import annotations

import logging
from pathlib import Path

LOGGER_NAME = "youreditor"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(log_path: Path | None) -> logging.Logger:
    """Point the package logger at ``log_path``, or silence it when ``None``."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False

    if log_path is None:
        logger.addHandler(logging.NullHandler())
        return logger

    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path, encoding="utf-8")
    except OSError:
        # An unwritable log location must not keep the viewer from starting.
        logger.addHandler(logging.NullHandler())
        return logger
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return logger
