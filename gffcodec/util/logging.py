"""
MIT License

Logging setup shared by the I/O layer and the command line.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

_LOGGER: Optional[logging.Logger] = None

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def get_logger(name: str = "gffcodec") -> logging.Logger:
    """Return the package logger, attaching a stderr handler on first use."""
    global _LOGGER
    if _LOGGER is None:
        logger = logging.getLogger(name)
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        _LOGGER = logger
    return _LOGGER


def set_verbosity(quiet: bool = False, verbose: bool = False) -> None:
    """Adjust the package log level from command-line flags."""
    level = logging.INFO
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    get_logger().setLevel(level)


__all__ = ["get_logger", "set_verbosity"]
