"""
Package logger for Dirlet.

The level defaults to INFO and can be changed with the DIRLET_LOGLEVEL
environment variable or at runtime through ``logger.setLevel``.
"""

import logging
import os
import sys


LOGGER_NAME = "Dirlet"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _level_from_env() -> int:
    name = os.environ.get("DIRLET_LOGLEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def get_logger() -> logging.Logger:
    """Return the package logger, attaching its handler on first use."""

    log = logging.getLogger(LOGGER_NAME)
    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)
        log.setLevel(_level_from_env())
        log.propagate = False
    return log


logger = get_logger()


__all__ = [
    "LOGGER_NAME",
    "get_logger",
    "logger",
]
