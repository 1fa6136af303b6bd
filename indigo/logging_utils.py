"""Logging setup for the Indigo entry points.

Engine modules only ask for loggers; the play script and the bot arena decide
the level (``--log-level`` or ``LOG_LEVEL``).
"""

from __future__ import annotations

import logging

LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s | %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    """Route engine messages to stderr at ``level``; unknown names fall back to WARNING."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )


def get_logger(name: str) -> logging.Logger:
    """Return the logger for an engine module, e.g. ``get_logger(__name__)``."""
    return logging.getLogger(name)
