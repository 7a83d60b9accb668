"""Logging setup for the calculator app."""

from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s [%(levelname)-8s] %(name)s: %(message)s"

_NOISY_LOGGERS = [
    "uvicorn.access",
    "watchfiles",
    "engineio",
    "socketio",
]


def setup_logging(level: str = "INFO") -> None:
    """Send all records to stderr with one shared format.

    Args:
        level: Root log level (e.g. "DEBUG", "INFO", "WARNING").
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))

    root = logging.getLogger()
    root.setLevel(level.upper())

    # Replace earlier handlers so repeated setup does not duplicate output
    root.handlers.clear()
    root.addHandler(handler)

    for logger_name in _NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
