"""Logging setup for the command line tool.

Library modules only call :func:`get_logger`; handlers are attached by
:func:`setup_logging`, which the CLI calls once at startup.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class _GeocoderHandler(logging.StreamHandler):
    """Marks the handler installed by :func:`setup_logging`."""


def setup_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> logging.Handler:
    """Attach a console handler to the root logger unless one is already installed.

    Args:
        level: Log level name; unknown names fall back to INFO
        stream: Destination, stderr by default so stdout only carries results

    Returns:
        The installed (or previously installed) handler
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        if isinstance(handler, _GeocoderHandler):
            return handler

    log_level = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    handler = _GeocoderHandler(stream or sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    root_logger.setLevel(log_level)
    root_logger.addHandler(handler)
    root_logger.debug(f"Logging configured with level: {logging.getLevelName(log_level)}")
    return handler


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
