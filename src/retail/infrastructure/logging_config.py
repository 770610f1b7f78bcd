"""Logging setup for the command line entry point.

Library code only creates module loggers under ``retail``; handlers are
attached here so embedding applications keep control of their own output.
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "retail"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: int = logging.WARNING) -> logging.Logger:
    """Send ``retail`` log records at *level* and above to stderr.

    Any handler from a previous call is replaced, so the logger always
    has exactly one handler bound to the current ``sys.stderr``.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    handler.setLevel(level)
    logger.addHandler(handler)

    return logger
