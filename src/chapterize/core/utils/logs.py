"""Logging setup for the chapterize package

Modules log through `logging.getLogger(__name__)`; the CLI calls
`setup_logging` once with the configured level.
"""

import logging
import sys


LOG_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"
ROOT_LOGGER = "chapterize"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a single stderr handler to the package logger at the given level."""
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
