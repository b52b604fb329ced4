"""Logging setup for the odatakit logger hierarchy."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = "WARNING") -> logging.Logger:
    """Attach a single stderr handler to the ``odatakit`` logger."""
    logger = logging.getLogger("odatakit")
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
