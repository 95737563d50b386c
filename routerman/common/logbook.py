"""
Diagnostic log file for routerman.

Operator-facing output goes through the colored helpers in ``colors``; this
module only wires the ``routerman`` logger to a rotating file so mutations and
fatal session errors leave a trail.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOGGER_NAME = "routerman"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(log_file: Optional[Path], debug: bool = False) -> logging.Logger:
    """
    Attach a rotating file handler to the routerman logger.

    Args:
        log_file: Destination file, or None to keep logging disabled
        debug: Log at DEBUG instead of INFO

    Returns:
        The configured ``routerman`` logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_file is None:
        logger.addHandler(logging.NullHandler())
        return logger

    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(log_file, maxBytes=1_000_000, backupCount=5)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
