"""Console and file logging for scripts that build table frames.

The library itself only attaches a ``NullHandler``; call ``setup_logging``
from an example script or notebook to see build and BOM messages.
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "build123_tubeframe"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def _reset_handlers(logger: logging.Logger) -> None:
    # Only this logger's own handlers; ancestors are left alone.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Send the package's log records to stdout and, optionally, to ``log_file``.

    Calling it again replaces the handlers from the previous call, so a
    re-run notebook cell does not print every message twice.

    Args:
        level: Threshold for the package logger and its handlers
        log_file: Path of a log file, overwritten on each call
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    if logger.handlers:
        _reset_handlers(logger)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
