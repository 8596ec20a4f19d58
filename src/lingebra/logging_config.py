"""
Logging Setup
=============
Handlers for the `lingebra` logger namespace.

Library modules only create child loggers (`logging.getLogger(__name__)`);
nothing is printed until an application calls `setup_logging`.
"""
import logging
import sys
from typing import Optional

from lingebra.config import LOG_DATEFMT, LOG_FORMAT, LOGGER_NAME


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    logger.addHandler(handler)


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route `lingebra` records to stdout and, optionally, to a file.

    Calling it again replaces the handlers installed by a previous call.

    Args:
        level: Threshold for the logger and its handlers.
        log_file: Path of a log file, truncated on setup. None logs to stdout only.

    Returns:
        The `lingebra` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    _attach(logger, logging.StreamHandler(sys.stdout), level)
    if log_file:
        _attach(logger, logging.FileHandler(log_file, mode='w', encoding='utf-8'), level)

    logger.info("Logging initialized.")
    return logger
