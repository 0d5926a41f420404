"""
Logging Configuration
Sets up the package logger used by every 'textdisplay' module.
"""
import logging
import sys
from typing import Optional

from textdisplay.config import LOGGER_NAME

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%H:%M:%S'


def _make_handlers(log_file: Optional[str]) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    return handlers


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route 'textdisplay' records to stdout and, optionally, to a file.

    Safe to call again: previous handlers are replaced, not stacked.

    Args:
        level: Threshold for the logger and all of its handlers.
        log_file: Path of a log file, truncated on setup. None logs to stdout only.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    for handler in _make_handlers(log_file):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info("Logging initialized.")
    return logger
