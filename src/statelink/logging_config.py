"""
Logging Configuration
Sets up the package logger for statelink and applications embedding it.
"""
import logging
import sys
from typing import Optional

from statelink import config


def setup_logging(level: int = config.DEFAULT_LOG_LEVEL, log_file: Optional[str] = config.LOG_FILE) -> None:
    """
    Configures the logger for the 'statelink' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
    """
    logger = logging.getLogger(config.LOGGER_NAME)
    logger.setLevel(level)

    # Drop handlers from a previous call so records are not duplicated
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    formatter = logging.Formatter(config.LOG_FORMAT, datefmt=config.LOG_DATEFMT)
    console_handler.setFormatter(formatter)

    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized.")
