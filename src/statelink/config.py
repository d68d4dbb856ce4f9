"""
Configuration
=============
Central registry for global constants used by the logging setup and the
demo window.

Environment overrides
---------------------
STATELINK_LOG_LEVEL: name of the logging level (DEBUG, INFO, ...). Default INFO.
STATELINK_LOG_FILE: optional path; when set, logs are also written there.

Exports:
    LOGGER_NAME (str): Namespace of the package logger.
    DEFAULT_LOG_LEVEL (int): Level resolved from STATELINK_LOG_LEVEL.
    LOG_FILE (str | None): Path resolved from STATELINK_LOG_FILE.
"""
import logging
import os
from typing import Optional


def get_log_level(name: Optional[str], default: int = logging.INFO) -> int:
    """
    Resolve a level name such as "debug" to its logging constant.
    Unknown or empty names fall back to `default`.
    """
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    if isinstance(level, int):
        return level
    return default


# Logging
LOGGER_NAME: str = "statelink"
LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT: str = '%H:%M:%S'
DEFAULT_LOG_LEVEL: int = get_log_level(os.environ.get("STATELINK_LOG_LEVEL"))
LOG_FILE: Optional[str] = os.environ.get("STATELINK_LOG_FILE") or None

# Demo window
DEMO_WINDOW_TITLE: str = "statelink demo"
DEMO_INITIAL_VALUE: int = 5
DEMO_SLIDER_RANGE: tuple[int, int] = (0, 100)
