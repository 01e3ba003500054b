# -*- coding: utf-8 -*-
"""
Logging configuration.

One application logger ("listings") with a rotating file handler and a
console handler; modules get children of it through get_logger(__name__).
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

_logger: Optional[logging.Logger] = None

APP_LOGGER_NAME = "listings"


def setup_logger(console_level: Optional[str] = None) -> logging.Logger:
    """
    Setup application logger with file and console handlers.

    Args:
        console_level: Level name for the console handler; defaults to
            Config.LOG_CONSOLE_LEVEL.
    """
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    Config.LOGS_DIR.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()

    file_handler = RotatingFileHandler(
        Config.LOG_PATH,
        maxBytes=Config.LOG_MAX_BYTES,
        backupCount=Config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(
        logging.getLevelName((console_level or Config.LOG_CONSOLE_LEVEL).upper())
    )
    console_handler.setFormatter(logging.Formatter("%(levelname)-8s | %(name)s | %(message)s"))
    logger.addHandler(console_handler)

    _logger = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger for a module.
    """
    global _logger

    if _logger is None:
        _logger = setup_logger()

    return _logger.getChild(name)
