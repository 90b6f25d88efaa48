# -*- coding: utf-8 -*-
"""
Logging configuration.

All modules log through children of the "storefront" logger:
    logger = get_logger(__name__)

The rotating file under Config.LOGS_DIR receives everything from DEBUG up
(request bodies included); the console shows Config.LOG_LEVEL and above.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

ROOT_LOGGER_NAME = "storefront"

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(message)s"

_logger: Optional[logging.Logger] = None


def setup_logger() -> logging.Logger:
    """(Re)configure the storefront logger from Config."""
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    Config.LOGS_DIR.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(logging.DEBUG)
    root.handlers.clear()

    file_handler = RotatingFileHandler(
        Config.LOG_PATH,
        maxBytes=Config.LOG_MAX_BYTES,
        backupCount=Config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=Config.DATETIME_FORMAT))
    root.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, Config.LOG_LEVEL, logging.INFO))
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root.addHandler(console_handler)

    _logger = root
    return root


def get_logger(name: str) -> logging.Logger:
    """Child of the storefront logger; configures logging on first use."""
    if _logger is None:
        setup_logger()
    return _logger.getChild(name)
