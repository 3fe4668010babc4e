"""Logging configuration.

Diagnostics go to stderr so stdout only carries resolved build settings
for the calling build script to read.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from datetime import datetime

from .config import Config

CONSOLE_FORMAT = ':: %(levelname)s - %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'


def log_file_path(day=None):
    """Daily log file under ``Config.LOGS_DIR``."""
    day = day or datetime.now()
    return Config.LOGS_DIR / f"buildhelper_{day.strftime('%Y%m%d')}.log"


def setup_logger(name="BuildHelper"):
    """Set up a logger writing to stderr and the daily log file."""
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(Config.get_console_log_level())
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    try:
        Config.LOGS_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            str(log_file_path()),
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5
        )
    except OSError as e:
        # Build agents may run with a read-only home
        logger.warning(f"File logging disabled: {e}")
        return logger

    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    logger.addHandler(file_handler)
    return logger
