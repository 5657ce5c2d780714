"""Logging setup for the Employee Management UI.

Loggers live under the ``employee_ui`` namespace (``employee_ui.client``,
``employee_ui.state``); the page configures the parent once and children
propagate to it.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from config import EMS_ENV, LOG_LEVEL, LOGS_PATH

LOG_FORMAT = '%(asctime)s | %(levelname)-7s | %(name)s | %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'


def log_file_for(logs_path: Path, when: datetime | None = None) -> Path:
    """Daily log file inside *logs_path*, e.g. employee_ui_2025-01-15.log."""
    return logs_path / f"employee_ui_{(when or datetime.now()):%Y-%m-%d}.log"


def setup_logger(name: str, logs_path: Path | None = None, level: str | None = None) -> logging.Logger:
    """
    Attach file + console handlers to logger *name* (once per process).

    Args:
        name: Logger name, usually "employee_ui"
        logs_path: Directory for the daily file; defaults to LOGS_PATH
        level: Level name; defaults to LOG_LEVEL

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level or LOG_LEVEL, logging.INFO))

    # Streamlit re-executes the page on every interaction
    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    # Skipped on read-only filesystems
    directory = logs_path or LOGS_PATH
    try:
        directory.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file_for(directory), encoding='utf-8')
    except OSError:
        file_handler = None
    if file_handler is not None:
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Request-level DEBUG lines reach the console only in development
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG if EMS_ENV == "development" else logging.INFO)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger
