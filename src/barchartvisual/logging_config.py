"""
Logging Configuration
Sets up the package logger shared by the visual and its host window.
"""
import logging
import os
import sys
from typing import Optional

LOGGER_NAME = "barchartvisual"
DEBUG_ENV_VAR = "BARCHART_DEBUG"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%H:%M:%S'


def level_from_env(default: int = logging.INFO) -> int:
    """
    Returns logging.DEBUG when BARCHART_DEBUG is set to a truthy value.
    """
    raw = os.getenv(DEBUG_ENV_VAR)
    if raw is None:
        return default
    return logging.DEBUG if raw.strip().lower() in {"1", "true", "yes", "on"} else default


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'barchartvisual' logger.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to mirror the console output into.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Re-creating the main window must not stack handlers
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # 1. Console (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # 2. File (optional)
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(f"Logging initialized at {logging.getLevelName(level)}.")
    return logger
