"""
Logging configuration for gelato-tasks
"""

import logging
import sys

from gelato_tasks.config import LOG_FORMAT, LOG_LEVEL, LOG_LEVELS


def setup_logger(name: str = "gelato_tasks", level: str = LOG_LEVEL) -> logging.Logger:
    """
    Set up logger with consistent formatting

    Args:
        name: Logger name
        level: Level name, e.g. "DEBUG"

    Returns:
        Configured logger instance
    """
    if level.upper() not in LOG_LEVELS:
        raise ValueError(f"unknown log level {level!r}, expected one of {LOG_LEVELS}")
    logger = logging.getLogger(name)

    # Only add handler if not already present
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    logger.setLevel(getattr(logging, level.upper()))
    return logger


def get_logger(name: str) -> logging.Logger:
    """Child of the package logger, so setup_logger() configures it."""
    if not name.startswith("gelato_tasks"):
        name = f"gelato_tasks.{name}"
    return logging.getLogger(name)
