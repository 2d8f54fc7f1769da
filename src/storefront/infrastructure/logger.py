"""
Logging configuration for the storefront.

Provides a centralized logger that can be configured via the LOG_LEVEL
environment variable (or a LOG_LEVEL entry in .env).
"""
import logging
import sys
from typing import Optional

from storefront.infrastructure.config import get_env

# Read through config so a LOG_LEVEL set in .env is honoured
LOG_LEVEL = (get_env("LOG_LEVEL", default="INFO") or "INFO").upper()
logger = logging.getLogger("storefront")
logger.setLevel(LOG_LEVEL)

if not logger.handlers:
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(LOG_LEVEL)

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    console_handler.setFormatter(formatter)

    logger.addHandler(console_handler)

# Avoid duplicate lines through the root logger
logger.propagate = False


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Optional name for the logger (will be appended to 'storefront')

    Returns:
        Logger instance
    """
    if name:
        return logging.getLogger(f"storefront.{name}")
    return logger


def set_level(level: str) -> None:
    """Change the level of the package logger and its console handler."""
    level = level.upper()
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)
