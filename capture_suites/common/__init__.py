"""
================================================================================
Capture Suites Common Utilities
================================================================================

Logging setup shared by the framework and the test runner.

Exports:
    - init_logger: Initialize the loguru logger with standard settings

Usage:
    from capture_suites.common import init_logger

    init_logger(level="DEBUG")

================================================================================
"""

import os
import sys
from typing import Optional

from loguru import logger

from capture_suites.framework.config_loader import ConfigLoader


DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

_logger_initialized = False


def init_logger(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    log_file: Optional[str] = None,
    force: bool = False,
) -> None:
    """
    Initializes the loguru logger with standard settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        format_string: Log format string. Uses default if not provided.
        log_file: Optional file path to write logs to.
        force: Re-initialize even if already done.

    Example:
        init_logger()  # Use defaults
        init_logger(level="DEBUG", log_file="logs/suites.log")
    """
    global _logger_initialized

    if _logger_initialized and not force:
        return

    config = ConfigLoader()

    logger.remove()

    level = (level or config.get("logging.level", "INFO")).upper()
    format_string = format_string or config.get("logging.format", DEFAULT_FORMAT)

    logger.add(
        sys.stderr,
        format=format_string,
        level=level,
        colorize=True,
    )

    log_file = log_file or config.get("logging.file")
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        logger.add(
            log_file,
            format=format_string,
            level=level,
            rotation=config.get("logging.rotation", "10 MB"),
            retention=config.get("logging.retention", "7 days"),
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {level}")


__all__ = [
    "DEFAULT_FORMAT",
    "init_logger",
]
