"""
Logging Configuration Module for the Knowledge Scoper

Configures loguru for console logging and, optionally, rotating log files in
the logs/ directory with consistent formatting across the parser and CLI.
"""

import sys
from datetime import datetime
from typing import Any, Optional
from loguru import logger as _logger

from src.config import (
    LOG_LEVEL,
    LOG_TO_FILE,
    LOGS_DIR,
)


# File format: Full timestamp with source location
FILE_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"

# Console format: Short timestamp without source location
CONSOLE_LOG_FORMAT = "{time:HH:mm:ss} | {level: <8} | {message}"


def setup_logger(level: Optional[str] = None, log_to_file: Optional[bool] = None) -> Any:
    """
    Configure loguru logger with console output and optional file outputs.

    When file logging is enabled, creates two log files:
    1. scoper_{timestamp}.log - All log messages (10MB rotation, keep 10 files)
    2. errors_{timestamp}.log - Error/Critical only (5MB rotation, keep 20 files)

    Args:
        level: Override for LOG_LEVEL
        log_to_file: Override for LOG_TO_FILE

    Returns:
        Configured loguru logger instance

    Example:
        >>> from src.utils.logging_config import setup_logger
        >>> logger = setup_logger()
        >>> logger.info("Parsing knowledge file")
    """
    level = level or LOG_LEVEL
    if log_to_file is None:
        log_to_file = LOG_TO_FILE

    # Remove default handler to avoid duplicate logs
    _logger.remove()

    # Console goes to stderr so stdout stays clean for CLI output
    _logger.add(
        sys.stderr,
        format=CONSOLE_LOG_FORMAT,
        level=level,
        colorize=True,
    )

    if not log_to_file:
        return _logger

    LOGS_DIR.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    # Add main log file handler (all messages)
    scoper_log = LOGS_DIR / f"scoper_{timestamp}.log"
    _logger.add(
        scoper_log,
        format=FILE_LOG_FORMAT,
        level=level,
        rotation="10 MB",
        retention=10,
        compression="zip",
        enqueue=True,  # Thread-safe logging
    )

    # Add error log file handler (errors and critical only)
    error_log = LOGS_DIR / f"errors_{timestamp}.log"
    _logger.add(
        error_log,
        format=FILE_LOG_FORMAT,
        level="ERROR",
        rotation="5 MB",
        retention=20,
        compression="zip",
        enqueue=True,
    )

    _logger.info(f"Logging configured: {scoper_log}")
    _logger.info(f"Error logging configured: {error_log}")

    return _logger


def get_logger(name: str) -> Any:
    """
    Get a logger instance with context binding for a specific module.

    Args:
        name: Name identifier for the logger context (typically module name)

    Returns:
        Logger instance bound to the given name

    Example:
        >>> from src.utils.logging_config import get_logger
        >>> logger = get_logger("scope_parser")
        >>> logger.info("Parsed 3 scopes")
    """
    return _logger.bind(name=name)


def log_step_start(step_name: str) -> None:
    """
    Log the start of a CLI run with consistent formatting.

    Args:
        step_name: Name of the run (e.g., "Scope parsing: rules.txt")
    """
    _logger.info("=" * 80)
    _logger.info(f"STARTING: {step_name}")
    _logger.info("=" * 80)


def log_step_complete(step_name: str, duration: float) -> None:
    """
    Log the completion of a CLI run with duration.

    Args:
        step_name: Name of the run
        duration: Duration in seconds (use time.time() difference)
    """
    _logger.success(f"COMPLETED: {step_name}")
    _logger.info(f"Duration: {duration:.3f} seconds")
    _logger.info("=" * 80)


# Export the logger instance for direct use
logger = _logger


__all__ = [
    "setup_logger",
    "get_logger",
    "log_step_start",
    "log_step_complete",
    "logger",
]
