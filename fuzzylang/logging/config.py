"""
Logging configuration for fuzzylang.

This module handles the centralized logging configuration including:
- Console and rotating file output handlers
- Global debug flag mechanism
- Logger retrieval under the package logger
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Union

from fuzzylang.logging.context import get_context_enricher

PACKAGE_LOGGER = "fuzzylang"
LOG_FILE_NAME = "fuzzylang.log"

# Global debug flag
_DEBUG_MODE = False

# Default log format with detailed context
_DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(module)s.%(funcName)s:%(lineno)d | %(message)s"

# Simplified format for console in normal mode
_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_LOG_COLORS = {
    "DEBUG": "\033[94m",  # Blue
    "INFO": "\033[92m",  # Green
    "WARNING": "\033[93m",  # Yellow
    "ERROR": "\033[91m",  # Red
    "CRITICAL": "\033[91m\033[1m",  # Bold Red
    "RESET": "\033[0m",
}


class ColorFormatter(logging.Formatter):
    """Formatter that adds colors to log levels for console output."""

    def format(self, record):
        original = record.levelname
        if original in _LOG_COLORS:
            record.levelname = f"{_LOG_COLORS[original]}{original}{_LOG_COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name.

    Args:
        name: Logger name, typically __name__ of the calling module

    Returns:
        A configured logger instance
    """
    return logging.getLogger(name)


def set_debug_mode(enabled: bool) -> None:
    """
    Set the global debug mode flag.

    Args:
        enabled: True to enable debug mode, False to disable
    """
    global _DEBUG_MODE
    old_value = _DEBUG_MODE
    _DEBUG_MODE = enabled

    if old_value != _DEBUG_MODE:
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        if enabled:
            package_logger.setLevel(logging.DEBUG)
            package_logger.info("Debug mode enabled")
        else:
            package_logger.info("Debug mode disabled")
            package_logger.setLevel(logging.INFO)


def is_debug_mode() -> bool:
    """
    Check if debug mode is currently enabled.

    Returns:
        True if debug mode is enabled, False otherwise
    """
    return _DEBUG_MODE


def configure_logging(
    log_dir: Optional[Union[str, Path]] = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    max_file_size_mb: int = 10,
    backup_count: int = 5,
    config: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Configure package logging with console and optional file outputs.

    Only handlers owned by fuzzylang are replaced on reconfiguration, so a
    host application's own root handlers are left alone.

    Args:
        log_dir: Directory to store log files; no file handler when omitted
        console_level: Logging level for console output
        file_level: Logging level for file output
        max_file_size_mb: Maximum size of each log file in MB before rotation
        backup_count: Number of backup log files to keep
        config: Optional overrides ("console_format", "file_format")
    """
    if config is None:
        config = {}

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG if is_debug_mode() else logging.INFO)

    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    enricher = get_context_enricher()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(
        ColorFormatter(config.get("console_format", _CONSOLE_FORMAT))
    )
    console_handler.addFilter(enricher)
    package_logger.addHandler(console_handler)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(exist_ok=True, parents=True)

        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_path / LOG_FILE_NAME,
            maxBytes=max_file_size_mb * 1024 * 1024,
            backupCount=backup_count,
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(
            logging.Formatter(config.get("file_format", _DEFAULT_FORMAT))
        )
        file_handler.addFilter(enricher)
        package_logger.addHandler(file_handler)

    if log_dir:
        package_logger.debug(
            f"fuzzylang logging initialized (console: {logging.getLevelName(console_level)}, files: {log_dir})"
        )
    else:
        package_logger.debug(
            f"fuzzylang logging initialized (console only: {logging.getLevelName(console_level)})"
        )
