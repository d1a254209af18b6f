"""Logging configuration for mentionkit using loguru."""

import os
import sys
from loguru import logger
from typing import Optional

from mentionkit.utils import get_project_root

# Store the configured log file path to ensure consistency
_log_file_path: Optional[str] = None


def setup_logger(
    log_file: Optional[str] = None,
    log_level: Optional[str] = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
    compression: str = "zip",
    console_output: bool = False,
) -> None:
    """
    Configure loguru logger with file and console output.

    mentionkit is a library, so no file sink is added unless a log file is
    given here or through the ``MENTIONKIT_LOG_FILE`` environment variable.

    Args:
        log_file: Path to the log file (if None, uses the previously configured path or the env var)
        log_level: Logging level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL);
            defaults to ``MENTIONKIT_LOG_LEVEL`` or INFO
        rotation: Log rotation size
        retention: How long to keep old logs
        compression: Compression format for old logs
        console_output: Whether to output to console
    """
    global _log_file_path

    if log_level is None:
        log_level = os.environ.get("MENTIONKIT_LOG_LEVEL", "INFO")

    # Determine the log file path
    if log_file is None:
        if _log_file_path is None:
            _log_file_path = os.environ.get("MENTIONKIT_LOG_FILE")
        log_file = _log_file_path
    if log_file is not None and not os.path.isabs(log_file):
        log_file = os.path.join(get_project_root(), log_file)
    _log_file_path = log_file

    # Remove default handler
    logger.remove()

    # Console output with colors
    if console_output:
        logger.add(
            sys.stderr,
            level=log_level,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
            colorize=True,
        )

    # File output
    if log_file is not None:
        logger.add(
            log_file,
            level=log_level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            rotation=rotation,
            retention=retention,
            compression=compression,
            encoding="utf-8",
        )


def get_logger(name: Optional[str] = None):
    """
    Get a configured logger instance.

    Args:
        name: Optional component name bound to every record

    Returns:
        Logger instance
    """
    return logger.bind(name=name or "mentionkit")


# Default configuration: honour the environment, otherwise stay silent
setup_logger()
