"""Logging configuration for namesearch using loguru."""

import os
import sys
from loguru import logger
from typing import Optional

# Store the configured log file path to ensure consistency
_log_file_path: Optional[str] = None


def setup_logger(
    log_file: Optional[str] = None,
    log_level: str = "INFO",
    rotation: str = "10 MB",
    retention: str = "7 days",
    compression: str = "zip",
    console_output: bool = False,
) -> None:
    """
    Configure loguru logger with optional file and console output.

    Args:
        log_file: Path to the log file (if None, reuses the previously configured path, if any)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        rotation: Log rotation size
        retention: How long to keep old logs
        compression: Compression format for old logs
        console_output: Whether to output to stderr
    """
    global _log_file_path

    if log_file is None:
        log_file = _log_file_path
    else:
        # Relative paths are resolved against the directory the command runs in
        log_file = os.path.abspath(log_file)
        _log_file_path = log_file

    # Remove default handler
    logger.remove()

    if console_output:
        logger.add(
            sys.stderr,
            level=log_level,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
            colorize=True,
        )

    if log_file:
        logger.add(
            log_file,
            level=log_level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]}:{function}:{line} - {message}",
            rotation=rotation,
            retention=retention,
            compression=compression,
            encoding="utf-8",
        )


def get_logger(name: Optional[str] = None):
    """
    Get a configured logger instance.

    Args:
        name: Optional name for the logger

    Returns:
        Logger instance bound to ``name``
    """
    return logger.bind(name=name or "namesearch")


# A terminal UI owns stdout/stderr, so nothing is emitted until the host
# configures a sink (see namesearch.main).
logger.configure(extra={"name": "namesearch"})
setup_logger(log_file=os.getenv("NAMESEARCH_LOG_FILE") or None)
