"""
Logging configuration for naivehttp.

Console logging goes to stderr so stdout carries nothing but the
rendered response. File logging, when enabled, rotates and records
everything down to DEBUG.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler


class StructuredFormatter(logging.Formatter):
    """Pipe-delimited formatter for log files."""

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, 'module_name'):
            record.module_name = record.module
        if not hasattr(record, 'function_name'):
            record.function_name = record.funcName

        return super().format(record)


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    max_bytes: int = 1048576,  # 1MB
    backup_count: int = 3,
) -> logging.Logger:
    """
    Set up the naivehttp logger.

    Args:
        level: Console logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Also log every request to this file, rotating it
        max_bytes: Maximum log file size before rotation
        backup_count: Number of rotated log files to keep

    Returns:
        Configured package logger
    """
    console_level = getattr(logging, level.upper())

    logger = logging.getLogger("naivehttp")
    logger.setLevel(logging.DEBUG if log_file else console_level)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(
        fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(StructuredFormatter(
            fmt='%(asctime)s | %(levelname)-8s | %(name)-24s | %(module_name)-10s | '
                '%(function_name)-16s | %(lineno)-4d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module, e.g. ``get_logger(__name__)``."""
    return logging.getLogger(name)


def configure_logging(debug: bool = False, log_file: str | None = None) -> None:
    """
    Logging setup used by the CLI.

    Args:
        debug: Show debug messages on stderr
        log_file: Also write a debug log to this file
    """
    setup_logging(level="DEBUG" if debug else "WARNING", log_file=log_file)
