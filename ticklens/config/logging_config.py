"""
Logging Configuration for the tick scanner

Provides structured logging with:
- Timestamps
- Log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
- Optional file rotation (1 file per day) with a separate error log
- Console handler
"""

import logging
import os
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler, TimedRotatingFileHandler
from typing import Optional, TextIO


# Log directory (only created when file logging is requested)
LOG_DIR = Path(os.getenv("TICKLENS_LOG_DIR", Path.cwd() / "logs"))

# Log formats
DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
SIMPLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    name: str,
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    console: bool = True,
    detailed: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Setup a logger with console and, optionally, file handlers.

    Args:
        name: Logger name (typically module name)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file name; file handlers are skipped when None
        console: Whether to log to console
        detailed: Whether to use detailed format (includes file/line)
        stream: Console stream (defaults to stdout)

    Returns:
        Configured logger instance

    Example:
        >>> logger = setup_logger("ticklens", level=logging.DEBUG)
        >>> logger.info("Scanning 50 ticks from -120")
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    log_format = DETAILED_FORMAT if detailed else SIMPLE_FORMAT
    formatter = logging.Formatter(log_format, datefmt=DATE_FORMAT)

    if console:
        console_handler = logging.StreamHandler(stream or sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file is None:
        return logger

    LOG_DIR.mkdir(parents=True, exist_ok=True)

    file_handler = TimedRotatingFileHandler(
        LOG_DIR / log_file,
        when="midnight",
        interval=1,
        backupCount=30,  # Keep 30 days of logs
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    # Separate error log
    stem = Path(log_file).stem
    error_handler = RotatingFileHandler(
        LOG_DIR / f"{stem}_errors.log",
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding="utf-8",
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(logging.Formatter(DETAILED_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(error_handler)

    return logger


def get_cli_logger(debug: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """Get the root package logger for command line runs (stderr, keeps stdout for results)."""
    level = logging.DEBUG if debug else logging.INFO
    return setup_logger("ticklens", level=level, log_file=log_file, detailed=debug, stream=sys.stderr)
