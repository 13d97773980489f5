"""Logging setup shared by the client and the command line tool."""

import logging
from pathlib import Path
from typing import Optional

from openf1_client.conf.settings import settings


def setup_logger(
    name: str,
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
    log_dir: Optional[str | Path] = None,
    log_format: Optional[str] = None,
) -> logging.Logger:
    """Configure a named logger with a console handler and an optional file handler.

    A logger that already has handlers is returned as is.

    Args:
        name: Logger name
        log_level: Level name (default: settings.log_level)
        log_file: File name for the file handler (None = console only)
        log_dir: Directory for log_file (default: settings.logs_path)
        log_format: Format string (default: settings.log_format)

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel((log_level or settings.log_level).upper())

    formatter = logging.Formatter(log_format or settings.log_format)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_file:
        log_path = Path(log_dir or settings.logs_path)
        log_path.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path / log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a module logger.

    Library modules never attach handlers themselves; configure output with
    setup_logger at the application edge.
    """
    return logging.getLogger(name)
