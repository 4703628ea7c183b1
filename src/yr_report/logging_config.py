"""Centralized logging configuration."""

import logging
import sys
from typing import Optional, TextIO, Union

from yr_report.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers that install their own handlers; they get ours instead
THIRD_PARTY_LOGGERS = (
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "httpx",
    "fastapi",
    "geopy",
)


def _make_handler(level: Union[int, str], stream: TextIO) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    return handler


def configure_logging(level: Optional[Union[int, str]] = None, stream: Optional[TextIO] = None):
    """
    Configure a consistent logging format for the entire application.

    Args:
        level: Log level name or number (defaults to LOG_LEVEL from config)
        stream: Destination stream (defaults to stderr)
    """
    level = level if level is not None else LOG_LEVEL
    stream = stream or sys.stderr

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.addHandler(_make_handler(level, stream))

    for logger_name in THIRD_PARTY_LOGGERS:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)

        # Don't propagate to avoid duplicate messages
        logger.propagate = False
        logger.addHandler(_make_handler(level, stream))


def configure_cli_logging(verbose: bool = False, stream: Optional[TextIO] = None):
    """Log progress to stderr with --verbose; otherwise only warnings and errors.

    The report itself goes to stdout.
    """
    configure_logging(logging.INFO if verbose else logging.WARNING, stream)
