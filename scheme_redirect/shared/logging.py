"""
Logging configuration for the application.

One format for every logger, written to stdout.
Logging must not change program behavior: redirect decisions are
logged by location only, never with request headers or cookies.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Kept at WARNING or above regardless of the application level.
NOISY_LOGGERS = ("uvicorn.access", "uvicorn.error", "httpx")


def configure_logging(level: str = "INFO") -> int:
    """Configure structured logging for the application.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
            Unknown names fall back to INFO.

    Returns:
        The numeric level that was applied.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))
    return numeric_level
