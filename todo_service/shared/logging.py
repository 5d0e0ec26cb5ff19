"""
Logging configuration for the application.

Sets up a single stdout handler with a consistent, pipe-separated format.
Logging must not change program behavior.
Task descriptions are only ever logged at DEBUG level.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Logs one INFO line per request; follows the configured level.
ACCESS_LOGGER = "uvicorn.access"
# Third-party loggers that are too chatty at INFO.
NOISY_LOGGERS = ("uvicorn.error", "httpx")


def resolve_level(level: str) -> int:
    """Map a level name to its numeric value, defaulting to INFO."""
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
            Unknown names fall back to INFO.
    """
    numeric_level = resolve_level(level)
    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger(ACCESS_LOGGER).setLevel(numeric_level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))
