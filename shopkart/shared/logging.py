"""
Logging setup for the ShopKart service.

One stdout format for every logger. The error responder logs each
failed request (4xx at WARNING, unexpected failures with a stack
trace), so its loggers can be tuned separately from the rest of
the application, e.g. to silence expected 404 noise.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ERROR_LOGGER_NAME = "shopkart.shared.errors"
SERVER_LOGGER_NAMES = ("uvicorn.access", "uvicorn.error")


def _level(name: str | None, default: int) -> int:
    if not name:
        return default
    value = logging.getLevelName(name.upper())
    return value if isinstance(value, int) else default


def configure_logging(level: str = "INFO", error_log_level: str | None = None) -> None:
    """Configure logging for the service.

    Args:
        level: Root log level name. Unknown names fall back to INFO.
        error_log_level: Level for the error responder's loggers;
            inherits ``level`` when not given.
    """
    root_level = _level(level, logging.INFO)
    logging.basicConfig(
        level=root_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger(ERROR_LOGGER_NAME).setLevel(
        _level(error_log_level, logging.NOTSET)
    )
    for name in SERVER_LOGGER_NAMES:
        logging.getLogger(name).setLevel(logging.WARNING)
