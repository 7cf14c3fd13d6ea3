"""Centralized logger configuration for the counter service.

Every module obtains its logger through :func:`get_logger`, so the service
and Uvicorn share one handler and one line format.
"""

import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s.%(msecs)03d | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_UVICORN_LOGGERS = ["uvicorn", "uvicorn.error", "uvicorn.access"]

_VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

# Track if root logger has been configured
_root_logger_configured = False


def _read_level(value: Optional[str], default: str = "INFO") -> str:
    if value is None:
        return default
    level = value.strip().upper()
    return level if level in _VALID_LEVELS else default


class _CounterFormatter(logging.Formatter):
    """Renames 'uvicorn.error' to 'uvicorn'; that logger carries regular output."""

    def format(self, record: logging.LogRecord) -> str:
        if record.name == "uvicorn.error":
            record.name = "uvicorn"
        return super().format(record)


def configure_root_logger(level: Optional[str] = None, *, force: bool = False) -> None:
    """Configure the root logger with standard formatting.

    Call once at startup. Subsequent calls are no-ops unless ``force`` is set,
    which is needed after Uvicorn has installed its own handlers.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If None, reads COUNTER_LOG_LEVEL or defaults to INFO.
        force: Reconfigure even if logging was already set up.
    """
    global _root_logger_configured

    if _root_logger_configured and not force:
        return

    if level is None:
        level = os.environ.get("COUNTER_LOG_LEVEL")
    level = _read_level(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(_CounterFormatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    for logger_name in _UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(logger_name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.addHandler(handler)
        uvicorn_logger.setLevel(level)
        uvicorn_logger.propagate = False

    _root_logger_configured = True


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Return a logger, configuring the root logger on first use.

    Args:
        name: Logger name (typically __name__ of the calling module)
        level: Optional log level override. If None, inherits from root.
               Unknown level names fall back to INFO.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Counter ready")
        2024-01-15 10:30:45.123 | INFO     | atomic_counter.server | Counter ready
    """
    if not _root_logger_configured:
        configure_root_logger()

    logger = logging.getLogger(name)

    if level is not None:
        logger.setLevel(_read_level(level))

    return logger
