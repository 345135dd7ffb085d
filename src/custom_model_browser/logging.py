"""Logging utilities for the custom model browser.

This module provides standardized logging functionality for browser operations.
Every record carries the event type and the keyword data passed by the caller.
"""

import logging
from enum import Enum
from typing import Any, Optional

ROOT_LOGGER_NAME = "custom_model_browser"


class LogLevel(int, Enum):
    """Log levels for the browser."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


class LogEvent(str, Enum):
    """Event types for browser logging."""

    REGISTRY_CLIENT = "registry_client"
    AGGREGATION = "aggregation"
    VIEW = "view"
    PREFERENCES = "preferences"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger under the package root logger.

    Args:
        name: Child name; a dotted module path inside the package is shortened

    Returns:
        The logger instance
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        name = name[len(ROOT_LOGGER_NAME) + 1 :]
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(level: str = "WARNING") -> None:
    """Attach a stderr handler to the package logger at the given level.

    Calling it again only adjusts the level.
    """
    logger = get_logger()
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s", datefmt="%H:%M:%S"))
        logger.addHandler(handler)


def _log(level: LogLevel, event: LogEvent, message: str, **data: Any) -> None:
    """Log an event on the event's logger.

    Args:
        level: Severity level
        event: Event type
        message: Human-readable message
        **data: Event data, attached to the record as ``data``
    """
    get_logger(event.value).log(level, message, extra={"event": event.value, "data": data})


def log_debug(event: LogEvent, message: str, **data: Any) -> None:
    _log(LogLevel.DEBUG, event, message, **data)


def log_info(event: LogEvent, message: str, **data: Any) -> None:
    _log(LogLevel.INFO, event, message, **data)


def log_warning(event: LogEvent, message: str, **data: Any) -> None:
    _log(LogLevel.WARNING, event, message, **data)


def log_error(event: LogEvent, message: str, **data: Any) -> None:
    _log(LogLevel.ERROR, event, message, **data)
