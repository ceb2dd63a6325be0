"""Logging helpers for sqlinterp.

The library only emits DEBUG records and never configures handlers on import;
applications opt in through :func:`configure_logging` or their own setup.
Records emitted by :func:`log_with_context` carry their fields (for example
the ``expected`` and ``actual`` argument counts of an arity failure) in an
``extra_fields`` attribute, which :class:`InterpolationFormatter` appends to
the message.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from logging import LogRecord

__all__ = ("InterpolationFormatter", "configure_logging", "get_logger", "log_with_context")

ROOT_LOGGER_NAME = "sqlinterp"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class InterpolationFormatter(logging.Formatter):
    """Text formatter that appends a record's ``extra_fields`` as ``key=value`` pairs."""

    def __init__(self, fmt: str | None = DEFAULT_FORMAT, datefmt: str | None = None) -> None:
        super().__init__(fmt, datefmt)

    def format(self, record: LogRecord) -> str:
        text = super().format(record)
        fields: dict[str, Any] = getattr(record, "extra_fields", None) or {}
        if not fields:
            return text
        rendered = " ".join(f"{key}={value!r}" for key, value in fields.items())
        # keep the traceback, if any, on the lines after the fields
        head, sep, tail = text.partition("\n")
        return f"{head} [{rendered}]{sep}{tail}"


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger instance under the sqlinterp namespace.

    Args:
        name: Logger name. If not provided, returns the root sqlinterp logger.

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(
    level: str = "INFO",
    fmt: str = DEFAULT_FORMAT,
    extra_handlers: list[logging.Handler] | None = None,
) -> None:
    """Configure logging for the sqlinterp namespace.

    Replaces any handlers on the ``sqlinterp`` logger with a stdout handler
    using :class:`InterpolationFormatter`, and stops propagation to the root
    logger.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        fmt: Format string for the stdout handler
        extra_handlers: Additional handlers to add
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(InterpolationFormatter(fmt))
    root_logger.addHandler(console_handler)

    for handler in extra_handlers or ():
        root_logger.addHandler(handler)

    root_logger.propagate = False


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **extra_fields: Any,
) -> None:
    """Log a message with extra fields attached to the record.

    Args:
        logger: The logger to use
        level: Log level
        message: Log message
        **extra_fields: Fields stored on the record as ``extra_fields``
    """
    if not logger.isEnabledFor(level):
        return
    logger.log(level, message, extra={"extra_fields": extra_fields}, stacklevel=2)
