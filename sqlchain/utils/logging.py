"""Logging setup for sqlchain.

Builders log every render on the ``sqlchain.builder`` logger with the
statement kind and table attached as structured fields.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import msgspec

from sqlchain.config import LoggingConfig

if TYPE_CHECKING:
    from logging import LogRecord

__all__ = (
    "StructuredFormatter",
    "configure_logging",
    "get_logger",
    "log_fields",
)

ROOT_LOGGER_NAME = "sqlchain"
SIMPLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def log_fields(**fields: Any) -> dict[str, dict[str, Any]]:
    """Wrap structured fields for the ``extra`` argument of a logging call.

    Returns:
        A mapping that ``StructuredFormatter`` merges into the JSON entry.
    """
    return {"extra_fields": fields}


class StructuredFormatter(logging.Formatter):
    """Render log records as single-line JSON objects."""

    def format(self, record: LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(getattr(record, "extra_fields", {}))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return msgspec.json.encode(entry).decode("utf-8")


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger inside the ``sqlchain`` namespace.

    Args:
        name: Child logger name. ``None`` returns the package root logger.
    """
    if name is None or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(config: LoggingConfig | None = None, extra_handlers: list[logging.Handler] | None = None) -> None:
    """Attach handlers to the ``sqlchain`` logger.

    Replaces any handlers installed by a previous call and stops propagation
    to the root logger.

    Args:
        config: Logging settings. Defaults to ``LoggingConfig()``.
        extra_handlers: Additional handlers to add
    """
    config = config or LoggingConfig()

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(config.level)
    logger.handlers.clear()

    console = logging.StreamHandler(sys.stdout)
    if config.format_style == "structured":
        console.setFormatter(StructuredFormatter())
    else:
        console.setFormatter(logging.Formatter(SIMPLE_FORMAT))
    logger.addHandler(console)

    if config.log_to_file:
        # files always get structured output
        file_handler = logging.FileHandler(config.log_to_file)
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    for handler in extra_handlers or ():
        logger.addHandler(handler)

    logger.propagate = False
    logger.debug(
        "sqlchain logging configured",
        extra=log_fields(level=config.level, format_style=config.format_style, handlers=len(logger.handlers)),
    )
