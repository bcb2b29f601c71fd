"""
Logging Configuration Module

This module sets up logging for the bcncli application. Console logs go
to stderr through rich so they never mix with command output on stdout;
an optional rotating file log records every entry as a JSON line.
"""

from __future__ import annotations

import logging
import logging.handlers
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import orjson
from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from bcncli.shared.constants import Logging
from bcncli.shared.errors import BconomyError

# Attributes passed through ``extra=`` that end up in the JSON log line
_STRUCTURED_FIELDS = ("error_code", "context", "operation")


class StructuredFormatter(logging.Formatter):
    """Formats log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created,
                tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in _STRUCTURED_FIELDS:
            if hasattr(record, field):
                log_entry[field] = getattr(record, field)

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return orjson.dumps(log_entry, default=str).decode()


def _create_rich_console() -> Console:
    custom_theme = Theme(
        {
            "logging.level.debug": "cyan",
            "logging.level.info": "green",
            "logging.level.warning": "yellow",
            "logging.level.error": "red bold",
            "logging.level.critical": "red bold reverse",
        }
    )
    return Console(theme=custom_theme, stderr=True)


def setup_logging(
    level: str | int = Logging.DEFAULT_LEVEL,
    log_file: str | Path | None = None,
    *,
    max_bytes: int = Logging.MAX_BYTES,
    backup_count: int = Logging.BACKUP_COUNT,
) -> logging.Logger:
    """
    Configure the ``bcncli`` logger.

    Args:
        level: Logging level name or number
        log_file: Rotating JSON log file; no file logging when None
        max_bytes: Maximum size of the log file before rotation
        backup_count: Number of rotated files to keep

    Returns:
        The configured ``bcncli`` logger
    """
    log_level = logging.getLevelName(level.upper()) if isinstance(level, str) else level
    if not isinstance(log_level, int):
        log_level = logging.getLevelName(Logging.DEFAULT_LEVEL)

    logger = logging.getLogger(Logging.LOGGER_NAME)
    logger.setLevel(log_level)

    # Calling twice (tests, repeated callbacks) must not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(
        console=_create_rich_console(),
        show_time=False,
        show_path=log_level <= logging.DEBUG,
        rich_tracebacks=True,
    )
    console_handler.setLevel(log_level)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


def log_operation_error(
    logger: logging.Logger,
    error: BconomyError,
    operation: str | None = None,
    level: int = logging.ERROR,
) -> None:
    """Log a BconomyError with its code and context as structured fields."""
    operation = operation or error.context.operation
    logger.log(
        level,
        "%s failed: %s",
        operation or "operation",
        error.message,
        extra={
            "error_code": error.code.value,
            "operation": operation,
            "context": error.context.safe_dict(),
        },
        exc_info=error.original_error,
    )
