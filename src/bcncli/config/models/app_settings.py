"""Logging configuration model."""

from __future__ import annotations

from pydantic import BaseModel, Field

from bcncli.shared.constants import Logging


class LoggingSettings(BaseModel):
    """Logging configuration.

    Console logging always goes to stderr; the rotating file log is only
    written when ``file`` is set.
    """

    level: str = Field(default=Logging.DEFAULT_LEVEL, description="Logging level")
    file: str | None = Field(default=None, description="Log file path (unset disables file logging)")
    max_bytes: int = Field(
        default=Logging.MAX_BYTES,
        gt=0,
        description="Maximum log file size in bytes",
    )
    backup_count: int = Field(
        default=Logging.BACKUP_COUNT,
        ge=0,
        description="Number of backup log files to keep",
    )


__all__ = ["LoggingSettings"]
