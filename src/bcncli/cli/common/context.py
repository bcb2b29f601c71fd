"""
CLI Context Management Module

This module manages global CLI state using a Pydantic model stored in a
ContextVar. The main callback fills it from the global options; commands
read it back through get_cli_context().

The context includes:
- verbose: Verbosity level (int, count-based)
- log_level: Logging level override (enum-based)
- json_output: Report errors as JSON envelopes (bool)
- api_key / config_path / cache_file: configuration overrides
"""

from __future__ import annotations

import contextvars
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class LogLevel(str, Enum):
    """Log level enumeration for type safety."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class CliContext(BaseModel):
    """
    CLI context model for managing global state.

    Attributes:
        verbose: Verbosity level (0 = normal, 1+ = verbose)
        log_level: Logging level given on the command line, if any
        json_output: Whether errors are reported as JSON
        api_key: API key given with --apikey
        config_path: Configuration file given with --config
        cache_file: Item catalog cache file given with --cache-file
    """

    verbose: int = Field(
        default=0,
        ge=0,
        description="Verbosity level (0 = normal, 1+ = verbose)",
    )

    log_level: LogLevel | None = Field(
        default=None,
        description="Logging level override",
    )

    json_output: bool = Field(
        default=False,
        description="Whether to output errors in JSON format",
    )

    api_key: str | None = Field(
        default=None,
        repr=False,
        description="API key override",
    )

    config_path: Path | None = Field(
        default=None,
        description="Explicit configuration file",
    )

    cache_file: str | None = Field(
        default=None,
        description="Item catalog cache file override",
    )

    def is_verbose(self) -> bool:
        """Check if verbose mode is enabled."""
        return self.verbose > 0

    def get_effective_log_level(self, default: str) -> str:
        """
        Get the effective log level.

        Verbose forces DEBUG; otherwise the command-line level wins over
        ``default`` (the configured level).
        """
        if self.is_verbose():
            return LogLevel.DEBUG.value
        if self.log_level is not None:
            return self.log_level.value
        return default

    def is_json_output_enabled(self) -> bool:
        """Check if JSON output is enabled."""
        return self.json_output


# Global context variable
cli_context_var: contextvars.ContextVar[CliContext | None] = contextvars.ContextVar(
    "cli_context",
    default=None,
)


def get_cli_context() -> CliContext:
    """
    Get the current CLI context.

    Raises:
        RuntimeError: If context has not been initialized
    """
    context = cli_context_var.get()
    if context is None:
        raise RuntimeError(
            "CLI context has not been initialized. "
            "Make sure to call the main callback before accessing context.",
        )
    return context


def set_cli_context(context: CliContext) -> None:
    """Set the current CLI context."""
    cli_context_var.set(context)


def clear_cli_context() -> None:
    """Clear the current CLI context."""
    cli_context_var.set(None)
