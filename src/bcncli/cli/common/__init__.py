"""Shared building blocks for the bcncli commands."""

from .context import CliContext, LogLevel, get_cli_context, set_cli_context
from .error_handler import handle_cli_error, handle_cli_errors

__all__ = [
    "CliContext",
    "LogLevel",
    "get_cli_context",
    "handle_cli_error",
    "handle_cli_errors",
    "set_cli_context",
]
