"""
CLI Error Handling Utilities

This module is the only place where errors become exit codes. Library
code raises typed BconomyError subclasses; commands are wrapped with
handle_cli_errors, which reports the error on stderr (or as a JSON
envelope on stdout with --json) and exits.
"""

from __future__ import annotations

import functools
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Callable, TypeVar

import orjson
import typer

from bcncli.cli.common.context import cli_context_var
from bcncli.shared.constants import CLIDefaults
from bcncli.shared.errors import (
    BconomyError,
    CliError,
    ErrorCode,
    create_cli_error,
)
from bcncli.utils.logging_config import log_operation_error

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def format_json_output(
    command: str,
    *,
    success: bool,
    errors: list[str] | None = None,
    data: dict[str, Any] | None = None,
) -> bytes:
    """Format a result envelope as JSON.

    Args:
        command: The command that was executed
        success: Whether the operation was successful
        errors: List of error messages
        data: Additional data to include

    Returns:
        JSON-formatted bytes for output
    """
    output: dict[str, Any] = {
        "success": success and not errors,
        "command": command,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "errors": errors or [],
    }

    if data:
        output["data"] = data

    return orjson.dumps(output, option=orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS, default=str)


def handle_cli_error(
    error: BaseException,
    command: str,
    *,
    json_output: bool = False,
) -> int:
    """Handle CLI errors with consistent formatting and logging.

    Args:
        error: The exception that occurred
        command: The CLI command being executed
        json_output: Whether to output JSON format

    Returns:
        Exit code for the CLI command
    """
    cli_error = _map_error_to_cli_error(error, command)
    _log_error(error, command, cli_error)
    _output_error(cli_error, error, command, json_output=json_output)

    return cli_error.exit_code


def _map_error_to_cli_error(error: BaseException, command: str) -> CliError:
    """Map specific exception types to CLI errors."""
    if isinstance(error, CliError):
        return error

    if isinstance(error, KeyboardInterrupt):
        return CliError(
            ErrorCode.CLI_COMMAND_INTERRUPTED,
            "Command interrupted by user",
            command=command,
            exit_code=CLIDefaults.EXIT_INTERRUPTED,
        )

    if isinstance(error, BconomyError):
        return CliError(
            error.code,
            error.message,
            error.context,
            original_error=error,
            command=command,
            exit_code=CLIDefaults.EXIT_ERROR,
        )

    return create_cli_error(
        message=f"Unexpected error: {error}",
        command=command,
        original_error=error if isinstance(error, Exception) else None,
    )


def _log_error(error: BaseException, command: str, cli_error: CliError) -> None:
    """Log the error with structured context."""
    if isinstance(error, KeyboardInterrupt):
        logger.warning("Command interrupted: %s", command)
    elif isinstance(error, BconomyError):
        # The message itself reaches the user through _output_error
        log_operation_error(logger, error, operation=command, level=logging.DEBUG)
    else:
        logger.error(
            "CLI error in %s: %s",
            command,
            cli_error.message,
            exc_info=error,
            extra={"error_code": cli_error.code.value},
        )


def _output_error(
    cli_error: CliError,
    error: BaseException,
    command: str,
    *,
    json_output: bool,
) -> None:
    """Output error message in appropriate format."""
    if not json_output:
        sys.stderr.write(f"Error: {cli_error.message}\n")
        return

    data: dict[str, Any] = {
        "error_code": cli_error.code.value,
        "error_type": type(error).__name__,
        "exit_code": cli_error.exit_code,
    }
    if isinstance(error, BconomyError):
        data["context"] = error.context.safe_dict()
        status_code = getattr(error, "status_code", None)
        if status_code is not None:
            data["status_code"] = status_code

    try:
        error_output = format_json_output(
            command,
            success=False,
            errors=[cli_error.message],
            data=data,
        )
        sys.stdout.write(error_output.decode() + "\n")
        sys.stdout.flush()
    except (OSError, TypeError) as output_error:
        logger.warning("JSON output failed: %s", output_error)
        sys.stderr.write(f"Error: {cli_error.message}\n")


def handle_cli_errors(command: str) -> Callable[[F], F]:
    """Decorator turning exceptions raised by a command into an exit code.

    ``typer.Exit`` and ``typer.Abort`` pass through untouched.

    Example:
        >>> @handle_cli_errors("pet info")
        ... def info(pet_id: str) -> None:
        ...     ...
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except (typer.Exit, typer.Abort):
                raise
            except (Exception, KeyboardInterrupt) as e:  # noqa: BLE001
                context = cli_context_var.get()
                json_output = bool(context and context.is_json_output_enabled())
                exit_code = handle_cli_error(e, command, json_output=json_output)
                raise typer.Exit(exit_code) from e

        return wrapper  # type: ignore[return-value]

    return decorator
