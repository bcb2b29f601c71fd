"""bcncli Error Handling Module

This module defines the error handling system for bcncli, providing
structured error classes with context information and user-friendly messages.

The error hierarchy follows these principles:
- One Source of Truth: All error codes are defined in ErrorCode enum
- Structured Context: ErrorContext provides additional information
- Library code raises, the CLI boundary decides how to exit
- Proper Exception Chaining: Original exceptions are preserved
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Union

# Type alias for primitive context values (str, int, float, bool only)
PrimitiveContextValue = Union[str, int, float, bool]


class ErrorCode(str, Enum):
    """Error codes for bcncli.

    This enum serves as the single source of truth for all error codes
    used throughout the application.
    """

    # Authentication
    API_KEY_MISSING = "API_KEY_MISSING"

    # Network and API Errors
    NETWORK_ERROR = "NETWORK_ERROR"
    API_REQUEST_FAILED = "API_REQUEST_FAILED"

    # Parsing Errors
    PARSING_ERROR = "PARSING_ERROR"
    INVALID_JSON = "INVALID_JSON"
    INVALID_TIMESTAMP = "INVALID_TIMESTAMP"

    # File System Errors
    FILE_STAT_ERROR = "FILE_STAT_ERROR"
    FILE_READ_ERROR = "FILE_READ_ERROR"

    # Validation Errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_ID = "INVALID_ID"
    ITEM_NOT_FOUND = "ITEM_NOT_FOUND"

    # Configuration Errors
    CONFIG_ERROR = "CONFIG_ERROR"
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"

    # CLI Errors
    CLI_UNEXPECTED_ERROR = "CLI_UNEXPECTED_ERROR"
    CLI_COMMAND_INTERRUPTED = "CLI_COMMAND_INTERRUPTED"


def _coerce_primitives(value: Any | None) -> dict[str, PrimitiveContextValue] | None:
    """Coerce additional_data values to primitives.

    Converts Path and Enum to primitive types.

    Raises:
        TypeError: If value is not a dict or contains unconvertible types
    """
    if value is None:
        return None

    if not isinstance(value, dict):
        error_msg = f"additional_data must be dict, got {type(value).__name__}"
        raise TypeError(error_msg)

    coerced: dict[str, PrimitiveContextValue] = {}
    for key, val in value.items():
        if isinstance(val, (str, int, float, bool)):
            coerced[key] = val
        elif isinstance(val, Path):
            coerced[key] = str(val)
        elif isinstance(val, Enum):
            coerced[key] = val.value
        else:
            error_msg = (
                f"Cannot coerce {type(val).__name__} to primitive type. "
                f"Only str, int, float, bool, Path, Enum are allowed."
            )
            raise TypeError(error_msg)

    return coerced


@dataclass(frozen=True)
class ErrorContext:
    """Context information for errors.

    Only primitive types (str, int, float, bool) are allowed in
    additional_data so the context can always be serialized.

    Attributes:
        file_path: Optional file path associated with the error
        operation: Optional operation name that caused the error
        additional_data: Optional dict with primitive values only
    """

    file_path: str | None = None
    operation: str | None = None
    additional_data: dict[str, PrimitiveContextValue] | None = None

    def __post_init__(self) -> None:
        if self.additional_data is not None:
            coerced = _coerce_primitives(self.additional_data)
            object.__setattr__(self, "additional_data", coerced)

    def safe_dict(self) -> dict[str, Any]:
        """Export context as dict; additional_data is never None."""
        data: dict[str, Any] = {}
        if self.file_path is not None:
            data["file_path"] = self.file_path
        if self.operation is not None:
            data["operation"] = self.operation
        data["additional_data"] = self.additional_data or {}
        return data


class BconomyError(Exception):
    """Base exception class for all bcncli errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize BconomyError.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            context: Additional context information
            original_error: Original exception that caused this error
        """
        self.code = code
        self.message = message
        self.context = context or ErrorContext()
        self.original_error = original_error
        super().__init__(f"{code.value}: {message}")

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging and JSON output."""
        return {
            "code": self.code.value,
            "message": self.message,
            "context": self.context.safe_dict(),
            "original_error": str(self.original_error) if self.original_error else None,
        }


class DomainError(BconomyError):
    """Errors raised when data or arguments violate domain rules.

    Examples:
    - Malformed JSON payloads
    - Unparseable timestamps
    - Invalid IDs or sort keys
    """


class InfrastructureError(BconomyError):
    """Errors raised while talking to the API or the file system."""


class ApplicationError(BconomyError):
    """Application-level errors (configuration, command handling)."""


class AuthError(InfrastructureError):
    """No API key is available.

    This is a local precondition failure: it is raised before any
    network activity takes place.
    """


class TransportError(InfrastructureError):
    """The request never produced an HTTP response (connection, timeout...)."""


class RemoteError(InfrastructureError):
    """The endpoint answered with a non-success HTTP status."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        status_code: int,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(code, message, context, original_error)
        self.status_code = status_code


class FilesystemError(InfrastructureError):
    """stat/read/write failures other than "file does not exist"."""


class ParseError(DomainError):
    """Malformed or absent JSON body, or an unparseable timestamp."""


class ValidationError(DomainError):
    """Invalid user-supplied value (ID, sort key, lookup query...)."""


class ConfigError(ApplicationError):
    """Configuration file could not be loaded."""


class CliError(ApplicationError):
    """CLI-specific error carrying the command name and exit code."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
        command: str | None = None,
        exit_code: int = 1,
    ):
        super().__init__(code, message, context, original_error)
        self.command = command
        self.exit_code = exit_code


# Convenience functions for common error scenarios
def create_auth_error(operation: str | None = None) -> AuthError:
    """Create the missing API key error."""
    return AuthError(
        ErrorCode.API_KEY_MISSING,
        "API key must be set via --apikey flag, config file, or env var BCONOMYAPI",
        ErrorContext(operation=operation),
    )


def create_validation_error(
    message: str,
    field: str | None = None,
    operation: str | None = None,
    code: ErrorCode = ErrorCode.VALIDATION_ERROR,
) -> ValidationError:
    """Create a validation error with context."""
    additional_data: dict[str, PrimitiveContextValue] | None = {"field": field} if field else None
    context = ErrorContext(
        operation=operation,
        additional_data=additional_data,
    )
    return ValidationError(code, message, context)


def create_filesystem_error(
    code: ErrorCode,
    message: str,
    file_path: str,
    operation: str | None = None,
    original_error: Exception | None = None,
) -> FilesystemError:
    """Create a file system error with context."""
    return FilesystemError(
        code,
        message,
        ErrorContext(file_path=file_path, operation=operation),
        original_error,
    )


def create_cli_error(
    message: str,
    command: str | None = None,
    operation: str | None = None,
    original_error: Exception | None = None,
    exit_code: int = 1,
) -> CliError:
    """Create a CLI error with context."""
    additional_data: dict[str, PrimitiveContextValue] | None = {"command": command} if command else None
    context = ErrorContext(
        operation=operation,
        additional_data=additional_data,
    )
    return CliError(
        ErrorCode.CLI_UNEXPECTED_ERROR,
        message,
        context,
        original_error,
        command,
        exit_code,
    )
