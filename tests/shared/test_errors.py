"""Tests for the bcncli error hierarchy."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

import pytest

from bcncli.shared.errors import (
    ApplicationError,
    AuthError,
    BconomyError,
    CliError,
    ConfigError,
    DomainError,
    ErrorCode,
    ErrorContext,
    InfrastructureError,
    ParseError,
    RemoteError,
    TransportError,
    ValidationError,
    create_auth_error,
    create_cli_error,
    create_filesystem_error,
    create_validation_error,
)


class Color(Enum):
    RED = "red"


class TestErrorContext:
    def test_empty_context(self) -> None:
        context = ErrorContext()

        assert context.file_path is None
        assert context.operation is None
        assert context.safe_dict() == {"additional_data": {}}

    def test_additional_data_is_coerced(self) -> None:
        context = ErrorContext(additional_data={"path": Path("a/b"), "color": Color.RED, "n": 1})

        assert context.additional_data == {"path": str(Path("a/b")), "color": "red", "n": 1}

    def test_rejects_non_primitive_values(self) -> None:
        with pytest.raises(TypeError):
            ErrorContext(additional_data={"items": [1, 2]})


class TestHierarchy:
    @pytest.mark.parametrize(
        ("error_type", "base"),
        [
            (AuthError, InfrastructureError),
            (TransportError, InfrastructureError),
            (RemoteError, InfrastructureError),
            (ParseError, DomainError),
            (ValidationError, DomainError),
            (ConfigError, ApplicationError),
            (CliError, ApplicationError),
        ],
    )
    def test_subclasses(self, error_type: type, base: type) -> None:
        assert issubclass(error_type, base)
        assert issubclass(error_type, BconomyError)

    def test_remote_error_keeps_status_code(self) -> None:
        error = RemoteError(ErrorCode.API_REQUEST_FAILED, "API returned status 503", status_code=503)

        assert error.status_code == 503
        assert str(error) == "API_REQUEST_FAILED: API returned status 503"

    def test_to_dict(self) -> None:
        cause = ValueError("boom")
        error = ParseError(
            ErrorCode.INVALID_JSON,
            "Malformed JSON",
            ErrorContext(operation="decode"),
            original_error=cause,
        )

        assert error.to_dict() == {
            "code": "INVALID_JSON",
            "message": "Malformed JSON",
            "context": {"operation": "decode", "additional_data": {}},
            "original_error": "boom",
        }


class TestFactories:
    def test_auth_error_message(self) -> None:
        error = create_auth_error(operation="fetch")

        assert error.code == ErrorCode.API_KEY_MISSING
        assert "BCONOMYAPI" in error.message
        assert error.context.operation == "fetch"

    def test_validation_error_records_field(self) -> None:
        error = create_validation_error("bad sort", field="sort", code=ErrorCode.INVALID_ID)

        assert error.code == ErrorCode.INVALID_ID
        assert error.context.additional_data == {"field": "sort"}

    def test_filesystem_error(self) -> None:
        error = create_filesystem_error(ErrorCode.FILE_READ_ERROR, "nope", file_path="itemid.json")

        assert isinstance(error, InfrastructureError)
        assert error.context.file_path == "itemid.json"

    def test_cli_error(self) -> None:
        error = create_cli_error("Unexpected error: x", command="pet info", exit_code=2)

        assert error.code == ErrorCode.CLI_UNEXPECTED_ERROR
        assert error.command == "pet info"
        assert error.exit_code == 2
