"""Tests for CLI error handling."""

from __future__ import annotations

import orjson
import pytest
import typer

from bcncli.cli.common.context import CliContext, set_cli_context
from bcncli.cli.common.error_handler import format_json_output, handle_cli_error, handle_cli_errors
from bcncli.shared.errors import (
    CliError,
    ErrorCode,
    ErrorContext,
    RemoteError,
    create_validation_error,
)


class TestHandleCliError:
    def test_bconomy_error_goes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = handle_cli_error(create_validation_error("Invalid ID: x"), "pet info")

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.err == "Error: Invalid ID: x\n"
        assert captured.out == ""

    def test_keyboard_interrupt(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert handle_cli_error(KeyboardInterrupt(), "pet info") == 130
        assert "interrupted" in capsys.readouterr().err

    def test_unexpected_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert handle_cli_error(RuntimeError("kaboom"), "pet info") == 1
        assert "Error: Unexpected error: kaboom" in capsys.readouterr().err

    def test_cli_error_keeps_exit_code(self) -> None:
        error = CliError(ErrorCode.CLI_UNEXPECTED_ERROR, "nope", exit_code=3)

        assert handle_cli_error(error, "pet info") == 3

    def test_json_envelope(self, capsys: pytest.CaptureFixture[str]) -> None:
        error = RemoteError(
            ErrorCode.API_REQUEST_FAILED,
            "API returned status 503",
            status_code=503,
            context=ErrorContext(operation="fetch"),
        )

        handle_cli_error(error, "market overview", json_output=True)

        envelope = orjson.loads(capsys.readouterr().out)
        assert envelope["success"] is False
        assert envelope["errors"] == ["API returned status 503"]
        assert envelope["data"]["status_code"] == 503
        assert envelope["data"]["error_type"] == "RemoteError"
        assert envelope["data"]["context"]["operation"] == "fetch"


def test_format_json_output_success() -> None:
    output = orjson.loads(format_json_output("gamedata food", success=True, data={"rows": 3}))

    assert output["success"] is True
    assert output["errors"] == []
    assert output["data"] == {"rows": 3}


class TestDecorator:
    def test_converts_errors_to_exit(self, capsys: pytest.CaptureFixture[str]) -> None:
        @handle_cli_errors("pet info")
        def command() -> None:
            raise create_validation_error("Invalid ID: x")

        with pytest.raises(typer.Exit) as exc_info:
            command()

        assert exc_info.value.exit_code == 1
        assert "Error: Invalid ID: x" in capsys.readouterr().err

    def test_uses_json_flag_from_context(self, capsys: pytest.CaptureFixture[str]) -> None:
        set_cli_context(CliContext(json_output=True))

        @handle_cli_errors("pet info")
        def command() -> None:
            raise create_validation_error("Invalid ID: x")

        with pytest.raises(typer.Exit):
            command()

        assert orjson.loads(capsys.readouterr().out)["command"] == "pet info"

    def test_exit_passes_through(self) -> None:
        @handle_cli_errors("pet info")
        def command() -> None:
            raise typer.Exit(4)

        with pytest.raises(typer.Exit) as exc_info:
            command()

        assert exc_info.value.exit_code == 4

    def test_return_value_is_kept(self) -> None:
        @handle_cli_errors("pet info")
        def command(value: int) -> int:
            return value * 2

        assert command(21) == 42
