"""
Test the root command.

The main callback stores the global options in the CLI context, loads
the settings and configures logging before any command runs.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from bcncli import __version__
from bcncli.cli.common.context import CliContext, LogLevel, get_cli_context
from bcncli.cli.typer_app import app, main_callback, version_callback
from bcncli.config import get_config
from bcncli.shared.errors import ConfigError


def test_main_callback_sets_context() -> None:
    main_callback(
        verbose=0,
        log_level=LogLevel.ERROR,
        json_output=True,
        api_key="key",
        config_path=None,
        cache_file="other.json",
    )

    context = get_cli_context()
    assert context.log_level == LogLevel.ERROR
    assert context.json_output is True
    assert get_config().api.api_key == "key"
    assert get_config().cache.file_name == "other.json"
    assert logging.getLogger("bcncli").level == logging.ERROR


def test_verbose_forces_debug_logging() -> None:
    main_callback(
        verbose=1,
        log_level=LogLevel.ERROR,
        json_output=False,
        api_key=None,
        config_path=None,
        cache_file=None,
    )

    assert logging.getLogger("bcncli").level == logging.DEBUG


def test_configured_level_is_the_default(tmp_path: Path) -> None:
    config = tmp_path / "config.toml"
    config.write_text('[logging]\nlevel = "INFO"\n', encoding="utf-8")

    main_callback(0, None, False, None, config, None)

    assert logging.getLogger("bcncli").level == logging.INFO


def test_main_callback_propagates_config_errors(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        main_callback(0, None, False, None, tmp_path / "missing.toml", None)


def test_effective_log_level() -> None:
    assert CliContext().get_effective_log_level("WARNING") == "WARNING"
    assert CliContext(log_level=LogLevel.INFO).get_effective_log_level("WARNING") == "INFO"
    assert CliContext(verbose=2, log_level=LogLevel.INFO).get_effective_log_level("WARNING") == "DEBUG"


def test_api_key_is_not_in_context_repr() -> None:
    assert "secret" not in repr(CliContext(api_key="secret"))


def test_version_callback() -> None:
    version_callback(False)
    with pytest.raises(typer.Exit):
        version_callback(True)


class TestApp:
    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"bcncli version {__version__}" in result.output

    def test_help_lists_command_groups(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for group in ("profile", "pet", "egg", "faction", "market", "leaderboard", "logs", "search", "gamedata"):
            assert group in result.output

    def test_missing_config_file_exits_with_error(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["--config", str(tmp_path / "missing.toml"), "gamedata", "food"])

        assert result.exit_code == 1
        assert "Configuration file not found" in result.output
