"""
bcncli Typer CLI Application

The root command parses the global options (API key, configuration file,
cache file, logging and error format), loads the settings once and then
dispatches to one of the command groups.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer

from bcncli import __version__
from bcncli.cli.commands import egg, faction, gamedata, leaderboard, logs, market, pet, profile, search
from bcncli.cli.common import runtime
from bcncli.cli.common.context import CliContext, LogLevel, set_cli_context
from bcncli.cli.common.error_handler import handle_cli_error
from bcncli.cli.common.options import (
    api_key_option,
    cache_file_option,
    config_option,
    json_output_option,
    log_level_option,
    verbose_option,
    version_option,
)
from bcncli.config import reload_config
from bcncli.shared.constants import CLIHelp
from bcncli.utils.logging_config import setup_logging


def version_callback(value: bool) -> None:
    """Print version information and exit."""
    if value:
        typer.echo(CLIHelp.VERSION_TEXT.format(version=__version__))
        raise typer.Exit


def main_callback(
    verbose: int,
    log_level: LogLevel | None,
    json_output: bool,
    api_key: str | None,
    config_path: Path | None,
    cache_file: str | None,
) -> None:
    """
    Set up the CLI context, the settings and logging for this invocation.

    Raises:
        ConfigError: If the configuration file cannot be loaded
    """
    context = CliContext(
        verbose=verbose,
        log_level=log_level,
        json_output=json_output,
        api_key=api_key,
        config_path=config_path,
        cache_file=cache_file,
    )
    set_cli_context(context)

    runtime.close_client()
    settings = reload_config(config_path, api_key, cache_file)
    setup_logging(
        context.get_effective_log_level(settings.logging.level),
        settings.logging.file,
        max_bytes=settings.logging.max_bytes,
        backup_count=settings.logging.backup_count,
    )


app = typer.Typer(
    name=CLIHelp.APP_NAME,
    help=CLIHelp.APP_DESCRIPTION,
    add_completion=True,
    rich_markup_mode=CLIHelp.APP_STYLE,
    no_args_is_help=True,
    invoke_without_command=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: Annotated[int, verbose_option] = 0,
    log_level: Annotated[Optional[LogLevel], log_level_option] = None,
    json_output: Annotated[bool, json_output_option] = False,
    version: Annotated[bool, version_option] = False,
    api_key: Annotated[Optional[str], api_key_option] = None,
    config_path: Annotated[Optional[Path], config_option] = None,
    cache_file: Annotated[Optional[str], cache_file_option] = None,
) -> None:
    """BCN CLI interacts with the bconomy API."""
    version_callback(version)
    ctx.call_on_close(runtime.close_client)

    try:
        main_callback(verbose, log_level, json_output, api_key, config_path, cache_file)
    except Exception as e:  # noqa: BLE001
        exit_code = handle_cli_error(e, "main-callback", json_output=json_output)
        raise typer.Exit(exit_code) from e


app.add_typer(profile.app)
app.add_typer(pet.app)
app.add_typer(egg.app)
app.add_typer(faction.app)
app.add_typer(market.app)
app.add_typer(leaderboard.app)
app.add_typer(logs.app)
app.add_typer(search.app)
app.add_typer(gamedata.app)


if __name__ == "__main__":
    app()
