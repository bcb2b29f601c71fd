"""
Reusable Typer Options Module

This module provides reusable Typer options shared by the main callback
and the commands, so flag names and help texts stay consistent. Use them
as ``Annotated`` metadata:

    def command(debug: Annotated[bool, debug_option] = False) -> None: ...
"""

from __future__ import annotations

import typer

from bcncli.shared.constants import CLIHelp, CLIOptions

# Verbose option - count-based for multiple -v flags
verbose_option = typer.Option(
    "--verbose",
    "-v",
    count=True,
    help="Enable verbose output (equivalent to --log-level DEBUG).",
)

# Log level option - enum-based with case-insensitive choices
log_level_option = typer.Option(
    "--log-level",
    case_sensitive=False,
    help="Set the logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
)

# JSON output option - flag-based
json_output_option = typer.Option(
    "--json",
    help="Report errors as machine-readable JSON.",
)

# Version option - for main app only
version_option = typer.Option(
    "--version",
    "-V",
    help="Show version information and exit.",
    is_eager=True,
)

api_key_option = typer.Option(CLIOptions.API_KEY, help=CLIHelp.API_KEY_HELP)

config_option = typer.Option(CLIOptions.CONFIG, help=CLIHelp.CONFIG_HELP, dir_okay=False)

cache_file_option = typer.Option(CLIOptions.CACHE_FILE, help=CLIHelp.CACHE_FILE_HELP)

# Command options
debug_option = typer.Option(CLIOptions.DEBUG, CLIOptions.DEBUG_SHORT, help=CLIHelp.DEBUG_HELP)

page_option = typer.Option(CLIOptions.PAGE, CLIOptions.PAGE_SHORT, min=1, help=CLIHelp.PAGE_HELP)
