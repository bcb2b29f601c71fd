"""Leaderboard commands."""

from __future__ import annotations

from typing import Annotated, Optional

import typer

from bcncli.cli.common import runtime
from bcncli.cli.common.error_handler import handle_cli_errors
from bcncli.cli.common.options import page_option
from bcncli.cli.output import print_json
from bcncli.services import request_descriptor as requests_
from bcncli.shared.constants import CLICommands, CLIDefaults, CLIHelp
from bcncli.shared.errors import create_validation_error

app = typer.Typer(name=CLICommands.LEADERBOARD, help=CLIHelp.LEADERBOARD_HELP, no_args_is_help=True)


def validate_user_leaderboard(lb_type: str, stat: str | None, item_id: int | None) -> None:
    """Check the flags that a leaderboard type depends on.

    Raises:
        ValidationError: ``stat`` boards without --stat, ``item`` boards without --itemId
    """
    if lb_type == "stat" and not stat:
        raise create_validation_error(
            "--stat is required when --lbType=stat",
            field="stat",
            operation="leaderboard user",
        )
    if lb_type == "item" and not item_id:
        raise create_validation_error(
            "--itemId is required when --lbType=item",
            field="itemId",
            operation="leaderboard user",
        )


@app.command("user")
@handle_cli_errors("leaderboard user")
def user(
    lb_type: Annotated[
        str,
        typer.Option("--lbType", "-t", help="Leaderboard type: rank, questLevel, stat, or item"),
    ],
    stat: Annotated[
        Optional[str],
        typer.Option("--stat", "-s", help="Statistic name (required if --lbType=stat)"),
    ] = None,
    item_id: Annotated[
        Optional[int],
        typer.Option("--itemId", "-i", help="Item ID (required if --lbType=item)"),
    ] = None,
    page: Annotated[int, page_option] = CLIDefaults.DEFAULT_PAGE,
) -> None:
    """Show user leaderboard."""
    validate_user_leaderboard(lb_type, stat, item_id)
    descriptor = requests_.user_leaderboard(lb_type, page, stat=stat, item_id=item_id)
    print_json(runtime.get_client().fetch(descriptor))


@app.command("faction")
@handle_cli_errors("leaderboard faction")
def faction(
    stat: Annotated[str, typer.Option("--stat", "-s", help="fpDepositedMonthly or fpDepositedTotal")],
    page: Annotated[int, page_option] = CLIDefaults.DEFAULT_PAGE,
) -> None:
    """Show faction leaderboard."""
    print_json(runtime.get_client().fetch(requests_.faction_leaderboard(stat, page)))


@app.command("pets")
@handle_cli_errors("leaderboard pets")
def pets(page: Annotated[int, page_option] = CLIDefaults.DEFAULT_PAGE) -> None:
    """Show pets leaderboard."""
    print_json(runtime.get_client().fetch(requests_.pets_leaderboard(page)))
