"""Faction commands."""

from __future__ import annotations

from typing import Annotated

import typer

from bcncli.cli.common import runtime
from bcncli.cli.common.error_handler import handle_cli_errors
from bcncli.cli.output import print_json
from bcncli.services import request_descriptor as requests_
from bcncli.shared.constants import CLICommands, CLIHelp
from bcncli.shared.errors import create_validation_error
from bcncli.shared.formatting import parse_id

app = typer.Typer(name=CLICommands.FACTION, help=CLIHelp.FACTION_HELP, no_args_is_help=True)

JOIN_REQUEST_ID_TYPES = ("faction", "user")


@app.command("info")
@handle_cli_errors("faction info")
def info(faction_id: Annotated[str, typer.Argument(help="Faction ID")]) -> None:
    """Fetch faction info."""
    print_json(runtime.get_client().fetch(requests_.faction(parse_id(faction_id))))


@app.command("members")
@handle_cli_errors("faction members")
def members(faction_id: Annotated[str, typer.Argument(help="Faction ID")]) -> None:
    """List faction members."""
    print_json(runtime.get_client().fetch(requests_.faction_members(parse_id(faction_id))))


@app.command("recruiting")
@handle_cli_errors("faction recruiting")
def recruiting() -> None:
    """List recruiting factions."""
    print_json(runtime.get_client().fetch(requests_.recruiting_factions()))


@app.command("requests")
@handle_cli_errors("faction requests")
def join_requests(
    id_type: Annotated[str, typer.Argument(metavar="faction|user", help="Look up by faction or by user")],
    id_: Annotated[str, typer.Argument(metavar="ID", help="Faction ID or user ID")],
) -> None:
    """List join requests by faction or user."""
    if id_type not in JOIN_REQUEST_ID_TYPES:
        raise create_validation_error(
            f"Invalid type {id_type}, must be 'faction' or 'user'",
            field="id_type",
            operation="faction requests",
        )
    wire_type = requests_.ID_TYPES_BY_NAME[id_type]
    print_json(runtime.get_client().fetch(requests_.faction_join_requests(wire_type, parse_id(id_))))
