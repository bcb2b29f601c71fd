"""Egg commands."""

from __future__ import annotations

from typing import Annotated

import typer

from bcncli.cli.common import runtime
from bcncli.cli.common.error_handler import handle_cli_errors
from bcncli.cli.output import print_data, print_json
from bcncli.services import request_descriptor as requests_
from bcncli.shared.constants import CLICommands, CLIHelp
from bcncli.shared.formatting import parse_id

app = typer.Typer(name=CLICommands.EGG, help=CLIHelp.EGG_HELP, no_args_is_help=True)


@app.command("info")
@handle_cli_errors("egg info")
def info(egg_id: Annotated[str, typer.Argument(help="Egg ID")]) -> None:
    """Fetch egg info."""
    print_json(runtime.get_client().fetch(requests_.egg(parse_id(egg_id))))


@app.command("owned")
@handle_cli_errors("egg owned")
def owned(user_id: Annotated[str, typer.Argument(help="User ID")]) -> None:
    """List eggs for a user."""
    resp = runtime.get_client().fetch_json(requests_.user_pets_and_eggs(parse_id(user_id)))
    print_data(resp.get("eggs") if isinstance(resp, dict) else None)


@app.command("offspring")
@handle_cli_errors("egg offspring")
def offspring(egg_id: Annotated[str, typer.Argument(help="Egg ID")]) -> None:
    """Fetch offspring for an egg."""
    print_json(runtime.get_client().fetch(requests_.pet_offspring(parse_id(egg_id))))
