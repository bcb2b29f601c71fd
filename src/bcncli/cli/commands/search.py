"""Search commands."""

from __future__ import annotations

from typing import Annotated

import typer

from bcncli.cli.common import runtime
from bcncli.cli.common.error_handler import handle_cli_errors
from bcncli.cli.output import print_json
from bcncli.services import request_descriptor as requests_
from bcncli.shared.constants import CLICommands, CLIHelp

app = typer.Typer(name=CLICommands.SEARCH, help=CLIHelp.SEARCH_HELP, no_args_is_help=True)


@app.command("user")
@handle_cli_errors("search user")
def user(query: Annotated[str, typer.Argument(help="Name to search for")]) -> None:
    """Search users by name."""
    print_json(runtime.get_client().fetch(requests_.search_users(query)))


@app.command("faction")
@handle_cli_errors("search faction")
def faction(query: Annotated[str, typer.Argument(help="Name to search for")]) -> None:
    """Search factions by name."""
    print_json(runtime.get_client().fetch(requests_.search_factions(query)))


@app.command("pet")
@handle_cli_errors("search pet")
def pet(
    skin: Annotated[str, typer.Option("--skin", "-s", help="Skin filter: specific, 'no skin', or 'any skin'")] = "any skin",
    aura: Annotated[str, typer.Option("--aura", "-a", help="Aura filter: specific, 'no aura', or 'any aura'")] = "any aura",
    species: Annotated[
        str, typer.Option("--species", "-c", help="Species filter: specific or 'any species'")
    ] = "any species",
    name: Annotated[str, typer.Option("--name", "-n", help="Name query filter")] = "",
) -> None:
    """Search pets by properties."""
    print_json(runtime.get_client().fetch(requests_.search_pets(skin, aura, species, name)))
