"""Pet commands."""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated, Any, Optional

import typer
from rich.table import Table

from bcncli.cli.common import runtime
from bcncli.cli.common.error_handler import handle_cli_errors
from bcncli.cli.common.options import debug_option
from bcncli.cli.output import add_row, new_table, print_data, print_json, print_tables
from bcncli.services import request_descriptor as requests_
from bcncli.shared.constants import CLICommands, CLIHelp, CLIOptions
from bcncli.shared.errors import create_validation_error
from bcncli.shared.formatting import epoch_ms_to_iso, parse_id
from bcncli.shared.models import Pet, validate_payload

app = typer.Typer(name=CLICommands.PET, help=CLIHelp.PET_HELP, no_args_is_help=True)

PET_COLUMNS = ("ID", "Name", "Species", "Tier", "XP", "Adventure", "Items", "Boost", "Ends")

PET_SORT_KEYS: dict[str, Callable[[Pet], Any]] = {
    "id": lambda pet: pet.id,
    "name": lambda pet: pet.name,
    "species": lambda pet: pet.species,
    "tier": lambda pet: pet.tier,
    "xp": lambda pet: pet.xp,
    "adventure": lambda pet: pet.adventure_type,
    "items": lambda pet: pet.lifetime_items_found,
    "boost": lambda pet: pet.adventure_boost.multiplier,
}

PET_GROUP_KEYS: dict[str, Callable[[Pet], str]] = {
    "species": lambda pet: pet.species,
    "tier": lambda pet: str(pet.tier),
    "boost": lambda pet: str(pet.adventure_boost.multiplier),
    "adventure": lambda pet: pet.adventure_type,
    "craving": lambda pet: str(pet.craving.item_id),
}

sort_option = typer.Option(
    CLIOptions.SORT,
    help="Sort table by this field (id, name, species, tier, xp, adventure, items, boost)",
)
group_option = typer.Option(
    CLIOptions.GROUP,
    help="Group table by this field (species, tier, boost, adventure, craving)",
)


def _lookup(keys: dict[str, Callable[[Pet], Any]], flag: str | None, kind: str) -> Callable[[Pet], Any] | None:
    if not flag:
        return None
    key = keys.get(flag.lower())
    if key is None:
        raise create_validation_error(f"Invalid {kind} field: {flag}", field=kind, operation="pet owned")
    return key


def _pet_table(pets: list[Pet], title: str | None = None) -> Table:
    table = new_table(*PET_COLUMNS, title=title)
    for pet in pets:
        add_row(
            table,
            pet.id,
            pet.name,
            pet.species,
            pet.tier,
            pet.xp,
            pet.adventure_type,
            pet.lifetime_items_found,
            pet.adventure_boost.multiplier,
            epoch_ms_to_iso(pet.adventure_boost.end_time),
        )
    return table


def render_pets(pets: list[Pet], sort_by: str | None = None, group_by: str | None = None) -> list[Table]:
    """Build the owned-pets view: one table, or one table per group.

    Groups are ordered by their key as a string and titled ``"<key> (<count>)"``.

    Raises:
        ValidationError: If the sort or group field is not supported
    """
    sort_key = _lookup(PET_SORT_KEYS, sort_by, "sort")
    group_key = _lookup(PET_GROUP_KEYS, group_by, "group")

    if sort_key is not None:
        pets = sorted(pets, key=sort_key)

    if group_key is None:
        return [_pet_table(pets)]

    groups: dict[str, list[Pet]] = {}
    for pet in pets:
        groups.setdefault(group_key(pet), []).append(pet)
    return [_pet_table(groups[key], title=f"{key} ({len(groups[key])})") for key in sorted(groups)]


@app.command("info")
@handle_cli_errors("pet info")
def info(pet_id: Annotated[str, typer.Argument(help="Pet ID")]) -> None:
    """Fetch pet info."""
    print_json(runtime.get_client().fetch(requests_.pet(parse_id(pet_id))))


@app.command("owned")
@handle_cli_errors("pet owned")
def owned(
    user_id: Annotated[str, typer.Argument(help="User ID")],
    debug: Annotated[bool, debug_option] = False,
    sort: Annotated[Optional[str], sort_option] = None,
    group: Annotated[Optional[str], group_option] = None,
) -> None:
    """List pets for a user."""
    bc_id = parse_id(user_id)
    _lookup(PET_SORT_KEYS, sort, "sort")
    _lookup(PET_GROUP_KEYS, group, "group")

    resp = runtime.get_client().fetch_json(requests_.user_pets_and_eggs(bc_id))
    raw_pets = resp.get("pets") if isinstance(resp, dict) else None
    if debug:
        print_data(raw_pets)
        return

    pets = validate_payload(list[Pet], raw_pets or [], operation="pet owned")
    print_tables(render_pets(pets, sort, group))


@app.command("offspring")
@handle_cli_errors("pet offspring")
def offspring(pet_id: Annotated[str, typer.Argument(help="Pet ID")]) -> None:
    """Fetch offspring."""
    print_json(runtime.get_client().fetch(requests_.pet_offspring(parse_id(pet_id))))
