"""Game data commands: the item catalog and the static reference tables."""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.table import Table

from bcncli.cli.common import runtime
from bcncli.cli.common.error_handler import handle_cli_errors
from bcncli.cli.output import add_row, new_table, print_json, print_tables
from bcncli.services import request_descriptor as requests_
from bcncli.services.item_catalog import find_item, lookup_item_name, persist_catalog
from bcncli.shared import game_data
from bcncli.shared.constants import CLICommands, CLIHelp, CLIOptions
from bcncli.shared.formatting import format_price, sanitize_emoji
from bcncli.shared.models import Item

app = typer.Typer(name=CLICommands.GAMEDATA, help=CLIHelp.GAMEDATA_HELP, no_args_is_help=True)


def render_item(item: Item, items: list[Item]) -> list[Table]:
    """Detail table for one item, followed by its recipe when it has one."""
    details = new_table("Field", "Value")
    for field, value in (
        ("ID", item.id),
        ("Emoji", sanitize_emoji(item.emoji)),
        ("Name", item.name),
        ("Description", item.description),
        ("Uncraftable", str(item.uncraftable).lower()),
        ("Cost", item.cost),
        ("Attributes", ", ".join(item.attributes)),
        ("LootSources", ", ".join(item.loot_sources)),
        ("UseLimit", item.use_limit),
        ("UsedToCraft", ", ".join(lookup_item_name(uid, items) for uid in item.used_to_craft)),
        ("ImageURL", item.image_url),
    ):
        add_row(details, field, value)

    tables = [details]
    if item.recipe:
        recipe = new_table("Name", "Count", title="Recipe Components")
        for component in item.recipe:
            add_row(recipe, lookup_item_name(component.id, items), component.count)
        tables.append(recipe)
    return tables


@app.command("items")
@handle_cli_errors("gamedata items")
def items(
    cache: Annotated[
        bool,
        typer.Option(CLIOptions.CACHE, CLIOptions.CACHE_SHORT, help="Also save the catalog to the cache file"),
    ] = False,
) -> None:
    """Fetch item data."""
    raw = runtime.get_client().fetch(requests_.item_data())
    if cache:
        path = runtime.get_cache_path()
        if persist_catalog(path, raw):
            typer.echo(f"Data cached to {path}", err=True)
    print_json(raw, operation="gamedata items")


@app.command("item")
@handle_cli_errors("gamedata item")
def item(query: Annotated[str, typer.Argument(metavar="ID_OR_NAME", help="Item ID, name or idName")]) -> None:
    """Fetch details for a specific item."""
    catalog = runtime.load_items(should_persist=False)
    print_tables(render_item(find_item(catalog, query), catalog))


@app.command("food")
@handle_cli_errors("gamedata food")
def food() -> None:
    """List pet foods and the energy they restore."""
    table = new_table("Name", "Energy")
    for entry in game_data.ALL_FOOD_ITEMS:
        add_row(table, entry.name, entry.energy)
    print_tables([table])


@app.command("boosts")
@handle_cli_errors("gamedata boosts")
def boosts() -> None:
    """List pet adventure boosts."""
    table = new_table("Name", "Worth", "Effect")
    for entry in game_data.ALL_PET_BOOST_ITEMS:
        add_row(table, entry.name, format_price(entry.worth), entry.effect)
    print_tables([table])


@app.command("pets")
@handle_cli_errors("gamedata pets")
def pets(
    category: Annotated[
        Optional[str],
        typer.Option("--category", help="Only pets of this adventure category (e.g. Fish, Mine)"),
    ] = None,
) -> None:
    """List pet species and their adventure categories."""
    entries = game_data.get_pets_by_category(category) if category else game_data.ALL_PET_TYPES
    table = new_table("Icon", "Name", "Category")
    for entry in entries:
        add_row(table, entry.icon, entry.name, entry.category)
    print_tables([table])
