"""Market commands: price overview and listings by item or by seller."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Annotated, Any

import typer
from rich.table import Table

from bcncli.cli.common import runtime
from bcncli.cli.common.error_handler import handle_cli_errors
from bcncli.cli.common.options import debug_option
from bcncli.cli.output import add_row, new_table, print_json, print_tables
from bcncli.services import request_descriptor as requests_
from bcncli.services.client import decode_json
from bcncli.shared.constants import CLICommands, CLIHelp, CLIOptions
from bcncli.shared.errors import create_validation_error
from bcncli.shared.formatting import format_price, parse_id
from bcncli.shared.models import Item, Listing, MarketOverview, validate_payload

app = typer.Typer(name=CLICommands.MARKET, help=CLIHelp.MARKET_HELP, no_args_is_help=True)

OVERVIEW_KEY_PREFIX = "item"


@dataclass(frozen=True)
class OverviewRow:
    item_id: int
    name: str
    value: int


OVERVIEW_SORT_KEYS: dict[str, Callable[[OverviewRow], Any]] = {
    "id": lambda row: row.item_id,
    "name": lambda row: row.name,
    "price": lambda row: row.value,
}

overview_sort_option = typer.Option(
    CLIOptions.SORT,
    CLIOptions.SORT_SHORT,
    help="sort overview by: id, name, or price",
)


def _names_by_id(items: Iterable[Item]) -> dict[int, str]:
    return {item.id: item.name for item in items}


def _display_name(item_id: int, names: dict[int, str]) -> str:
    return names.get(item_id) or f"UNKNOWN({item_id})"


def overview_sort_key(sort_by: str) -> Callable[[OverviewRow], Any]:
    """
    Raises:
        ValidationError: If ``sort_by`` is not id, name or price
    """
    key = OVERVIEW_SORT_KEYS.get(sort_by.lower())
    if key is None:
        raise create_validation_error(
            f"invalid sort option: {sort_by} (must be id, name, or price)",
            field="sort",
            operation="market overview",
        )
    return key


def overview_rows(overview: MarketOverview, items: Iterable[Item], sort_by: str = "id") -> list[OverviewRow]:
    """Turn ``item<ID>`` entries into sorted rows; other keys are skipped."""
    names = _names_by_id(items)
    rows = []
    for key, value in overview.data.items():
        if not key.startswith(OVERVIEW_KEY_PREFIX):
            continue
        try:
            item_id = int(key[len(OVERVIEW_KEY_PREFIX) :])
        except ValueError:
            continue
        rows.append(OverviewRow(item_id, _display_name(item_id, names), value))
    return sorted(rows, key=overview_sort_key(sort_by))


def render_overview(rows: Iterable[OverviewRow]) -> Table:
    table = new_table("ITEM", "VALUE")
    for row in rows:
        add_row(table, f"{row.name} ({row.item_id})", format_price(row.value))
    return table


def render_listings(listings: Iterable[Listing], items: Iterable[Item]) -> Table:
    names = _names_by_id(items)
    table = new_table("ITEM", "PRICE", "AMOUNT")
    for listing in listings:
        add_row(
            table,
            f"{_display_name(listing.item_id, names)} ({listing.item_id})",
            format_price(listing.price),
            listing.amount,
        )
    return table


def _show_listings(descriptor: requests_.RequestDescriptor, debug: bool, operation: str) -> None:
    raw = runtime.get_client().fetch(descriptor)
    if debug:
        print_json(raw, operation=operation)
        return

    listings = validate_payload(list[Listing], decode_json(raw, operation=operation), operation=operation)
    print_tables([render_listings(listings, runtime.load_items())])


@app.command("overview")
@handle_cli_errors("market overview")
def overview(
    debug: Annotated[bool, debug_option] = False,
    sort: Annotated[str, overview_sort_option] = "id",
) -> None:
    """Show market overview."""
    overview_sort_key(sort)

    raw = runtime.get_client().fetch(requests_.market_preview())
    if debug:
        print_json(raw, operation="market overview")
        return

    preview = validate_payload(
        MarketOverview,
        decode_json(raw, operation="market overview"),
        operation="market overview",
    )
    print_tables([render_overview(overview_rows(preview, runtime.load_items(), sort))])


@app.command("item")
@handle_cli_errors("market item")
def item(
    item_id: Annotated[str, typer.Argument(help="Item ID")],
    debug: Annotated[bool, debug_option] = False,
) -> None:
    """List market listings for an item."""
    _show_listings(requests_.market_listings(parse_id(item_id)), debug, "market item")


@app.command("user")
@handle_cli_errors("market user")
def user(
    bc_id: Annotated[str, typer.Argument(metavar="BCID", help="User ID")],
    debug: Annotated[bool, debug_option] = False,
) -> None:
    """List market listings for a user."""
    _show_listings(requests_.user_market_listings(parse_id(bc_id)), debug, "market user")
