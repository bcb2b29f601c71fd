"""
Output helpers for CLI commands.

Raw API responses are printed as indented JSON with orjson; rendered views
use rich tables. Cell values are wrapped in ``Text`` so that brackets in
game data are never interpreted as rich markup.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import orjson
import typer
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from bcncli.services.client import decode_json
from bcncli.shared.constants import TableStyles


def get_console() -> Console:
    """Console writing to the current stdout."""
    return Console(highlight=False)


def print_json(raw: bytes | None, operation: str = "print_json") -> None:
    """Pretty-print a JSON document with two-space indentation.

    Raises:
        ParseError: If ``raw`` is empty or not valid JSON
    """
    data = decode_json(raw, operation=operation)
    print_data(data)


def print_data(data: Any) -> None:
    """Pretty-print an already decoded JSON value."""
    typer.echo(orjson.dumps(data, option=orjson.OPT_INDENT_2).decode())


def new_table(*columns: str, title: str | None = None, show_header: bool = True) -> Table:
    """Create a table with the shared header style."""
    table = Table(
        title=title,
        title_style=TableStyles.SECTION_TITLE,
        title_justify="left",
        header_style=TableStyles.HEADER,
        show_header=show_header,
        box=box.SIMPLE,
    )
    for column in columns:
        table.add_column(column)
    return table


def add_row(table: Table, *values: Any) -> None:
    """Add a row, rendering every value as plain text."""
    table.add_row(*(Text(str(value)) for value in values))


def print_tables(tables: Iterable[Table]) -> None:
    console = get_console()
    for table in tables:
        console.print(table)
