"""Log commands: rich logs by user, ID type or log type, and daily inputs."""

from __future__ import annotations

from typing import Annotated

import typer

from bcncli.cli.common import runtime
from bcncli.cli.common.error_handler import handle_cli_errors
from bcncli.cli.common.options import page_option
from bcncli.cli.output import print_json
from bcncli.services import request_descriptor as requests_
from bcncli.shared.constants import CLICommands, CLIDefaults, CLIHelp
from bcncli.shared.errors import create_validation_error
from bcncli.shared.formatting import parse_id

app = typer.Typer(name=CLICommands.LOGS, help=CLIHelp.LOGS_HELP, no_args_is_help=True)

LOG_ID_TYPES = ("faction", "item")


@app.command("bcid")
@handle_cli_errors("logs bcid")
def bcid(
    bc_id: Annotated[str, typer.Argument(metavar="BCID", help="User ID")],
    page: Annotated[int, page_option] = CLIDefaults.DEFAULT_PAGE,
) -> None:
    """List logs for a user by BCID."""
    print_json(runtime.get_client().fetch(requests_.rich_logs_by_bc_id(parse_id(bc_id), page)))


@app.command("idtype")
@handle_cli_errors("logs idtype")
def idtype(
    id_type: Annotated[str, typer.Argument(metavar="faction|item", help="Kind of ID")],
    id_: Annotated[str, typer.Argument(metavar="ID", help="Faction ID or item ID")],
    page: Annotated[int, page_option] = CLIDefaults.DEFAULT_PAGE,
) -> None:
    """List logs by ID type (factionId or itemId)."""
    if id_type not in LOG_ID_TYPES:
        raise create_validation_error(
            f"Invalid ID type '{id_type}', must be 'faction' or 'item'",
            field="id_type",
            operation="logs idtype",
        )
    descriptor = requests_.rich_logs_by_id_type(requests_.ID_TYPES_BY_NAME[id_type], parse_id(id_), page)
    print_json(runtime.get_client().fetch(descriptor))


@app.command("logtype")
@handle_cli_errors("logs logtype")
def logtype(
    log_type: Annotated[str, typer.Argument(metavar="LOGTYPE", help="Log type")],
    page: Annotated[int, page_option] = CLIDefaults.DEFAULT_PAGE,
) -> None:
    """List logs by log type."""
    print_json(runtime.get_client().fetch(requests_.rich_logs_by_log_type(log_type, page)))


@app.command("inputs")
@handle_cli_errors("logs inputs")
def inputs(
    bc_id: Annotated[str, typer.Argument(metavar="BCID", help="User ID")],
    date: Annotated[str, typer.Argument(help="Date, e.g. 2024-05-01")],
) -> None:
    """List daily inputs for user on a date."""
    print_json(runtime.get_client().fetch(requests_.daily_user_inputs(parse_id(bc_id), date)))
