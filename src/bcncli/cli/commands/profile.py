"""Profile commands: detailed profile view and raw profile datasets."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Annotated, Optional

import typer
from rich.table import Table

from bcncli.cli.common import runtime
from bcncli.cli.common.error_handler import handle_cli_errors
from bcncli.cli.common.options import debug_option
from bcncli.cli.output import add_row, new_table, print_json, print_tables
from bcncli.services import request_descriptor as requests_
from bcncli.services.client import decode_json
from bcncli.services.item_catalog import lookup_item_name
from bcncli.shared.constants import CLICommands, CLIHelp, CLIOptions
from bcncli.shared.errors import create_validation_error
from bcncli.shared.formatting import NO_TIMESTAMP, epoch_ms_to_iso, humanize_elapsed, parse_id
from bcncli.shared.models import FarmPlot, Item, ProfileInfo, validate_payload

app = typer.Typer(name=CLICommands.PROFILE, help=CLIHelp.PROFILE_HELP, no_args_is_help=True)

SECTIONS = (
    "basic",
    "faction",
    "farms",
    "generators",
    "quests",
    "cooldowns",
    "effects",
    "upgrades",
    "perks",
    "settings",
    "custom",
)

# Sections that show item names and therefore need the item catalog
_ITEM_SECTIONS = frozenset({"farms", "quests"})

_FARM_SORT_KEYS: dict[str, Callable[[FarmPlot], int]] = {
    "plant": lambda plot: plot.status.item_id,
    "item": lambda plot: plot.status.item_id,
    "level": lambda plot: plot.level,
}

filter_option = typer.Option(
    CLIOptions.FILTER,
    CLIOptions.FILTER_SHORT,
    help="comma-separated list of sections to print (e.g. basic,farms)",
)
sort_option = typer.Option(
    CLIOptions.SORT,
    CLIOptions.SORT_SHORT,
    help="sorting key for a section (farm:plant, farm:item or farm:level)",
)


def parse_filter(raw: str | None) -> set[str] | None:
    """Turn ``"Basic, farms"`` into ``{"basic", "farms"}``; None means every section."""
    if not raw:
        return None
    sections = {part.strip().lower() for part in raw.split(",")}
    sections.discard("")
    return sections or None


def farm_sort_key(sort_flag: str | None) -> Callable[[FarmPlot], int] | None:
    """Key function for a ``farm:<key>`` sort flag, None when no flag is given.

    Raises:
        ValidationError: If the flag is not a supported farm sort key
    """
    if not sort_flag:
        return None

    section, _, key = sort_flag.lower().partition(":")
    if section != "farm" or key not in _FARM_SORT_KEYS:
        raise create_validation_error(
            f"Invalid sort option: {sort_flag} (must be farm:plant, farm:item or farm:level)",
            field="sort",
            operation="farm_sort_key",
        )
    return _FARM_SORT_KEYS[key]


def sort_farm_plots(plots: list[FarmPlot], sort_flag: str | None) -> list[FarmPlot]:
    """Return the plots ordered by a ``farm:<key>`` sort flag (stable)."""
    key = farm_sort_key(sort_flag)
    return sorted(plots, key=key) if key else list(plots)


def _flag(value: bool) -> str:
    return str(value).lower()


def _section(name: str) -> Table:
    return new_table("Field", "Value", title=f"=== {name.upper()} ===", show_header=False)


def _last_used(ms: int, now: datetime) -> str:
    iso = epoch_ms_to_iso(ms)
    if iso == NO_TIMESTAMP:
        return f"{iso} Last Used: {NO_TIMESTAMP}"
    return f"{iso} Last Used: {humanize_elapsed(iso, now=now)}"


def render_profile(
    profile: ProfileInfo,
    items: list[Item],
    sections: set[str] | None = None,
    sort_flag: str | None = None,
    now: datetime | None = None,
) -> list[Table]:
    """Build one table per requested profile section."""
    now = now or datetime.now(timezone.utc)
    tables: list[Table] = []

    def want(name: str) -> bool:
        return sections is None or name in sections

    if want("basic"):
        table = _section("Basic")
        for key, value in (
            ("ID", profile.id),
            ("Name", profile.name),
            ("Registered", profile.registration_date),
            ("Rank", profile.rank),
            ("Tier", profile.tier),
            ("BC", profile.bc),
            ("SP", profile.sp),
            ("KR", profile.kr),
            ("Quest Level", profile.quest_level),
            ("Daily Streak", profile.daily_claim_streak),
        ):
            add_row(table, f"{key}:", value)
        tables.append(table)

    if want("faction") and profile.faction_id != 0:
        faction = profile.faction
        table = _section("Faction")
        for key, value in (
            ("Tag", faction.tag),
            ("Name", faction.name),
            ("Member Count", faction.member_count),
            ("Owner", faction.owner_bc_id),
            ("About", faction.about),
            ("MOTD", faction.motd),
        ):
            add_row(table, f"{key}:", value)
        tables.append(table)

    if want("farms"):
        table = _section("Farm Plots")
        for number, plot in enumerate(sort_farm_plots(profile.farm_plots, sort_flag), start=1):
            text = f"Level: {plot.level} | Extra: {_flag(plot.is_extra)} | Planted: {_flag(plot.status.is_planted)}"
            if plot.status.is_planted:
                text += (
                    f"\n{lookup_item_name(plot.status.item_id, items)} ({plot.status.item_id})"
                    f" | Planted On: {epoch_ms_to_iso(plot.status.planted_time)}"
                )
            if plot.boost.multiplier > 1:
                text += f" | Boost x{plot.boost.multiplier} | Ends at {epoch_ms_to_iso(plot.boost.end_time)}"
            add_row(table, f"Plot {number}:", text)
        tables.append(table)

    if want("generators"):
        table = _section("Generators")
        for number, generator in enumerate(profile.generators, start=1):
            add_row(table, f"Gen {number}:", f"Level: {generator.level} | Extra: {_flag(generator.is_extra)}")
        tables.append(table)

    if want("quests"):
        table = _section("Quests")
        for number, quest in enumerate(profile.quests, start=1):
            add_row(
                table,
                f"Quest {number}:",
                f"{lookup_item_name(quest.item_id, items)} ({quest.item_id})\n"
                f"Required: {quest.amount_required} | Fulfilled: {quest.amount_fulfilled}",
            )
        tables.append(table)

    if want("cooldowns"):
        cooldowns = profile.cooldowns
        table = _section("Cooldowns")
        for key, ms in (
            ("Fish", cooldowns.fish),
            ("Hunt", cooldowns.hunt),
            ("Explore", cooldowns.explore),
            ("Mine", cooldowns.mine),
            ("Work", cooldowns.work),
            ("Daily", cooldowns.daily),
            ("Water", cooldowns.water),
            ("ClaimGenerators", cooldowns.claim_generators),
        ):
            add_row(table, f"{key}:", _last_used(ms, now))
        tables.append(table)

    if want("effects"):
        table = _section("Effects")
        for name in sorted(profile.effects):
            effect = profile.effects[name]
            add_row(table, f"{name} End:", epoch_ms_to_iso(effect.end_time))
            add_row(table, f"{name} Type:", effect.modifier.type)
            if effect.modifier.action:
                add_row(table, f"{name} Action:", effect.modifier.action)
            add_row(table, f"{name} Mult x:", effect.modifier.multiplier)
        tables.append(table)

    if want("upgrades"):
        upgrades = profile.upgrades
        table = _section("Upgrades")
        for key, value in (
            ("Fish", upgrades.fish),
            ("FishExtra", upgrades.fish_extra),
            ("Hunt", upgrades.hunt),
            ("HuntExtra", upgrades.hunt_extra),
            ("Explore", upgrades.explore),
            ("ExploreExtra", upgrades.explore_extra),
            ("Mine", upgrades.mine),
            ("MineExtra", upgrades.mine_extra),
            ("PetsStable", upgrades.pets_stable),
            ("PetsStableExtra", upgrades.pets_stable_extra),
        ):
            add_row(table, f"{key}:", value)
        tables.append(table)

    if want("perks"):
        perks = profile.perks
        table = _section("Perks")
        for key, value in (
            ("LowerRankCost", perks.lower_rank_cost),
            ("LowerTierCost", perks.lower_tier_cost),
            ("RaisePetSpace", perks.raise_pet_space),
            ("RaiseEquipSlots", perks.raise_equip_slots),
        ):
            add_row(table, f"{key}:", value)
        tables.append(table)

    if want("settings"):
        settings = profile.settings
        table = _section("Settings")
        if settings.profile_show_stat_id is not None:
            add_row(table, "ProfileShowStatID:", settings.profile_show_stat_id)
        add_row(table, "SyncDiscordName:", _flag(settings.sync_discord_name))
        add_row(table, "PublicDiscordProfile:", _flag(settings.public_discord_profile))
        add_row(table, "DiscordPingOnResponse:", _flag(settings.discord_ping_on_response))
        tables.append(table)

    if want("custom"):
        custom = profile.custom
        table = _section("Custom")
        add_row(table, "HideAvatar:", _flag(custom.profile_hide_avatar))
        add_row(table, "HideTitleName:", _flag(custom.profile_hide_title_name))
        add_row(table, "UseChatEmblemEmoji:", _flag(custom.profile_use_chat_emblem_emoji))
        if custom.profile_background is not None:
            add_row(table, "Background:", custom.profile_background)
        tables.append(table)

    return tables


def _show_profile(
    build: Callable[[int], requests_.RequestDescriptor],
    raw_id: str,
    debug: bool,
    filter_: str | None,
    sort: str | None,
) -> None:
    user_id = parse_id(raw_id)
    sections = parse_filter(filter_)
    farm_sort_key(sort)

    raw = runtime.get_client().fetch(build(user_id))
    if debug:
        print_json(raw)
        return

    profile = validate_payload(ProfileInfo, decode_json(raw, operation="profile"), operation="profile")

    needs_items = sections is None or bool(sections & _ITEM_SECTIONS)
    items = runtime.load_items() if needs_items else []
    print_tables(render_profile(profile, items, sections, sort))


@app.command("info")
@handle_cli_errors("profile info")
def info(
    user_id: Annotated[str, typer.Argument(help="User ID")],
    debug: Annotated[bool, debug_option] = False,
    filter_: Annotated[Optional[str], filter_option] = None,
    sort: Annotated[Optional[str], sort_option] = None,
) -> None:
    """Fetch profile info (detailed)."""
    _show_profile(requests_.profile, user_id, debug, filter_, sort)


@app.command("user")
@handle_cli_errors("profile user")
def user(
    user_id: Annotated[str, typer.Argument(help="User ID")],
    debug: Annotated[bool, debug_option] = False,
    filter_: Annotated[Optional[str], filter_option] = None,
    sort: Annotated[Optional[str], sort_option] = None,
) -> None:
    """Fetch user details (alias for info)."""
    _show_profile(requests_.user, user_id, debug, filter_, sort)


@app.command("inventory")
@handle_cli_errors("profile inventory")
def inventory(user_id: Annotated[str, typer.Argument(help="User ID")]) -> None:
    """Fetch inventory."""
    print_json(runtime.get_client().fetch(requests_.inventory(parse_id(user_id))))


@app.command("flatinventory")
@handle_cli_errors("profile flatinventory")
def flat_inventory(user_id: Annotated[str, typer.Argument(help="User ID")]) -> None:
    """Fetch flat inventory."""
    print_json(runtime.get_client().fetch(requests_.flat_inventory(parse_id(user_id))))


@app.command("stats")
@handle_cli_errors("profile stats")
def stats(user_id: Annotated[str, typer.Argument(help="User ID")]) -> None:
    """Fetch stats."""
    print_json(runtime.get_client().fetch(requests_.stats(parse_id(user_id))))


@app.command("trophies")
@handle_cli_errors("profile trophies")
def trophies(user_id: Annotated[str, typer.Argument(help="User ID")]) -> None:
    """Fetch trophies."""
    print_json(runtime.get_client().fetch(requests_.trophies(parse_id(user_id))))
