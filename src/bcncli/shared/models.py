"""bconomy API Response Models.

This module defines Pydantic models for the parts of the bconomy API
responses that the CLI renders. Only the fields a command displays are
modelled; everything else passes through as raw JSON.

Models inherit from BaseTypeModel, which maps camelCase wire names to
snake_case attributes, ignores unknown fields and treats JSON ``null``
as "use the default".
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from bcncli.shared.errors import ErrorCode, ErrorContext, ParseError


class BaseTypeModel(BaseModel):
    """Lenient base model for API payloads."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


# ---------------------------------------------------------------------------
# Item catalog
# ---------------------------------------------------------------------------


class RecipeComponent(BaseTypeModel):
    """One ingredient of an item recipe."""

    model_config = ConfigDict(extra="allow")

    id: int = 0
    count: int = 0


class Item(BaseTypeModel):
    """An entry of the item catalog (``itemData``).

    Unknown keys are kept so that the cached catalog survives a
    parse/serialize round trip unchanged.

    Example:
        >>> item = Item.model_validate({"id": 1, "name": "Seaweed", "idName": "seaweed"})
        >>> item.id_name
        'seaweed'
    """

    model_config = ConfigDict(extra="allow")

    id: int = Field(default=0, description="Numeric item ID")
    name: str = Field(default="", description="Display name")
    emoji: str = ""
    id_name: str = Field(default="", description="Machine name")
    description: str = ""
    uncraftable: bool = False
    attributes: list[str] = Field(default_factory=list)
    loot_sources: list[str] = Field(default_factory=list)
    recipe: list[RecipeComponent] = Field(default_factory=list)
    flat_id: str = ""
    cost: int = 0
    use_limit: int = 0
    used_to_craft: list[int] = Field(default_factory=list)
    image_url: str = ""


# ---------------------------------------------------------------------------
# Market
# ---------------------------------------------------------------------------


class Listing(BaseTypeModel):
    """A single market listing."""

    id: int = 0
    bc_id: int = 0
    item_id: int = 0
    price: int = 0
    amount: int = 0


class MarketOverview(BaseTypeModel):
    """``marketPreview`` response: latest value per ``item<ID>`` key."""

    last_updated: int = 0
    data: dict[str, int] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# Pets
# ---------------------------------------------------------------------------


class AdventureBoost(BaseTypeModel):
    multiplier: int = 0
    end_time: int = 0


class Craving(BaseTypeModel):
    item_id: int = 0
    amount: int = 0


class Pet(BaseTypeModel):
    """A pet as listed by ``userPetsAndEggs``."""

    id: int = 0
    owner_bc_id: int = 0
    hatch_date: str = ""
    name: str = ""
    tier: int = 0
    xp: int = 0
    species: str = ""
    generation: int = 0
    parent_a_id: int = 0
    parent_b_id: int = 0
    times_bred: int = 0
    last_bred: str = ""
    held_item_id: int = 0
    unsynced_energy: int = 0
    adventure_type: str = ""
    adventure_boost: AdventureBoost = Field(default_factory=AdventureBoost)
    last_adventure_sync: str = ""
    lifetime_items_found: int = 0
    craving: Craving = Field(default_factory=Craving)
    skin: str = ""
    aura: str = ""


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------


class PlantStatus(BaseTypeModel):
    is_planted: bool = False
    item_id: int = 0
    planted_time: int = 0


class PlotBoost(BaseTypeModel):
    multiplier: int = 0
    end_time: int = 0


class FarmPlot(BaseTypeModel):
    level: int = 0
    status: PlantStatus = Field(default_factory=PlantStatus)
    boost: PlotBoost = Field(default_factory=PlotBoost)
    is_extra: bool = False


class Generator(BaseTypeModel):
    level: int = 0
    is_extra: bool = False


class Quest(BaseTypeModel):
    item_id: int = 0
    amount_required: int = 0
    amount_fulfilled: int = 0


class Cooldowns(BaseTypeModel):
    """Last-use timestamps (epoch milliseconds) per action."""

    fish: int = 0
    hunt: int = 0
    explore: int = 0
    mine: int = 0
    work: int = 0
    daily: int = 0
    water: int = 0
    claim_generators: int = 0


class Modifier(BaseTypeModel):
    type: str = ""
    action: str = ""
    duration: int = 0
    multiplier: int = 0


class Effect(BaseTypeModel):
    end_time: int = 0
    modifier: Modifier = Field(default_factory=Modifier)


class Upgrades(BaseTypeModel):
    fish: int = 0
    fish_extra: int = 0
    hunt: int = 0
    hunt_extra: int = 0
    explore: int = 0
    explore_extra: int = 0
    mine: int = 0
    mine_extra: int = 0
    pets_stable: int = 0
    pets_stable_extra: int = 0


class Perks(BaseTypeModel):
    lower_rank_cost: int = 0
    lower_tier_cost: int = 0
    raise_pet_space: int = 0
    raise_equip_slots: int = 0


class ProfileSettings(BaseTypeModel):
    profile_show_stat_id: int | None = None
    sync_discord_name: bool = False
    public_discord_profile: bool = False
    discord_ping_on_response: bool = False


class ProfileCustom(BaseTypeModel):
    profile_hide_avatar: bool = False
    profile_hide_title_name: bool = False
    profile_use_chat_emblem_emoji: bool = False
    profile_background: str | None = None


class Faction(BaseTypeModel):
    id: int = 0
    tag: str = ""
    name: str = ""
    owner_bc_id: int = 0
    about: str = ""
    motd: str = ""
    member_count: int = 0


class ProfileInfo(BaseTypeModel):
    """``profile``/``user`` response, limited to the rendered sections."""

    id: int = 0
    name: str = ""
    registration_date: str = ""
    rank: int = 0
    tier: int = 0
    bc: int = 0
    sp: int = 0
    kr: int = 0
    faction_id: int = 0
    quest_level: int = 0
    daily_claim_streak: int = 0
    farm_plots: list[FarmPlot] = Field(default_factory=list)
    generators: list[Generator] = Field(default_factory=list)
    quests: list[Quest] = Field(default_factory=list)
    cooldowns: Cooldowns = Field(default_factory=Cooldowns)
    effects: dict[str, Effect] = Field(default_factory=dict)
    upgrades: Upgrades = Field(default_factory=Upgrades)
    perks: Perks = Field(default_factory=Perks)
    settings: ProfileSettings = Field(default_factory=ProfileSettings)
    custom: ProfileCustom = Field(default_factory=ProfileCustom)
    faction: Faction = Field(default_factory=Faction)


@lru_cache(maxsize=None)
def _adapter(type_: Any) -> TypeAdapter[Any]:
    return TypeAdapter(type_)


def validate_payload(type_: Any, data: Any, operation: str) -> Any:
    """Validate decoded JSON against a model type such as ``list[Pet]``.

    Raises:
        ParseError: If the data does not match the expected shape
    """
    try:
        return _adapter(type_).validate_python(data)
    except PydanticValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "<root>"
        raise ParseError(
            ErrorCode.PARSING_ERROR,
            f"Unexpected response shape at {location}: {first['msg']}",
            ErrorContext(operation=operation),
            original_error=e,
        ) from e
