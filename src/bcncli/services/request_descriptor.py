"""Request descriptors for the bconomy data endpoint.

Every request is a flat JSON object: the ``type`` discriminator plus the
parameters of that request type. The builder functions below produce the
descriptor for each request the CLI sends.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from bcncli.shared.constants import CLIDefaults, IdTypes, RequestTypes
from bcncli.shared.errors import create_validation_error


@dataclass(frozen=True)
class RequestDescriptor:
    """Request type plus its parameters.

    Example:
        >>> RequestDescriptor("pet", {"id": 42}).to_payload()
        {'type': 'pet', 'id': 42}
    """

    type: str
    params: dict[str, Any] = field(default_factory=dict)

    def to_payload(self) -> dict[str, Any]:
        """Flatten into the JSON body sent to the endpoint."""
        return {"type": self.type, **self.params}

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> RequestDescriptor:
        """Build a descriptor from a plain mapping that contains ``type``.

        Raises:
            ValidationError: If the mapping has no ``type`` key
        """
        if "type" not in payload:
            raise create_validation_error(
                "Request payload has no type",
                field="type",
                operation="from_mapping",
            )
        params = {key: value for key, value in payload.items() if key != "type"}
        return cls(str(payload["type"]), params)


def _by_id(request_type: str, id_: int) -> RequestDescriptor:
    return RequestDescriptor(request_type, {"id": id_})


# Game data


def item_data() -> RequestDescriptor:
    return RequestDescriptor(RequestTypes.ITEM_DATA)


# Profile


def profile(id_: int) -> RequestDescriptor:
    return _by_id(RequestTypes.PROFILE, id_)


def user(id_: int) -> RequestDescriptor:
    return _by_id(RequestTypes.USER, id_)


def inventory(id_: int) -> RequestDescriptor:
    return _by_id(RequestTypes.INVENTORY, id_)


def flat_inventory(id_: int) -> RequestDescriptor:
    return _by_id(RequestTypes.FLAT_INVENTORY, id_)


def stats(id_: int) -> RequestDescriptor:
    return _by_id(RequestTypes.STATS, id_)


def trophies(id_: int) -> RequestDescriptor:
    return _by_id(RequestTypes.TROPHIES, id_)


# Pets and eggs


def pet(id_: int) -> RequestDescriptor:
    return _by_id(RequestTypes.PET, id_)


def egg(id_: int) -> RequestDescriptor:
    return _by_id(RequestTypes.EGG, id_)


def pet_offspring(id_: int) -> RequestDescriptor:
    return _by_id(RequestTypes.PET_OFFSPRING, id_)


def user_pets_and_eggs(id_: int) -> RequestDescriptor:
    return _by_id(RequestTypes.USER_PETS_AND_EGGS, id_)


# Factions


def faction(id_: int) -> RequestDescriptor:
    return _by_id(RequestTypes.FACTION, id_)


def faction_members(id_: int) -> RequestDescriptor:
    return _by_id(RequestTypes.FACTION_MEMBERS, id_)


def recruiting_factions() -> RequestDescriptor:
    return RequestDescriptor(RequestTypes.RECRUITING_FACTIONS)


def faction_join_requests(id_type: str, id_: int) -> RequestDescriptor:
    """Join requests of a faction (``factionId``) or of a user (``bcId``)."""
    return RequestDescriptor(
        RequestTypes.FACTION_JOIN_REQUESTS,
        {"idType": id_type, "id": id_},
    )


# Market


def market_preview() -> RequestDescriptor:
    return RequestDescriptor(RequestTypes.MARKET_PREVIEW)


def market_listings(item_id: int) -> RequestDescriptor:
    return RequestDescriptor(RequestTypes.MARKET_LISTINGS, {"itemId": item_id})


def user_market_listings(bc_id: int) -> RequestDescriptor:
    return _by_id(RequestTypes.USER_MARKET_LISTINGS, bc_id)


# Leaderboards


def user_leaderboard(
    lb_type: str,
    page: int = CLIDefaults.DEFAULT_PAGE,
    stat: str | None = None,
    item_id: int | None = None,
) -> RequestDescriptor:
    """User leaderboard; ``stat`` and ``itemId`` are sent only when given."""
    params: dict[str, Any] = {"lbType": lb_type, "page": page}
    if stat:
        params["stat"] = stat
    if item_id:
        params["itemId"] = item_id
    return RequestDescriptor(RequestTypes.USER_LEADERBOARD, params)


def faction_leaderboard(stat: str, page: int = CLIDefaults.DEFAULT_PAGE) -> RequestDescriptor:
    return RequestDescriptor(RequestTypes.FACTION_LEADERBOARD, {"stat": stat, "page": page})


def pets_leaderboard(page: int = CLIDefaults.DEFAULT_PAGE) -> RequestDescriptor:
    return RequestDescriptor(RequestTypes.PETS_LEADERBOARD, {"page": page})


# Logs


def rich_logs_by_bc_id(bc_id: int, page: int = CLIDefaults.DEFAULT_PAGE) -> RequestDescriptor:
    return RequestDescriptor(RequestTypes.RICH_LOGS_BY_BC_ID, {"id": bc_id, "page": page})


def rich_logs_by_id_type(
    id_type: str,
    id_: int,
    page: int = CLIDefaults.DEFAULT_PAGE,
) -> RequestDescriptor:
    return RequestDescriptor(
        RequestTypes.RICH_LOGS_BY_ID_TYPE,
        {"idType": id_type, "id": id_, "page": page},
    )


def rich_logs_by_log_type(log_type: str, page: int = CLIDefaults.DEFAULT_PAGE) -> RequestDescriptor:
    return RequestDescriptor(
        RequestTypes.RICH_LOGS_BY_LOG_TYPE,
        {"logType": log_type, "page": page},
    )


def daily_user_inputs(id_: int, date: str) -> RequestDescriptor:
    return RequestDescriptor(RequestTypes.DAILY_USER_INPUTS, {"id": id_, "date": date})


# Search


def search_users(query: str) -> RequestDescriptor:
    return RequestDescriptor(RequestTypes.SEARCH_USERS, {"query": query})


def search_factions(query: str) -> RequestDescriptor:
    return RequestDescriptor(RequestTypes.SEARCH_FACTIONS, {"query": query})


def search_pets(
    skin: str = "any skin",
    aura: str = "any aura",
    species: str = "any species",
    raw_name_query: str = "",
) -> RequestDescriptor:
    return RequestDescriptor(
        RequestTypes.SEARCH_PETS,
        {
            "skin": skin,
            "aura": aura,
            "species": species,
            "rawNameQuery": raw_name_query,
        },
    )


ID_TYPES_BY_NAME: dict[str, str] = {
    "faction": IdTypes.FACTION_ID,
    "item": IdTypes.ITEM_ID,
    "user": IdTypes.BC_ID,
}
