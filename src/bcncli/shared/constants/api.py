"""
API Configuration Constants

This module contains constants for the bconomy data endpoint: the URL,
header names and every request type the client knows how to build.
"""


class APIConfig:
    """bconomy API endpoint configuration."""

    URL = "https://bconomy.net/api/data"
    API_KEY_HEADER = "x-api-key"
    CONTENT_TYPE = "application/json"
    API_KEY_ENV_VAR = "BCONOMYAPI"


class HTTPStatusCodes:
    """HTTP status code constants."""

    @staticmethod
    def is_success(code: int) -> bool:
        """Check if status code indicates success (2xx)."""
        return 200 <= code < 300


class RequestTypes:
    """Values of the ``type`` discriminator sent in every request body."""

    # Game data
    ITEM_DATA = "itemData"

    # Profile
    PROFILE = "profile"
    USER = "user"
    INVENTORY = "inventory"
    FLAT_INVENTORY = "flatInventory"
    STATS = "stats"
    TROPHIES = "trophies"

    # Pets and eggs
    PET = "pet"
    EGG = "egg"
    USER_PETS_AND_EGGS = "userPetsAndEggs"
    PET_OFFSPRING = "petOffspring"

    # Factions
    FACTION = "faction"
    FACTION_MEMBERS = "factionMembers"
    RECRUITING_FACTIONS = "recruitingFactions"
    FACTION_JOIN_REQUESTS = "factionJoinRequests"

    # Market
    MARKET_PREVIEW = "marketPreview"
    MARKET_LISTINGS = "marketListings"
    USER_MARKET_LISTINGS = "userMarketListings"

    # Leaderboards
    USER_LEADERBOARD = "userLeaderboard"
    FACTION_LEADERBOARD = "factionLeaderboard"
    PETS_LEADERBOARD = "petsLeaderboard"

    # Logs
    RICH_LOGS_BY_BC_ID = "richLogsByBcId"
    RICH_LOGS_BY_ID_TYPE = "richLogsByIdType"
    RICH_LOGS_BY_LOG_TYPE = "richLogsByLogType"
    DAILY_USER_INPUTS = "dailyUserInputs"

    # Search
    SEARCH_USERS = "searchUsers"
    SEARCH_FACTIONS = "searchFactions"
    SEARCH_PETS = "searchPets"


class IdTypes:
    """Values accepted by the ``idType`` request field."""

    FACTION_ID = "factionId"
    ITEM_ID = "itemId"
    BC_ID = "bcId"


class CacheDefaults:
    """Item catalog cache defaults."""

    FILE_NAME = "itemid.json"
    FRESHNESS_SECONDS = 3600
    FILE_MODE = 0o644
