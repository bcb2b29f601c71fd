"""
CLI Configuration Constants

This module contains all constants related to command-line interface
configuration, default values, and help text.
"""


class CLIDefaults:
    """Default values for CLI behaviour."""

    VERSION = "0.1.0"
    EXIT_SUCCESS = 0
    EXIT_ERROR = 1
    EXIT_INTERRUPTED = 130
    DEFAULT_PAGE = 1


class CLICommands:
    """Command group names."""

    PROFILE = "profile"
    PET = "pet"
    EGG = "egg"
    FACTION = "faction"
    MARKET = "market"
    LEADERBOARD = "leaderboard"
    LOGS = "logs"
    SEARCH = "search"
    GAMEDATA = "gamedata"


class CLIOptions:
    """CLI option names and flags."""

    API_KEY = "--apikey"
    CONFIG = "--config"
    CACHE_FILE = "--cache-file"
    DEBUG = "--debug"
    DEBUG_SHORT = "-d"
    FILTER = "--filter"
    FILTER_SHORT = "-f"
    SORT = "--sort"
    SORT_SHORT = "-s"
    GROUP = "--group"
    PAGE = "--page"
    PAGE_SHORT = "-p"
    CACHE = "--cache"
    CACHE_SHORT = "-c"


class CLIHelp:
    """Help text shown by typer."""

    APP_NAME = "bcncli"
    APP_DESCRIPTION = "BCN CLI interacts with the bconomy API"
    APP_STYLE = "rich"
    VERSION_TEXT = "bcncli version {version}"

    API_KEY_HELP = "BConomy API key (flag, config file, or env var BCONOMYAPI)"
    CONFIG_HELP = "Path to a config.toml or config.json file"
    CACHE_FILE_HELP = "Item catalog cache file (relative paths resolve next to the executable)"
    DEBUG_HELP = "print raw JSON response"
    PAGE_HELP = "Page number"

    PROFILE_HELP = "Manage user profiles"
    PET_HELP = "Manage pets"
    EGG_HELP = "Manage eggs"
    FACTION_HELP = "Manage factions"
    MARKET_HELP = "Manage marketplace operations"
    LEADERBOARD_HELP = "View various leaderboards"
    LOGS_HELP = "Retrieve various logs"
    SEARCH_HELP = "Search for users, factions, or pets"
    GAMEDATA_HELP = "Retrieve static game data"


class TableStyles:
    """Rich styles shared by every table."""

    HEADER = "bold magenta"
    SECTION_TITLE = "bold blue"
