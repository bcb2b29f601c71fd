"""
System Configuration Constants

Logging and configuration file constants.
"""


class Logging:
    """Logging configuration constants."""

    DEFAULT_LEVEL = "WARNING"
    MAX_BYTES = 10485760  # 10MB
    BACKUP_COUNT = 5
    LOGGER_NAME = "bcncli"


class ConfigFiles:
    """Configuration file discovery."""

    ENV_FILE = ".env"
    ENV_PREFIX = "BCNCLI_"
    # Searched in order, relative to the working directory
    DEFAULT_PATHS = ("config.toml", "config.json", "config/config.toml")
    TOML_SUFFIX = ".toml"
    JSON_SUFFIX = ".json"
    # Flat key accepted at the top level of a config file
    FLAT_API_KEY = "apikey"


__all__ = ["ConfigFiles", "Logging"]
