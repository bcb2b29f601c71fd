"""Settings loader and singleton manager.

This module handles:
- Environment variable loading from .env files
- Configuration file loading from TOML or JSON
- API key resolution (flag, then config file, then environment)
- A process-wide Settings instance shared by the CLI commands
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import toml
from dotenv import load_dotenv
from pydantic import ValidationError as PydanticValidationError

from bcncli.config.models.settings import Settings
from bcncli.shared.constants import APIConfig, ConfigFiles
from bcncli.shared.errors import ConfigError, ErrorCode, ErrorContext

logger = logging.getLogger(__name__)


class SettingsLoader:
    """Holds the Settings instance used by the current process."""

    _instance: Settings | None = None

    def get_config(self) -> Settings:
        """Get the settings instance, loading it from the default locations if needed."""
        if self._instance is None:
            self._instance = load_settings()

        return self._instance

    def reload_config(
        self,
        config_path: str | Path | None = None,
        api_key_override: str | None = None,
        cache_file_override: str | None = None,
    ) -> Settings:
        """Load the settings again and replace the shared instance."""
        self._instance = load_settings(config_path, api_key_override, cache_file_override)

        return self._instance

    def clear(self) -> None:
        self._instance = None


def _load_env_file(env_file: Path | None = None) -> None:
    """Load environment variables from a .env file when one exists.

    Variables already present in the environment are not overridden.
    """
    env_file = env_file or Path(ConfigFiles.ENV_FILE)
    if env_file.is_file():
        load_dotenv(env_file, override=False)
        logger.debug("Loaded environment from %s", env_file)


def _read_config_file(config_path: Path) -> Settings:
    """Read one configuration file, dispatching on its suffix.

    Raises:
        ConfigError: If the file is missing, malformed or invalid
    """
    context = ErrorContext(file_path=str(config_path), operation="load_settings")
    try:
        if config_path.suffix == ConfigFiles.JSON_SUFFIX:
            settings = Settings.from_json_file(config_path)
        else:
            settings = Settings.from_toml_file(config_path)
    except FileNotFoundError as e:
        raise ConfigError(
            ErrorCode.CONFIG_NOT_FOUND,
            f"Configuration file not found: {config_path}",
            context,
            original_error=e,
        ) from e
    except (toml.TomlDecodeError, ValueError, PydanticValidationError) as e:
        # orjson.JSONDecodeError is a ValueError subclass
        raise ConfigError(
            ErrorCode.CONFIG_ERROR,
            f"Invalid configuration file {config_path}: {e}",
            context,
            original_error=e,
        ) from e
    except OSError as e:
        raise ConfigError(
            ErrorCode.CONFIG_ERROR,
            f"Could not read configuration file {config_path}: {e}",
            context,
            original_error=e,
        ) from e

    logger.info("Using config file: %s", config_path)
    return settings


def find_config_file(search_dir: Path | None = None) -> Path | None:
    """Return the first default configuration file that exists, if any."""
    base = search_dir or Path.cwd()
    for candidate in ConfigFiles.DEFAULT_PATHS:
        path = base / candidate
        if path.is_file():
            return path
    return None


def load_settings(
    config_path: str | Path | None = None,
    api_key_override: str | None = None,
    cache_file_override: str | None = None,
) -> Settings:
    """Load settings and resolve the API key.

    The API key is taken from, in order: ``api_key_override`` (the
    ``--apikey`` flag), the configuration file, ``BCNCLI_API__API_KEY``
    and finally ``BCONOMYAPI``. A ``.env`` file in the working directory
    is loaded before the environment is consulted.

    Args:
        config_path: Explicit configuration file. If None, the default
            locations are searched and environment variables are used
            when none exists.
        api_key_override: API key given on the command line
        cache_file_override: Cache file given on the command line

    Raises:
        ConfigError: If a configuration file cannot be loaded
    """
    _load_env_file()

    path = Path(config_path) if config_path else find_config_file()
    if path is not None:
        settings = _read_config_file(path)
    else:
        try:
            settings = Settings()
        except PydanticValidationError as e:
            raise ConfigError(
                ErrorCode.CONFIG_ERROR,
                f"Invalid environment configuration: {e}",
                ErrorContext(operation="load_settings"),
                original_error=e,
            ) from e

    if api_key_override:
        settings = settings.with_api_key(api_key_override)
    elif not settings.api.api_key:
        env_key = os.getenv(APIConfig.API_KEY_ENV_VAR, "").strip()
        if env_key:
            settings = settings.with_api_key(env_key)

    if cache_file_override:
        settings = settings.with_cache_file(cache_file_override)

    return settings


# Global loader instance
_loader = SettingsLoader()


def get_config() -> Settings:
    """Get the global settings instance.

    Returns:
        The global Settings instance, loading it if necessary.
    """
    return _loader.get_config()


def reload_config(
    config_path: str | Path | None = None,
    api_key_override: str | None = None,
    cache_file_override: str | None = None,
) -> Settings:
    """Reload the global settings instance.

    Returns:
        The reloaded Settings instance.
    """
    return _loader.reload_config(config_path, api_key_override, cache_file_override)


def clear_config() -> None:
    """Forget the global settings instance."""
    _loader.clear()
