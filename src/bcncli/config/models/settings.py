"""bcncli Settings Configuration Model.

Main Settings class that consolidates the API, cache and logging
configuration domains.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import orjson
import toml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from bcncli.config.models.api_settings import APISettings
from bcncli.config.models.app_settings import LoggingSettings
from bcncli.config.models.cache_settings import CacheSettings
from bcncli.shared.constants import ConfigFiles


def _normalize_raw_config(raw: dict[str, Any]) -> dict[str, Any]:
    """Fold the flat ``apikey`` key into ``api.api_key``."""
    raw = dict(raw)
    flat_key = raw.pop(ConfigFiles.FLAT_API_KEY, None)
    if flat_key:
        api = dict(raw.get("api") or {})
        api.setdefault("api_key", flat_key)
        raw["api"] = api
    return raw


class Settings(BaseSettings):
    """Unified configuration access.

    Values passed to the constructor (config file contents) take
    precedence over ``BCNCLI_*`` environment variables, which take
    precedence over the defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix=ConfigFiles.ENV_PREFIX,
        env_nested_delimiter="__",
        env_ignore_empty=True,
        extra="ignore",
    )

    api: APISettings = Field(default_factory=APISettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def from_toml_file(cls, file_path: str | Path) -> Settings:
        """Load settings from TOML file with environment variable overrides."""

        file_path = Path(file_path)
        if not file_path.exists():
            msg = f"Configuration file not found: {file_path}"
            raise FileNotFoundError(msg)

        raw_config = toml.load(file_path)
        return cls(**_normalize_raw_config(raw_config))

    @classmethod
    def from_json_file(cls, file_path: str | Path) -> Settings:
        """Load settings from a JSON file such as ``{"apikey": "..."}``."""

        file_path = Path(file_path)
        if not file_path.exists():
            msg = f"Configuration file not found: {file_path}"
            raise FileNotFoundError(msg)

        raw_config = orjson.loads(file_path.read_bytes())
        if not isinstance(raw_config, dict):
            msg = f"Configuration file must contain a JSON object: {file_path}"
            raise ValueError(msg)
        return cls(**_normalize_raw_config(raw_config))

    def with_api_key(self, api_key: str) -> Settings:
        """Copy of these settings using ``api_key``."""
        return self.model_copy(update={"api": self.api.model_copy(update={"api_key": api_key})})

    def with_cache_file(self, file_name: str) -> Settings:
        """Copy of these settings using ``file_name`` as the cache file."""
        return self.model_copy(update={"cache": self.cache.model_copy(update={"file_name": file_name})})
