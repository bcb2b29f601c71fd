"""Configuration management for bcncli."""

from .loader import clear_config, get_config, load_settings, reload_config
from .models import APISettings, CacheSettings, LoggingSettings, Settings

__all__ = [
    "APISettings",
    "CacheSettings",
    "LoggingSettings",
    "Settings",
    "clear_config",
    "get_config",
    "load_settings",
    "reload_config",
]
