"""
Per-invocation collaborators for CLI commands.

Commands obtain the settings, the API client and the item catalog through
these functions so that tests can patch a single seam.
"""

from __future__ import annotations

from pathlib import Path

from bcncli.config import get_config
from bcncli.config.models import Settings
from bcncli.services.client import BconomyClient
from bcncli.services.item_catalog import ItemCatalogLoader, resolve_cache_path
from bcncli.shared.models import Item


def get_settings() -> Settings:
    """Settings loaded by the main callback."""
    return get_config()


_client: BconomyClient | None = None


def get_client() -> BconomyClient:
    """API client configured from the current settings (one per invocation)."""
    global _client
    if _client is None:
        settings = get_settings()
        _client = BconomyClient(
            settings.api.api_key,
            url=settings.api.url,
            timeout=settings.api.timeout,
        )
    return _client


def close_client() -> None:
    """Close the shared client's session; the next get_client() builds a new one."""
    global _client
    if _client is not None:
        _client.close()
        _client = None


def get_cache_path() -> Path:
    """Absolute path of the item catalog cache file."""
    cache = get_settings().cache
    return resolve_cache_path(cache.file_name, cache.base_dir)


def load_items(freshness: int | None = None, should_persist: bool = True) -> list[Item]:
    """Load the item catalog through the cache.

    Args:
        freshness: Maximum cache age in seconds; the configured value when None
        should_persist: Write a freshly fetched catalog back to the cache file
    """
    if freshness is None:
        freshness = get_settings().cache.freshness
    loader = ItemCatalogLoader(get_client())
    return loader.load(get_cache_path(), freshness, should_persist=should_persist)
