"""Item catalog cache.

The item catalog (``itemData``) is the one dataset the client keeps on
disk. :class:`ItemCatalogLoader` decides per call whether the cached file
is fresh enough to use or whether the catalog must be fetched again.
"""

from __future__ import annotations

import contextlib
import logging
import os
import sys
import time
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Protocol

import orjson

from bcncli.services import request_descriptor
from bcncli.services.client import decode_json
from bcncli.services.request_descriptor import RequestDescriptor
from bcncli.shared.constants import CacheDefaults
from bcncli.shared.errors import (
    ErrorCode,
    ErrorContext,
    ParseError,
    create_filesystem_error,
    create_validation_error,
)
from bcncli.shared.models import Item, validate_payload

log = logging.getLogger(__name__)


class Fetcher(Protocol):
    """Anything that can send a request descriptor and return raw bytes."""

    def fetch(self, descriptor: RequestDescriptor) -> bytes: ...


class ItemCatalogLoader:
    """Cache-or-fetch loader for the item catalog.

    Args:
        fetcher: Used whenever the catalog has to be fetched
        clock: Returns the current time in epoch seconds
    """

    def __init__(self, fetcher: Fetcher, clock: Callable[[], float] = time.time) -> None:
        self._fetcher = fetcher
        self._clock = clock

    def load(self, path: Path | str, freshness: int, should_persist: bool = True) -> list[Item]:
        """Return the item catalog, from ``path`` when it is fresh enough.

        A freshness of 0 always fetches. Otherwise the file is used while
        ``now - mtime <= freshness`` and fetched again once it is older or
        missing. Fetched bytes are written back to ``path`` when
        ``should_persist`` is set; a failed write is logged and ignored.

        Raises:
            FilesystemError: The file exists but cannot be stat'ed or read
            ParseError: The catalog is empty, malformed or not a JSON array
            AuthError, TransportError, RemoteError: From the fetcher
        """
        path = Path(path)

        if freshness == 0:
            return self._refresh(path, should_persist)

        try:
            stat = path.stat()
        except FileNotFoundError:
            log.debug("No cached catalog at %s", path)
            return self._refresh(path, should_persist)
        except OSError as e:
            raise create_filesystem_error(
                ErrorCode.FILE_STAT_ERROR,
                f"Could not stat file {path}: {e}",
                file_path=str(path),
                operation="load_item_catalog",
                original_error=e,
            ) from e

        age = self._clock() - stat.st_mtime
        if age > freshness:
            log.debug("Cached catalog at %s is stale (%.0fs > %ds)", path, age, freshness)
            return self._refresh(path, should_persist)

        try:
            raw = path.read_bytes()
        except OSError as e:
            raise create_filesystem_error(
                ErrorCode.FILE_READ_ERROR,
                f"Could not read {path}: {e}",
                file_path=str(path),
                operation="load_item_catalog",
                original_error=e,
            ) from e

        log.debug("Using cached catalog at %s", path)
        return parse_items(raw)

    def _refresh(self, path: Path, should_persist: bool) -> list[Item]:
        raw = self._fetcher.fetch(request_descriptor.item_data())
        if should_persist:
            persist_catalog(path, raw)
        return parse_items(raw)


def persist_catalog(path: Path, raw: bytes) -> bool:
    """Write the raw catalog to ``path``; returns False when the write failed.

    The bytes go to a sibling temporary file that replaces ``path`` once
    complete, so a failed write never leaves a truncated cache behind.
    """
    tmp_path = path.with_name(f".{path.name}.tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path.write_bytes(raw)
        os.chmod(tmp_path, CacheDefaults.FILE_MODE)
        os.replace(tmp_path, path)
    except OSError as e:
        log.warning("Could not cache data to %s: %s", path, e)
        with contextlib.suppress(OSError):
            tmp_path.unlink()
        return False
    log.info("Cached item catalog to %s", path)
    return True


def parse_items(raw: bytes | None) -> list[Item]:
    """Parse catalog bytes into items, preserving order.

    Raises:
        ParseError: If the bytes are absent, malformed or not a list of items
    """
    data = decode_json(raw, operation="parse_items")
    if not isinstance(data, list):
        raise ParseError(
            ErrorCode.PARSING_ERROR,
            f"Item catalog must be a JSON array, got {type(data).__name__}",
            ErrorContext(operation="parse_items"),
        )
    return validate_payload(list[Item], data, operation="parse_items")


def serialize_items(items: Iterable[Item]) -> bytes:
    """Inverse of :func:`parse_items`."""
    return orjson.dumps([item.model_dump(by_alias=True) for item in items])


def default_base_dir() -> Path:
    """Directory of the running executable when frozen, else the working directory."""
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path.cwd()


def resolve_cache_path(filename: str | Path, base_dir: Path | None = None) -> Path:
    """Absolute paths are returned as-is; relative ones are joined to ``base_dir``."""
    path = Path(filename)
    if path.is_absolute():
        return path
    return (base_dir or default_base_dir()) / path


def lookup_item_name(item_id: int, items: Iterable[Item]) -> str:
    """Name of the item with ``item_id``, or a placeholder when it is unknown."""
    for item in items:
        if item.id == item_id:
            return item.name
    return f"Unknown Item ID {item_id}"


def find_item(items: Iterable[Item], query: str) -> Item:
    """Find an item by numeric ID, or by name/idName ignoring case.

    Raises:
        ValidationError: If no item matches
    """
    items = list(items)
    try:
        wanted_id = int(query)
    except ValueError:
        pass
    else:
        for item in items:
            if item.id == wanted_id:
                return item

    wanted = query.casefold()
    for item in items:
        if item.name.casefold() == wanted or item.id_name.casefold() == wanted:
            return item

    raise create_validation_error(
        f'item "{query}" not found',
        field="item",
        operation="find_item",
        code=ErrorCode.ITEM_NOT_FOUND,
    )
