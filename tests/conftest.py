"""
Pytest configuration and shared fixtures for bcncli tests.

Every test runs in an empty working directory with the API key
environment variables removed, so no developer config or .env leaks in.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import orjson
import pytest

from bcncli.cli.common import runtime
from bcncli.cli.common.context import clear_cli_context
from bcncli.config import clear_config
from bcncli.shared.constants import Logging

API_KEY_ENV_VARS = ("BCONOMYAPI", "BCNCLI_API__API_KEY")


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Empty cwd, no API key in the environment, no cached settings."""
    for name in API_KEY_ENV_VARS:
        # setenv first so that values loaded from a .env file are undone too
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    clear_config()
    clear_cli_context()
    yield tmp_path
    runtime.close_client()
    clear_config()
    clear_cli_context()


@pytest.fixture(autouse=True)
def reset_bcncli_logger() -> Generator[None, None, None]:
    """Undo setup_logging() so handlers and levels do not leak between tests."""
    yield
    logger = logging.getLogger(Logging.LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def sample_items() -> list[dict[str, Any]]:
    """A small item catalog as returned by the itemData request."""
    return [
        {
            "id": 1,
            "name": "Seaweed",
            "emoji": "<:seaweed:123456>",
            "idName": "seaweed",
            "description": "Grows in the sea",
            "uncraftable": False,
            "attributes": ["food"],
            "lootSources": ["fish"],
            "recipe": [],
            "flatId": "1",
            "cost": 10,
            "useLimit": 0,
            "usedToCraft": [3],
            "imageUrl": "https://example.invalid/seaweed.png",
        },
        {
            "id": 2,
            "name": "Sardine",
            "emoji": "🐟",
            "idName": "sardine",
            "description": None,
            "cost": 25,
        },
        {
            "id": 3,
            "name": "Seafood Salad",
            "idName": "seafood_salad",
            "recipe": [{"id": 1, "count": 4}, {"id": 2, "count": 2}],
            "usedToCraft": [],
        },
    ]


@pytest.fixture
def sample_items_raw(sample_items: list[dict[str, Any]]) -> bytes:
    return orjson.dumps(sample_items)
