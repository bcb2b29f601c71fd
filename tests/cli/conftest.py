"""Fixtures for CLI tests: a patched API client and item catalog."""

from __future__ import annotations

from unittest.mock import Mock

import pytest
from typer.testing import CliRunner

from bcncli.services.item_catalog import parse_items
from bcncli.shared.models import Item


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def client(mocker) -> Mock:
    """API client handed out to every command."""
    client = mocker.Mock()
    client.fetch.return_value = b'{"ok": true}'
    mocker.patch("bcncli.cli.common.runtime.get_client", return_value=client)
    return client


@pytest.fixture
def items(sample_items_raw: bytes) -> list[Item]:
    return parse_items(sample_items_raw)


@pytest.fixture
def load_items(mocker, items: list[Item]) -> Mock:
    return mocker.patch("bcncli.cli.common.runtime.load_items", return_value=items)
