"""Tests for the view-building helpers behind the table commands."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from bcncli.cli.commands.market import OverviewRow, overview_rows, render_listings
from bcncli.cli.commands.pet import render_pets
from bcncli.cli.commands.profile import parse_filter, render_profile, sort_farm_plots
from bcncli.shared.errors import ValidationError
from bcncli.shared.models import FarmPlot, Listing, MarketOverview, Pet, ProfileInfo

NOW = datetime(2024, 5, 1, tzinfo=timezone.utc)


def plot(level: int, item_id: int) -> FarmPlot:
    return FarmPlot.model_validate({"level": level, "status": {"isPlanted": True, "itemId": item_id}})


class TestProfileHelpers:
    def test_parse_filter(self) -> None:
        assert parse_filter(None) is None
        assert parse_filter("") is None
        assert parse_filter(" Basic, farms ,") == {"basic", "farms"}

    @pytest.mark.parametrize(
        ("flag", "expected_levels"),
        [
            (None, [3, 1, 2]),
            ("farm:level", [1, 2, 3]),
            ("farm:plant", [2, 3, 1]),
            ("FARM:ITEM", [2, 3, 1]),
        ],
    )
    def test_sort_farm_plots(self, flag: str | None, expected_levels: list[int]) -> None:
        plots = [plot(3, 20), plot(1, 30), plot(2, 10)]

        assert [p.level for p in sort_farm_plots(plots, flag)] == expected_levels

    @pytest.mark.parametrize("flag", ["farm:color", "pet:level", "level"])
    def test_sort_farm_plots_rejects_unknown_keys(self, flag: str) -> None:
        with pytest.raises(ValidationError):
            sort_farm_plots([], flag)

    def test_render_profile_sections(self) -> None:
        profile = ProfileInfo.model_validate({"id": 1, "name": "p", "factionId": 4, "faction": {"tag": "WLF"}})

        titles = [table.title for table in render_profile(profile, [], now=NOW)]

        assert titles[:2] == ["=== BASIC ===", "=== FACTION ==="]
        assert "=== CUSTOM ===" in titles

    def test_render_profile_filter(self) -> None:
        profile = ProfileInfo.model_validate({"id": 1})

        tables = render_profile(profile, [], sections={"perks", "upgrades"}, now=NOW)

        assert [table.title for table in tables] == ["=== UPGRADES ===", "=== PERKS ==="]


class TestPetHelpers:
    PETS = [
        Pet(id=3, name="C", species="Otter", tier=2),
        Pet(id=1, name="A", species="Dolphin", tier=2),
        Pet(id=2, name="B", species="Otter", tier=1),
    ]

    def test_single_table_without_group(self) -> None:
        tables = render_pets(self.PETS, sort_by="id")

        assert len(tables) == 1
        assert tables[0].row_count == 3

    def test_groups_sorted_by_key(self) -> None:
        tables = render_pets(self.PETS, group_by="TIER")

        assert [table.title for table in tables] == ["1 (1)", "2 (2)"]

    def test_invalid_fields(self) -> None:
        with pytest.raises(ValidationError, match="Invalid sort field: age"):
            render_pets(self.PETS, sort_by="age")
        with pytest.raises(ValidationError, match="Invalid group field: age"):
            render_pets(self.PETS, group_by="age")


class TestMarketHelpers:
    def test_overview_rows(self, items) -> None:
        overview = MarketOverview.model_validate({"data": {"item2": 5, "item1": 9, "item7": 1, "bogus": 3}})

        rows = overview_rows(overview, items, sort_by="name")

        assert rows == [
            OverviewRow(2, "Sardine", 5),
            OverviewRow(1, "Seaweed", 9),
            OverviewRow(7, "UNKNOWN(7)", 1),
        ]

    def test_overview_rows_default_sort_is_id(self, items) -> None:
        overview = MarketOverview.model_validate({"data": {"item2": 5, "item1": 9}})

        assert [row.item_id for row in overview_rows(overview, items)] == [1, 2]

    def test_render_listings(self, items) -> None:
        table = render_listings([Listing(item_id=2, price=1500, amount=1)], items)

        assert table.row_count == 1
        assert [column.header for column in table.columns] == ["ITEM", "PRICE", "AMOUNT"]
