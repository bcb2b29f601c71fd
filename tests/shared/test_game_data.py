"""Tests for the static game reference tables."""

from __future__ import annotations

import pytest

from bcncli.shared.game_data import (
    ALL_PET_TYPES,
    get_energy,
    get_pet_boost_details,
    get_pet_category,
    get_pets_by_category,
)


@pytest.mark.parametrize("name", ["Seaweed", "seaweed", "SEAWEED"])
def test_get_energy_is_case_insensitive(name: str) -> None:
    assert get_energy(name) == 25


def test_get_energy_unknown_food() -> None:
    assert get_energy("Cardboard") == 0


def test_get_pet_boost_details() -> None:
    assert get_pet_boost_details("magic token") == (1_000_000_000, "10× Pet Adventure Speed (1d)")
    assert get_pet_boost_details("nothing") == (0, "")


def test_get_pet_category() -> None:
    assert get_pet_category("dolphin") == "Fish"
    assert get_pet_category("Unicorn?") == ""


def test_get_pets_by_category_keeps_table_order() -> None:
    fish = get_pets_by_category("FISH")

    assert fish
    assert all(pet.category == "Fish" for pet in fish)
    assert fish == [pet for pet in ALL_PET_TYPES if pet.category == "Fish"]


def test_get_pets_by_unknown_category() -> None:
    assert get_pets_by_category("Space") == []
