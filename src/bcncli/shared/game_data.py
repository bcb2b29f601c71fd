"""Static game reference data: food energy, pet boosts and pet types.

These tables are not served by the API and change only with game updates.
All lookups are case-insensitive.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FoodItem:
    """A pet food and the energy it restores."""

    name: str
    energy: int


@dataclass(frozen=True)
class PetBoostItem:
    """A pet boost with its worth in BC and its effect."""

    name: str
    worth: int
    effect: str


@dataclass(frozen=True)
class PetType:
    """A pet species with its icon and adventure category."""

    icon: str
    name: str
    category: str


ALL_FOOD_ITEMS: tuple[FoodItem, ...] = (
    FoodItem("Seaweed", 25),
    FoodItem("Sardine", 50),
    FoodItem("Exotic Bean", 150),
    FoodItem("Prawn", 150),
    FoodItem("Red Mushroom", 200),
    FoodItem("Bird Nest", 300),
    FoodItem("Jellyfish", 350),
    FoodItem("Soybean", 500),
    FoodItem("Milk", 500),
    FoodItem("Prime Steak", 600),
    FoodItem("Ocean Crab", 750),
    FoodItem("Blueberry", 750),
    FoodItem("Golden Wheat", 1000),
    FoodItem("Russet Potato", 1000),
    FoodItem("Blowfish", 2500),
    FoodItem("Electric Eel", 5000),
    FoodItem("Strawberry", 7500),
    FoodItem("Kiwi", 12500),
    FoodItem("Seafood Salad", 23000),
    FoodItem("Great White", 25000),
    FoodItem("Mango", 25000),
    FoodItem("Hearty Burger", 32500),
    FoodItem("Melon", 50000),
    FoodItem("Warm Broth", 58100),
    FoodItem("Pearled Oyster", 100000),
    FoodItem("Stone Soup", 268100),
    FoodItem("Coconut", 750000),
    FoodItem("Giant Squid", 1000000),
    FoodItem("Pumpkin", 7500000),
)

ALL_PET_BOOST_ITEMS: tuple[PetBoostItem, ...] = (
    PetBoostItem("Fragrant Dogrose", 2_500_000, "2× Pet Adventure Speed (2h)"),
    PetBoostItem("Mystical Rowan", 25_000_000, "4× Pet Adventure Speed (2h)"),
    PetBoostItem("Legendary Aguaje", 250_000_000, "8× Pet Adventure Speed (2h)"),
    PetBoostItem("Magic Token", 1_000_000_000, "10× Pet Adventure Speed (1d)"),
)

ALL_PET_TYPES: tuple[PetType, ...] = (
    # Fish
    PetType("🐬", "Dolphin", "Fish"),
    PetType("🦦", "Otter", "Fish"),
    PetType("🪿", "Goose", "Fish"),
    PetType("🦭", "Seal", "Fish"),
    PetType("🐳", "Whale", "Fish"),
    PetType("🐢", "Turtle", "Fish"),
    PetType("", "Dragon", "Fish"),
    # Hunt
    PetType("🦅", "Eagle", "Hunt"),
    PetType("🐅", "Tiger", "Hunt"),
    PetType("🦍", "Gorilla", "Hunt"),
    PetType("🐊", "Crocodile", "Hunt"),
    PetType("🐍", "Snake", "Hunt"),
    PetType("", "Scorpion", "Hunt"),
    PetType("", "Phoenix", "Hunt"),
    # Explore
    PetType("🐩", "Poodle", "Explore"),
    PetType("🐕", "Dog", "Explore"),
    PetType("🐎", "Mustang", "Explore"),
    PetType("🐖", "Pig", "Explore"),
    PetType("🦚", "Peacock", "Explore"),
    PetType("🫏", "Donkey", "Explore"),
    PetType("🐂", "Ox", "Explore"),
    PetType("🐓", "Junglefowl", "Explore"),
    PetType("🐇", "Rabbit", "Explore"),
    PetType("🕊️", "Dove", "Explore"),
    PetType("🦘", "Kangaroo", "Explore"),
    PetType("", "Visitor", "Explore"),
    # Mine
    PetType("🦇", "Bat", "Mine"),
    PetType("🐀", "Rat", "Mine"),
    PetType("🐌", "Snail", "Mine"),
    PetType("🦎", "Lizard", "Mine"),
    PetType("", "Invader", "Mine"),
)


def get_energy(name: str) -> int:
    """Energy restored by the named food, 0 when unknown."""
    wanted = name.casefold()
    for food in ALL_FOOD_ITEMS:
        if food.name.casefold() == wanted:
            return food.energy
    return 0


def get_pet_boost_details(name: str) -> tuple[int, str]:
    """Worth and effect of the named boost, ``(0, "")`` when unknown."""
    wanted = name.casefold()
    for boost in ALL_PET_BOOST_ITEMS:
        if boost.name.casefold() == wanted:
            return boost.worth, boost.effect
    return 0, ""


def get_pet_category(name: str) -> str:
    """Adventure category of the named pet, "" when unknown."""
    wanted = name.casefold()
    for pet in ALL_PET_TYPES:
        if pet.name.casefold() == wanted:
            return pet.category
    return ""


def get_pets_by_category(category: str) -> list[PetType]:
    """All pets in the given category, in table order."""
    wanted = category.casefold()
    return [pet for pet in ALL_PET_TYPES if pet.category.casefold() == wanted]
