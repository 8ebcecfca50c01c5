"""Shared test fixtures."""

import pytest

from item_search.core.links import build_link
from item_search.engine import ItemSearch
from item_search.models.item import ItemInfo
from item_search.providers.sets import EquipmentSetProvider

QUALITY_LABELS = ["poor", "common", "uncommon", "rare", "epic", "legendary"]

SWORD = build_link(123, "Gleaming Sword")
SHIELD = build_link(456, "Bulwark of Ages")
POTION = build_link(789, "Healing Potion")
QUEST_ITEM = build_link(321, "Dusty Letter")
UNKNOWN = build_link(999, "Mystery Box")


class FakeItemInfo:
    """Item info keyed by link, with fixed quality labels."""

    def __init__(self, items: dict[str, ItemInfo], labels: list[str] | None = None):
        self.items = items
        self.labels = labels if labels is not None else list(QUALITY_LABELS)
        self.equippable: set[str] = {k for k, v in items.items() if v.equip_slot}

    def describe(self, item: str) -> ItemInfo | None:
        return self.items.get(item)

    def quality_labels(self) -> list[str]:
        return self.labels

    def is_equippable(self, item: str) -> bool:
        return item in self.equippable


class FakeTooltips:
    """Tooltip lines keyed by link; counts every lookup."""

    def __init__(self, tooltips: dict[str, list[str]]):
        self.tooltips = tooltips
        self.line_calls = 0
        self.lines_calls = 0

    def lines(self, item: str) -> list[str]:
        self.lines_calls += 1
        return self.tooltips.get(item, [])

    def line(self, item: str, index: int) -> str | None:
        self.line_calls += 1
        lines = self.tooltips.get(item, [])
        if 1 <= index <= len(lines):
            return lines[index - 1]
        return None


def make_items() -> dict[str, ItemInfo]:
    return {
        SWORD: ItemInfo(
            name="Gleaming Sword",
            type="Weapon",
            sub_type="One-Handed Swords",
            equip_slot="One-Hand",
            quality=3,
            level=80,
        ),
        SHIELD: ItemInfo(
            name="Bulwark of Ages",
            type="Armor",
            sub_type="Shields",
            equip_slot="Off Hand",
            quality=4,
            level=85,
        ),
        POTION: ItemInfo(name="Healing Potion", type="Consumable", sub_type="Potion", quality=1),
        QUEST_ITEM: ItemInfo(name="Dusty Letter", type="Quest", quality=1, level=1),
    }


def make_tooltips() -> dict[str, list[str]]:
    return {
        SWORD: ["Gleaming Sword", "Binds when picked up", "One-Hand", "+20 Strength"],
        SHIELD: [
            "Bulwark of Ages",
            "Heroic",
            "Binds when equipped",
            "Equip: Increases your block value by 40.",
        ],
        POTION: ["Healing Potion", "Use: Restores 1500 health."],
        QUEST_ITEM: ["Dusty Letter", "Quest Item", "This Item Begins a Quest"],
    }


@pytest.fixture
def info():
    """Item info for a sword, a shield, a potion and a quest item."""
    return FakeItemInfo(make_items())


@pytest.fixture
def tooltips():
    """Call-counting tooltip provider."""
    return FakeTooltips(make_tooltips())


@pytest.fixture
def sets():
    """The sword and shield are tank gear; only the sword is in the PvP set."""
    return EquipmentSetProvider({"Tank Gear": [123, 456], "PvP": [123]})


@pytest.fixture
def search(info, tooltips, sets):
    """Engine with the default predicates over the fake providers."""
    return ItemSearch(info, tooltips, sets)
