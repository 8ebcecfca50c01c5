"""In-memory item-info and tooltip provider backed by a JSON catalog."""

import logging
from collections.abc import Sequence
from pathlib import Path

from item_search.core.links import item_id
from item_search.models.catalog import Catalog, CatalogItem
from item_search.models.item import ItemInfo

logger = logging.getLogger(__name__)

# Slot tokens as the game client reports them, with their English labels
SLOT_LABELS: dict[str, str] = {
    "INVTYPE_HEAD": "Head",
    "INVTYPE_NECK": "Neck",
    "INVTYPE_SHOULDER": "Shoulder",
    "INVTYPE_BODY": "Shirt",
    "INVTYPE_CHEST": "Chest",
    "INVTYPE_ROBE": "Chest",
    "INVTYPE_WAIST": "Waist",
    "INVTYPE_LEGS": "Legs",
    "INVTYPE_FEET": "Feet",
    "INVTYPE_WRIST": "Wrist",
    "INVTYPE_HAND": "Hands",
    "INVTYPE_FINGER": "Finger",
    "INVTYPE_TRINKET": "Trinket",
    "INVTYPE_CLOAK": "Back",
    "INVTYPE_WEAPON": "One-Hand",
    "INVTYPE_SHIELD": "Off Hand",
    "INVTYPE_2HWEAPON": "Two-Hand",
    "INVTYPE_WEAPONMAINHAND": "Main Hand",
    "INVTYPE_WEAPONOFFHAND": "Off Hand",
    "INVTYPE_HOLDABLE": "Held In Off-hand",
    "INVTYPE_RANGED": "Ranged",
    "INVTYPE_RANGEDRIGHT": "Ranged",
    "INVTYPE_THROWN": "Thrown",
    "INVTYPE_RELIC": "Relic",
    "INVTYPE_TABARD": "Tabard",
    "INVTYPE_BAG": "Bag",
}


def load_catalog(path: Path) -> Catalog:
    """Read and validate a catalog file. Raises on missing or malformed files."""
    logger.info("Loading item catalog from %s", path)
    return Catalog.model_validate_json(path.read_text(encoding="utf-8"))


class CatalogProvider:
    """Serves item info and tooltips for the items in a catalog.

    Items are looked up by the id in whatever link the caller passes, so
    links with different bonus fields resolve to the same entry.
    """

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog
        self._by_id: dict[int, CatalogItem] = {item.id: item for item in catalog.items}

    @property
    def items(self) -> list[CatalogItem]:
        return self._catalog.items

    def find(self, item: str) -> CatalogItem | None:
        """Resolve a link, bare id or exact (case-insensitive) name to a catalog item."""
        text = item.strip()
        found_id = item_id(text)
        if found_id is None:
            try:
                found_id = int(text)
            except ValueError:
                pass
        if found_id is not None:
            return self._by_id.get(found_id)
        lowered = text.lower()
        for entry in self._catalog.items:
            if entry.name.lower() == lowered:
                return entry
        return None

    def describe(self, item: str) -> ItemInfo | None:
        entry = self.find(item)
        if entry is None:
            return None
        slot = entry.equip_slot
        if slot:
            slot = SLOT_LABELS.get(slot, slot)
        return ItemInfo(
            name=entry.name,
            type=entry.type,
            sub_type=entry.sub_type,
            equip_slot=slot,
            quality=entry.quality,
            level=entry.level,
        )

    def quality_labels(self) -> Sequence[str]:
        return self._catalog.quality_labels

    def is_equippable(self, item: str) -> bool:
        entry = self.find(item)
        if entry is None:
            return False
        if entry.equippable is not None:
            return entry.equippable
        # Items without an explicit flag are equippable when they have a slot
        return bool(entry.equip_slot) and entry.equip_slot != "INVTYPE_BAG"

    def lines(self, item: str) -> Sequence[str]:
        entry = self.find(item)
        return entry.tooltip if entry is not None else []

    def line(self, item: str, index: int) -> str | None:
        lines = self.lines(item)
        if 1 <= index <= len(lines):
            return lines[index - 1]
        return None
