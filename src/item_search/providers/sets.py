"""Set-membership backends.

Each backend adapts one equipment-manager data shape to the
``SetMembershipProvider`` protocol. Exactly one is active per deployment,
chosen once with ``select_set_provider``.
"""

import logging
from collections.abc import Collection, Mapping
from typing import Any

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class EquipmentSetProvider:
    """Built-in equipment manager: set name to a list of item ids."""

    def __init__(self, sets: Mapping[str, Collection[int]] | None = None) -> None:
        self._sets: dict[str, frozenset[int]] = {
            name: frozenset(ids) for name, ids in (sets or {}).items()
        }

    @classmethod
    def from_source(cls, data: Any) -> "EquipmentSetProvider":
        """Build from ``{"Set name": [item ids]}``."""
        return cls({str(name): [int(i) for i in ids] for name, ids in (data or {}).items()})

    def sets(self) -> Mapping[str, Collection[int]]:
        return self._sets


class OutfitSlot(BaseModel):
    """One slot of a saved outfit."""

    item_id: int | None = None
    used: bool = True


class Outfit(BaseModel):
    """A saved outfit: a name and its slots."""

    name: str
    slots: list[OutfitSlot] = Field(default_factory=list)


class OutfitSetProvider:
    """Outfit manager: named outfits whose slots may be switched off.

    Only slots marked as used count towards membership.
    """

    def __init__(self, outfits: list[Outfit] | None = None) -> None:
        self._outfits = outfits or []

    @classmethod
    def from_source(cls, data: Any) -> "OutfitSetProvider":
        """Build from ``[{"name": ..., "slots": [{"item_id": ..., "used": ...}]}]``."""
        return cls([Outfit.model_validate(o) for o in (data or [])])

    def sets(self) -> Mapping[str, Collection[int]]:
        result: dict[str, set[int]] = {}
        for outfit in self._outfits:
            ids = result.setdefault(outfit.name, set())
            ids.update(s.item_id for s in outfit.slots if s.used and s.item_id is not None)
        return result


def rack_item_id(entry: str | int) -> int | None:
    """Leading item id of an item-rack equip entry (``"1234:0:0:0"``).

    Two entries are the same item when their leading ids agree, whatever
    enchant or gem fields follow.
    """
    if isinstance(entry, int):
        return entry
    head = entry.split(":", 1)[0].strip()
    try:
        return int(head)
    except ValueError:
        return None


class RackSet(BaseModel):
    """An item-rack set; ``equip`` holds item strings per slot."""

    equip: list[str | int] = Field(default_factory=list)


class RackSetProvider:
    """Item-rack style sets: equip entries are item strings, not bare ids."""

    def __init__(self, sets: Mapping[str, RackSet] | None = None) -> None:
        self._sets = dict(sets or {})

    @classmethod
    def from_source(cls, data: Any) -> "RackSetProvider":
        """Build from ``{"Set name": {"equip": ["1234:0:0", ...]}}``."""
        return cls({str(name): RackSet.model_validate(s) for name, s in (data or {}).items()})

    def sets(self) -> Mapping[str, Collection[int]]:
        result: dict[str, set[int]] = {}
        for name, rack_set in self._sets.items():
            ids = (rack_item_id(entry) for entry in rack_set.equip)
            result[name] = {i for i in ids if i is not None}
        return result


_BACKENDS = {
    "equipment": EquipmentSetProvider,
    "outfit": OutfitSetProvider,
    "rack": RackSetProvider,
}


def select_set_provider(
    name: str, source: Any = None
) -> EquipmentSetProvider | OutfitSetProvider | RackSetProvider:
    """Create the set backend called ``name`` from its raw data.

    Raises ValueError for unknown backend names.
    """
    backend = _BACKENDS.get(name.lower())
    if backend is None:
        raise ValueError(f"Unknown set backend '{name}' (expected one of {sorted(_BACKENDS)})")
    logger.debug("Using '%s' set backend", name)
    return backend.from_source(source)
