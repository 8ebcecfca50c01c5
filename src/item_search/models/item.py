"""Item description model."""

from pydantic import BaseModel, Field


class ItemInfo(BaseModel):
    """What an item-info provider knows about an item.

    Every field is optional; predicates treat a missing value as no match.
    ``equip_slot`` is the display label ("Chest"), not the slot token.
    ``quality`` is an index into the provider's quality labels.
    """

    name: str | None = None
    type: str | None = None
    sub_type: str | None = None
    equip_slot: str | None = None
    quality: int | None = Field(default=None, ge=0)
    level: int | None = None
