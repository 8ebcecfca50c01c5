"""Item catalog file schema."""

from typing import Any, Self

from pydantic import BaseModel, Field, model_validator

from item_search.core.links import build_link, item_id

DEFAULT_QUALITY_LABELS = [
    "Poor",
    "Common",
    "Uncommon",
    "Rare",
    "Epic",
    "Legendary",
    "Artifact",
    "Heirloom",
]


class CatalogItem(BaseModel):
    """One item in the catalog.

    ``equip_slot`` may be a display label ("Chest") or an ``INVTYPE_*``
    token; tokens are translated by the catalog provider.
    """

    id: int
    name: str
    link: str | None = None
    type: str | None = None
    sub_type: str | None = None
    equip_slot: str | None = None
    quality: int | None = Field(default=None, ge=0)
    level: int | None = None
    equippable: bool | None = None
    tooltip: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_link_id(self) -> Self:
        """A custom link must carry this item's id, or it would never resolve."""
        if self.link is not None and item_id(self.link) != self.id:
            raise ValueError(f"link {self.link!r} does not refer to item {self.id}")
        return self

    @property
    def ref(self) -> str:
        """The item link used as the item reference."""
        return self.link or build_link(self.id, self.name)


class Catalog(BaseModel):
    """A JSON item catalog: items, quality labels and set data.

    ``sets`` is backend-specific raw data, see ``providers.sets``.
    """

    quality_labels: list[str] = Field(default_factory=lambda: list(DEFAULT_QUALITY_LABELS))
    items: list[CatalogItem] = Field(default_factory=list)
    set_backend: str | None = None
    sets: Any = None
