"""Protocols for the collaborators the search engine reads item data from."""

from collections.abc import Collection, Mapping, Sequence
from typing import Protocol, runtime_checkable

from item_search.models.item import ItemInfo


@runtime_checkable
class ItemInfoProvider(Protocol):
    """Source of item names, types, quality and level."""

    def describe(self, item: str) -> ItemInfo | None:
        """Describe an item. Returns None if the item is unknown."""
        ...

    def quality_labels(self) -> Sequence[str]:
        """Quality tier labels, ordered so the index is the tier."""
        ...

    def is_equippable(self, item: str) -> bool:
        """Check whether the item can be worn."""
        ...


@runtime_checkable
class TooltipProvider(Protocol):
    """Source of an item's tooltip text."""

    def lines(self, item: str) -> Sequence[str]:
        """All tooltip lines, top to bottom. Empty if unavailable."""
        ...

    def line(self, item: str, index: int) -> str | None:
        """A single tooltip line by 1-based index, or None if out of range."""
        ...


@runtime_checkable
class SetMembershipProvider(Protocol):
    """Source of named item sets."""

    def sets(self) -> Mapping[str, Collection[int]]:
        """Map each set name to the item ids it contains."""
        ...
