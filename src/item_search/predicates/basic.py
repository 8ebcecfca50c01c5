"""Name, type and level predicates backed by the item-info provider."""

from item_search.core.compare import compare, to_number
from item_search.core.text import contains_any
from item_search.providers.protocol import ItemInfoProvider


class NamePredicate:
    """Matches text against the item's display name."""

    id = "name"
    tags = ("n", "name")
    only_via_tag = False

    def __init__(self, info: ItemInfoProvider) -> None:
        self._info = info

    def can_search(self, operator: str | None, text: str) -> str | None:
        if operator:
            return None
        return text or None

    def evaluate(self, item: str, operator: str | None, capture: str) -> bool:
        info = self._info.describe(item)
        return info is not None and contains_any(capture, info.name)


class TypePredicate:
    """Matches text against the item's type, subtype and equip slot label."""

    id = "type"
    tags = ("t", "type", "slot")
    only_via_tag = False

    def __init__(self, info: ItemInfoProvider) -> None:
        self._info = info

    def can_search(self, operator: str | None, text: str) -> str | None:
        if operator:
            return None
        return text or None

    def evaluate(self, item: str, operator: str | None, capture: str) -> bool:
        info = self._info.describe(item)
        if info is None:
            return False
        return contains_any(capture, info.type, info.sub_type, info.equip_slot)


class LevelPredicate:
    """Compares the item level against a number (``lvl>=80``)."""

    id = "level"
    tags = ("l", "level", "lvl", "ilvl")
    only_via_tag = False

    def __init__(self, info: ItemInfoProvider) -> None:
        self._info = info

    def can_search(self, operator: str | None, text: str) -> int | float | None:
        return to_number(text)

    def evaluate(self, item: str, operator: str | None, capture: float) -> bool:
        info = self._info.describe(item)
        if info is None or info.level is None:
            return False
        return compare(operator, info.level, capture)
