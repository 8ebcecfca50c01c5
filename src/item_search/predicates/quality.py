"""Quality predicate: ``q:rare``, ``q>=3``, ``quality:epic``."""

from item_search.core.compare import compare, to_number
from item_search.providers.protocol import ItemInfoProvider


class QualityPredicate:
    """Compares the item's quality tier against a tier label or number.

    Labels come from the item-info provider and are matched by substring in
    tier order, so ``q:common`` resolves to "common" before "uncommon".
    Comparisons use the tier index, never the label.
    """

    id = "quality"
    tags = ("q", "quality")
    only_via_tag = False

    def __init__(self, info: ItemInfoProvider) -> None:
        self._info = info

    def tier_for(self, text: str) -> int | None:
        """Index of the first quality label containing ``text``."""
        needle = text.lower()
        for index, label in enumerate(self._info.quality_labels()):
            if needle in label.lower():
                return index
        return None

    def can_search(self, operator: str | None, text: str) -> int | float | None:
        tier = self.tier_for(text)
        if tier is not None:
            return tier
        return to_number(text)

    def evaluate(self, item: str, operator: str | None, capture: float) -> bool:
        info = self._info.describe(item)
        if info is None or info.quality is None:
            return False
        return compare(operator, info.quality, capture)
