"""Full tooltip text predicate, only reachable through ``tt:``/``tip:``/``tooltip:``."""

from item_search.core.text import contains_any
from item_search.providers.protocol import TooltipProvider


class TooltipPredicate:
    """Matches text against every line of the item's tooltip."""

    id = "tooltip"
    tags = ("tt", "tip", "tooltip")
    only_via_tag = True

    def __init__(self, tooltips: TooltipProvider) -> None:
        self._tooltips = tooltips

    def can_search(self, operator: str | None, text: str) -> str | None:
        return text or None

    def evaluate(self, item: str, operator: str | None, capture: str) -> bool:
        return contains_any(capture, *self._tooltips.lines(item))
