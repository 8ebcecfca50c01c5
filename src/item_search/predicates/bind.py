"""Bind-type keyword predicate (``boe``, ``bop``, ``soulbound``, ...) with a tooltip cache."""

import logging
import threading
from collections.abc import Callable, Mapping

from item_search.core.links import item_id
from item_search.providers.protocol import TooltipProvider

logger = logging.getLogger(__name__)

BIND_ON_PICKUP = "Binds when picked up"
BIND_ON_EQUIP = "Binds when equipped"
BIND_ON_USE = "Binds when used"
BIND_QUEST = "Quest Item"
BIND_TO_ACCOUNT = "Binds to Battle.net account"

DEFAULT_KEYWORDS: dict[str, str] = {
    "soulbound": BIND_ON_PICKUP,
    "bound": BIND_ON_PICKUP,
    "boe": BIND_ON_EQUIP,
    "bop": BIND_ON_PICKUP,
    "bou": BIND_ON_USE,
    "quest": BIND_QUEST,
    "boa": BIND_TO_ACCOUNT,
}

# Bind text only ever appears right under the item name
_BIND_LINES = (2, 3)


class TooltipCache:
    """Remembers tooltip scan results per (text, item id). Never evicts."""

    def __init__(self) -> None:
        self._results: dict[tuple[str, int], bool] = {}
        self._lock = threading.Lock()

    def get_or_compute(self, text: str, item_id: int, compute: Callable[[], bool]) -> bool:
        """Return the cached result for the pair, computing and storing it on a miss."""
        key = (text, item_id)
        with self._lock:
            cached = self._results.get(key)
            if cached is not None:
                return cached
            result = compute()
            self._results[key] = result
            return result

    def __len__(self) -> int:
        return len(self._results)


class BindPredicate:
    """Matches bind keywords against the bind line of the item's tooltip.

    Only reachable untagged: the whole atom must be one of the keywords.
    """

    id = "bind"
    tags: tuple[str, ...] = ()
    only_via_tag = False

    def __init__(
        self,
        tooltips: TooltipProvider,
        keywords: Mapping[str, str] | None = None,
        cache: TooltipCache | None = None,
    ) -> None:
        self._tooltips = tooltips
        self.keywords = dict(DEFAULT_KEYWORDS if keywords is None else keywords)
        self.cache = cache if cache is not None else TooltipCache()

    def can_search(self, operator: str | None, text: str) -> str | None:
        return self.keywords.get(text)

    def evaluate(self, item: str, operator: str | None, capture: str) -> bool:
        found_id = item_id(item)
        if found_id is None:
            return False
        return self.cache.get_or_compute(capture, found_id, lambda: self._scan(item, capture))

    def _scan(self, item: str, text: str) -> bool:
        logger.debug("Scanning tooltip of %s for '%s'", item, text)
        for index in _BIND_LINES:
            line = self._tooltips.line(item, index)
            if line is None:
                return False
            if line == text:
                return True
        return False
