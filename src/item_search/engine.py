"""Public entry point: match item links against search queries."""

from item_search.core.expression import evaluate
from item_search.core.registry import PredicateRegistry, SearchPredicate
from item_search.predicates.defaults import create_default_registry
from item_search.predicates.sets import in_set
from item_search.providers.protocol import ItemInfoProvider, SetMembershipProvider, TooltipProvider


class ItemSearch:
    """Boolean item search over pluggable predicates.

    Usage:
        search = ItemSearch(info, tooltips, sets)
        search.matches(link, "q>=rare & lvl>200 | s:tank")
        search.in_set(link, "tank")
    """

    def __init__(
        self,
        info: ItemInfoProvider,
        tooltips: TooltipProvider,
        sets: SetMembershipProvider,
        registry: PredicateRegistry | None = None,
    ) -> None:
        """Initialize with providers; builds the default registry unless one is given."""
        self._info = info
        self._sets = sets
        if registry is None:
            registry = create_default_registry(info, tooltips, sets)
        self.registry = registry

    def matches(self, item: str, query: str | None) -> bool:
        """Check whether an item link matches a query. Blank queries match everything."""
        if item is None:
            raise ValueError("Item reference is required")
        if not query or not query.strip():
            return True
        return evaluate(self.registry, item, query)

    def in_set(self, item: str, query: str | None) -> bool:
        """Check whether an equippable item is in a set whose name contains ``query``."""
        if item is None:
            raise ValueError("Item reference is required")
        return in_set(self._info, self._sets, item, query)

    def register_predicate(self, predicate: SearchPredicate) -> None:
        """Add or replace a predicate."""
        self.registry.register(predicate)

    def list_predicates(self) -> list[SearchPredicate]:
        """All registered predicates in probing order."""
        return self.registry.list()

    def get_predicate(self, predicate_id: str) -> SearchPredicate | None:
        """Look up a predicate by id."""
        return self.registry.get(predicate_id)
