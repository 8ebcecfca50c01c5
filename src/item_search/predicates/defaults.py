"""The built-in predicate set."""

from item_search.core.registry import PredicateRegistry
from item_search.predicates.basic import LevelPredicate, NamePredicate, TypePredicate
from item_search.predicates.bind import BindPredicate
from item_search.predicates.quality import QualityPredicate
from item_search.predicates.sets import SetsPredicate
from item_search.predicates.tooltip import TooltipPredicate
from item_search.providers.protocol import ItemInfoProvider, SetMembershipProvider, TooltipProvider


def create_default_registry(
    info: ItemInfoProvider,
    tooltips: TooltipProvider,
    sets: SetMembershipProvider,
) -> PredicateRegistry:
    """Register name, type, quality, level, bind, tooltip and sets, in that order.

    Order matters for untagged probing and for ambiguous tag prefixes.
    """
    registry = PredicateRegistry()
    registry.register(NamePredicate(info))
    registry.register(TypePredicate(info))
    registry.register(QualityPredicate(info))
    registry.register(LevelPredicate(info))
    registry.register(BindPredicate(tooltips))
    registry.register(TooltipPredicate(tooltips))
    registry.register(SetsPredicate(info, sets))
    return registry
