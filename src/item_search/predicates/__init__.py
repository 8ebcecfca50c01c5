"""Built-in search predicates."""

from item_search.predicates.basic import LevelPredicate, NamePredicate, TypePredicate
from item_search.predicates.bind import BindPredicate, TooltipCache
from item_search.predicates.defaults import create_default_registry
from item_search.predicates.quality import QualityPredicate
from item_search.predicates.sets import SetsPredicate
from item_search.predicates.tooltip import TooltipPredicate

__all__ = [
    "BindPredicate",
    "LevelPredicate",
    "NamePredicate",
    "QualityPredicate",
    "SetsPredicate",
    "TooltipCache",
    "TooltipPredicate",
    "TypePredicate",
    "create_default_registry",
]
