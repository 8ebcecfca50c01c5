"""Item data providers and set-membership backends."""

from item_search.providers.catalog import CatalogProvider, load_catalog
from item_search.providers.protocol import (
    ItemInfoProvider,
    SetMembershipProvider,
    TooltipProvider,
)
from item_search.providers.sets import (
    EquipmentSetProvider,
    OutfitSetProvider,
    RackSetProvider,
    select_set_provider,
)

__all__ = [
    "CatalogProvider",
    "EquipmentSetProvider",
    "ItemInfoProvider",
    "OutfitSetProvider",
    "RackSetProvider",
    "SetMembershipProvider",
    "TooltipProvider",
    "load_catalog",
    "select_set_provider",
]
