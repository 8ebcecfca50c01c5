"""Set-membership predicate (``s:tank``, ``set:*``)."""

import logging

from item_search.core.links import item_id
from item_search.core.text import contains_any
from item_search.providers.protocol import ItemInfoProvider, SetMembershipProvider

logger = logging.getLogger(__name__)

ANY_SET = "*"


def belongs_to_set(provider: SetMembershipProvider, target_id: int, search: str) -> bool:
    """Check whether an item id is in any set whose name contains ``search``.

    ``*`` matches every named set.
    """
    for name, ids in provider.sets().items():
        if not name:
            continue
        if search != ANY_SET and not contains_any(search, name):
            continue
        if target_id in ids:
            return True
    return False


def in_set(
    info: ItemInfoProvider, provider: SetMembershipProvider, item: str, search: str | None
) -> bool:
    """Check set membership for an equippable item link."""
    if not info.is_equippable(item):
        return False
    found_id = item_id(item)
    if found_id is None:
        logger.debug("No item id in %s", item)
        return False
    # A missing search is treated like a blank one: any set name contains ""
    return belongs_to_set(provider, found_id, (search or "").lower())


class SetsPredicate:
    """Matches items that belong to a named set."""

    id = "sets"
    tags = ("s", "set")
    only_via_tag = False

    def __init__(self, info: ItemInfoProvider, provider: SetMembershipProvider) -> None:
        self._info = info
        self._provider = provider

    def can_search(self, operator: str | None, text: str) -> str | None:
        if operator:
            return None
        return text or None

    def evaluate(self, item: str, operator: str | None, capture: str) -> bool:
        return in_set(self._info, self._provider, item, capture)
