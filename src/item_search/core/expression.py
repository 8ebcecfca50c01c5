"""Boolean query evaluation.

Grammar, highest precedence first::

    search    := union
    union     := intersect ( '|' intersect )*
    intersect := negatable ( '&' negatable )*
    negatable := ('!' | '~') atom | atom

Empty tokens are skipped at every level.
"""

import logging

from item_search.core.dispatch import dispatch
from item_search.core.registry import PredicateRegistry

logger = logging.getLogger(__name__)

NEGATION_MARKERS = ("!", "~")

# Result for atoms the dispatcher cannot interpret, before any negation
UNPARSEABLE_DEFAULT = True


def evaluate_negatable(registry: PredicateRegistry, item: str, token: str) -> bool:
    """Evaluate one atom, inverting it when it starts with a negation marker.

    Both branches dispatch with the same default, so ``!x`` is always the
    opposite of ``x``.
    """
    token = token.strip()
    if token[:1] in NEGATION_MARKERS:
        return not dispatch(registry, item, token[1:], UNPARSEABLE_DEFAULT)
    return dispatch(registry, item, token, UNPARSEABLE_DEFAULT)


def evaluate_intersect(registry: PredicateRegistry, item: str, group: str) -> bool:
    """True if every non-empty ``&`` term matches. An empty group matches."""
    for token in group.split("&"):
        if token.strip() and not evaluate_negatable(registry, item, token):
            return False
    return True


def evaluate_union(registry: PredicateRegistry, item: str, query: str) -> bool:
    """True if any non-empty ``|`` group matches. No usable groups matches nothing."""
    for group in query.split("|"):
        if group.strip() and evaluate_intersect(registry, item, group):
            return True
    return False


def evaluate(registry: PredicateRegistry, item: str, query: str) -> bool:
    """Evaluate a full query. Blank queries match every item."""
    if not query.strip():
        return True
    result = evaluate_union(registry, item, query.lower())
    logger.debug("Query %r against %s -> %s", query, item, result)
    return result
