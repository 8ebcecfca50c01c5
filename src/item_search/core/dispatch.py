"""Typed-search dispatch: route one query atom to the predicate that handles it.

An atom looks like ``[tag(:|op)][op]text``. The tag routes the atom to a
single predicate; untagged atoms are offered to every predicate that allows
untagged use.
"""

import logging
from dataclasses import dataclass

from item_search.core.compare import OPERATORS, normalize_operator
from item_search.core.registry import PredicateRegistry, SearchPredicate, is_tag_only

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Atom:
    """A tokenized query atom."""

    text: str
    tag: str | None = None
    operator: str | None = None


def _peel_operator(text: str) -> tuple[str | None, str]:
    """Split a leading relational operator off ``text``."""
    for operator in OPERATORS:
        if text.startswith(operator):
            return operator, text[len(operator) :]
    return None, text


def _peel_tag(text: str) -> tuple[str | None, str]:
    """Split a leading ``tag:`` or ``tag<op>`` prefix off ``text``."""
    end = 0
    while end < len(text) and text[end].isalnum():
        end += 1
    if end == 0 or end == len(text):
        return None, text
    if text[end] == ":":
        return text[:end], text[end + 1 :]
    operator, _ = _peel_operator(text[end:])
    if operator is not None and operator != ":":
        return text[:end], text[end:]
    return None, text


def parse_atom(text: str) -> Atom | None:
    """Tokenize an atom. Returns None when nothing searchable remains."""
    text = text.strip()
    if not text:
        return None

    tag, rest = _peel_tag(text)
    if tag is not None:
        rest = rest.strip()
        if not rest:
            return None

    operator, rest = _peel_operator(rest)
    rest = rest.strip()
    if not rest:
        return None
    return Atom(text=rest, tag=tag.lower() if tag else None, operator=operator)


def use_predicate(predicate: SearchPredicate, item: str, operator: str | None, text: str) -> bool:
    """Run one predicate against an item.

    ``!=`` is evaluated as equality and inverted, but only when the
    predicate accepted the atom.
    """
    operator = normalize_operator(operator)
    negate = operator == "!="
    if negate:
        operator = None

    capture = predicate.can_search(operator, text)
    if capture is None:
        return False
    result = bool(predicate.evaluate(item, operator, capture))
    return not result if negate else result


def dispatch(registry: PredicateRegistry, item: str, text: str, default: bool = True) -> bool:
    """Evaluate a single, non-negated atom against an item.

    Atoms that cannot be interpreted (empty, a bare tag, an unknown tag)
    return ``default``. Untagged atoms that no predicate accepts are False.
    """
    atom = parse_atom(text)
    if atom is None:
        return default

    if atom.tag is not None:
        predicate = registry.resolve_tag(atom.tag)
        if predicate is None:
            logger.debug("Unknown search tag '%s'", atom.tag)
            return default
        return use_predicate(predicate, item, atom.operator, atom.text)

    for predicate in registry:
        if is_tag_only(predicate):
            continue
        if use_predicate(predicate, item, atom.operator, atom.text):
            logger.debug("Atom '%s' matched by predicate '%s'", atom.text, predicate.id)
            return True
    return False
