"""Typed-search predicate protocol and registry.

A predicate answers "does this item satisfy this atom" for one kind of
attribute. The dispatcher only talks to predicates through this protocol,
so new predicates can be registered without touching the query engine.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class SearchPredicate(Protocol):
    """A pluggable attribute matcher.

    ``tags`` are the aliases usable as ``tag:text``; an empty tuple means the
    predicate is only reachable by untagged probing. ``only_via_tag``
    predicates are skipped when probing untagged atoms.
    """

    id: str
    tags: tuple[str, ...]
    only_via_tag: bool

    def can_search(self, operator: str | None, text: str) -> Any | None:
        """Return a capture if this predicate understands the atom, else None."""
        ...

    def evaluate(self, item: str, operator: str | None, capture: Any) -> bool:
        """Return True if the item matches the captured atom."""
        ...


def predicate_tags(predicate: SearchPredicate) -> tuple[str, ...]:
    """Tag aliases of a predicate; predicates without ``tags`` have none."""
    tags = getattr(predicate, "tags", None)
    if tags is None:
        return ()
    if isinstance(tags, str):
        raise ValueError(f"Predicate tags must be a collection of strings, not {tags!r}")
    return tuple(tags)


def is_tag_only(predicate: SearchPredicate) -> bool:
    """Whether untagged probing skips this predicate. Defaults to False."""
    return bool(getattr(predicate, "only_via_tag", False))


class PredicateRegistry:
    """Insertion-ordered mapping from predicate id to predicate."""

    def __init__(self) -> None:
        self._predicates: dict[str, SearchPredicate] = {}

    def register(self, predicate: SearchPredicate) -> None:
        """Register a predicate, replacing any predicate with the same id.

        A replaced predicate keeps its position in enumeration order.
        Raises ValueError for objects that do not look like predicates.
        """
        predicate_id = getattr(predicate, "id", None)
        if not isinstance(predicate_id, str) or not predicate_id:
            raise ValueError(f"Predicate must have a non-empty string id: {predicate!r}")
        for method in ("can_search", "evaluate"):
            if not callable(getattr(predicate, method, None)):
                raise ValueError(f"Predicate '{predicate_id}' has no callable {method}()")
        try:
            tags = predicate_tags(predicate)
        except ValueError as e:
            raise ValueError(f"Predicate '{predicate_id}': {e}") from e
        if not all(isinstance(t, str) and t for t in tags):
            raise ValueError(f"Predicate '{predicate_id}' tags must be non-empty strings")

        if predicate_id in self._predicates:
            logger.debug("Replacing predicate '%s'", predicate_id)
        self._predicates[predicate_id] = predicate

    def get(self, predicate_id: str) -> SearchPredicate | None:
        """Look up a predicate by id."""
        return self._predicates.get(predicate_id)

    def list(self) -> list[SearchPredicate]:
        """Return all predicates in registration order."""
        return list(self._predicates.values())

    def resolve_tag(self, tag: str) -> SearchPredicate | None:
        """Find the predicate a ``tag:`` prefix refers to.

        An exact alias match anywhere in the registry wins; otherwise the
        first predicate with an alias starting with ``tag`` is used.
        """
        tag = tag.lower()
        for predicate in self._predicates.values():
            if any(alias.lower() == tag for alias in predicate_tags(predicate)):
                return predicate
        for predicate in self._predicates.values():
            if any(alias.lower().startswith(tag) for alias in predicate_tags(predicate)):
                return predicate
        return None

    def __contains__(self, predicate_id: object) -> bool:
        return predicate_id in self._predicates

    def __iter__(self) -> Iterator[SearchPredicate]:
        return iter(list(self._predicates.values()))

    def __len__(self) -> int:
        return len(self._predicates)
