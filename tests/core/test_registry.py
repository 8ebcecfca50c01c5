"""Tests for the predicate registry."""

import pytest

from item_search.core.expression import evaluate
from item_search.core.registry import (
    PredicateRegistry,
    SearchPredicate,
    is_tag_only,
    predicate_tags,
)


class StubPredicate:
    def __init__(self, predicate_id: str, tags=(), only_via_tag=False):
        self.id = predicate_id
        self.tags = tuple(tags)
        self.only_via_tag = only_via_tag

    def can_search(self, operator, text):
        return text

    def evaluate(self, item, operator, capture):
        return True


def test_stub_conforms_to_protocol():
    assert isinstance(StubPredicate("x"), SearchPredicate)


def test_register_and_get():
    registry = PredicateRegistry()
    predicate = StubPredicate("name", ["n", "name"])
    registry.register(predicate)
    assert registry.get("name") is predicate
    assert "name" in registry
    assert len(registry) == 1


def test_get_missing_returns_none():
    assert PredicateRegistry().get("nope") is None


def test_list_keeps_registration_order():
    registry = PredicateRegistry()
    for pid in ("a", "b", "c"):
        registry.register(StubPredicate(pid))
    assert [p.id for p in registry.list()] == ["a", "b", "c"]


def test_last_registration_wins_and_keeps_position():
    registry = PredicateRegistry()
    registry.register(StubPredicate("a"))
    registry.register(StubPredicate("b"))
    replacement = StubPredicate("a", ["x"])
    registry.register(replacement)
    assert registry.get("a") is replacement
    assert [p.id for p in registry.list()] == ["a", "b"]


def test_register_rejects_missing_id():
    with pytest.raises(ValueError, match="non-empty string id"):
        PredicateRegistry().register(StubPredicate(""))


def test_register_rejects_non_callable_methods():
    predicate = StubPredicate("broken")
    predicate.evaluate = "not callable"
    with pytest.raises(ValueError, match="evaluate"):
        PredicateRegistry().register(predicate)


def test_register_rejects_string_tags():
    predicate = StubPredicate("bad")
    predicate.tags = "name"
    with pytest.raises(ValueError, match="tags"):
        PredicateRegistry().register(predicate)


class TestResolveTag:
    @pytest.fixture
    def registry(self):
        registry = PredicateRegistry()
        registry.register(StubPredicate("type", ["t", "type", "slot"]))
        registry.register(StubPredicate("tooltip", ["tt", "tip", "tooltip"]))
        registry.register(StubPredicate("sets", ["s", "set"]))
        return registry

    def test_exact_alias(self, registry):
        assert registry.resolve_tag("tip").id == "tooltip"

    def test_exact_alias_beats_earlier_prefix(self, registry):
        # "slot" starts with "s", but "s" is an exact alias of sets
        assert registry.resolve_tag("s").id == "sets"

    def test_prefix_uses_registration_order(self, registry):
        # "to" prefixes only "tooltip"
        assert registry.resolve_tag("to").id == "tooltip"
        # "ty" prefixes only "type"
        assert registry.resolve_tag("ty").id == "type"

    def test_case_insensitive(self, registry):
        assert registry.resolve_tag("TYPE").id == "type"

    def test_unknown_tag(self, registry):
        assert registry.resolve_tag("zz") is None

    def test_untagged_predicates_never_resolve(self):
        registry = PredicateRegistry()
        registry.register(StubPredicate("bind"))
        assert registry.resolve_tag("b") is None


class BarePredicate:
    """Defines only the required members; no tags, no only_via_tag."""

    id = "bare"

    def can_search(self, operator, text):
        return text if text == "hit" else None

    def evaluate(self, item, operator, capture):
        return True


def test_tags_and_tag_only_default_when_missing():
    predicate = BarePredicate()
    assert predicate_tags(predicate) == ()
    assert is_tag_only(predicate) is False


def test_predicate_without_optional_attributes_is_usable():
    registry = PredicateRegistry()
    registry.register(BarePredicate())
    assert registry.resolve_tag("b") is None
    # untagged probing reaches it, an unknown tag falls back to the default
    assert evaluate(registry, "item", "hit") is True
    assert evaluate(registry, "item", "miss") is False
    assert evaluate(registry, "item", "zz:hit") is True
