"""Tests for operator comparison and number parsing."""

import pytest

from item_search.core.compare import compare, normalize_operator, to_number


@pytest.mark.parametrize(
    ("operator", "a", "b", "expected"),
    [
        ("<", 1, 2, True),
        ("<", 2, 2, False),
        ("<=", 2, 2, True),
        (">", 3, 2, True),
        (">", 2, 2, False),
        (">=", 2, 2, True),
        (None, 2, 2, True),
        (None, 2, 3, False),
    ],
)
def test_compare(operator, a, b, expected):
    assert compare(operator, a, b) is expected


def test_unknown_operator_falls_back_to_equality():
    assert compare("<>", 5, 5) is True
    assert compare("bogus", 5, 6) is False


def test_normalize_equality_spellings():
    assert normalize_operator("=") is None
    assert normalize_operator("==") is None
    assert normalize_operator(":") is None
    assert normalize_operator(None) is None


def test_normalize_not_equal_spellings():
    assert normalize_operator("~=") == "!="
    assert normalize_operator("!=") == "!="


def test_normalize_keeps_ordering_operators():
    assert normalize_operator(">=") == ">="


def test_to_number():
    assert to_number("80") == 80
    assert isinstance(to_number("80"), int)
    assert to_number(" 2.5 ") == 2.5
    assert to_number("-3") == -3


def test_to_number_rejects_text():
    assert to_number("abc") is None
    assert to_number("") is None
    assert to_number("nan") is None
    assert to_number("inf") is None


def test_to_number_accepts_only_plain_ascii_numbers():
    assert to_number("8_0") is None
    assert to_number("٨٠") is None  # Arabic-Indic digits
    assert to_number("1e3") is None
    assert to_number(".5") is None
    assert to_number("+7") == 7
