"""Relational operator comparison and numeric parsing for query atoms."""

import re

# Operators peeled off the front of an atom, longest first so "<=" wins over "<"
OPERATORS: tuple[str, ...] = ("<=", ">=", "==", "!=", "~=", "<", ">", "=", ":")

# Spellings that all mean plain equality
_EQUALITY = {"=", "==", ":"}

_NUMBER = re.compile(r"[+-]?[0-9]+(\.[0-9]+)?")


def normalize_operator(operator: str | None) -> str | None:
    """Collapse operator spellings: equality becomes None, ``~=`` becomes ``!=``."""
    if not operator or operator in _EQUALITY:
        return None
    if operator == "~=":
        return "!="
    return operator


def compare(operator: str | None, a: float, b: float) -> bool:
    """Compare ``a`` against ``b``.

    Unknown operators (and None) fall back to equality. ``!=`` is not handled
    here; callers negate an equality comparison instead.
    """
    if operator == "<=":
        return a <= b
    if operator == "<":
        return a < b
    if operator == ">":
        return a > b
    if operator == ">=":
        return a >= b
    return a == b


def to_number(text: str) -> int | float | None:
    """Parse text as an int or float. Returns None if it is not numeric."""
    text = text.strip()
    match = _NUMBER.fullmatch(text)
    if match is None:
        return None
    return float(text) if match.group(1) else int(text)
