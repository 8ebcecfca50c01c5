"""Helpers for the few parts of an item link the engine needs."""

import re

_ITEM_ID_RE = re.compile(r"item:(-?\d+)")


def item_id(link: str) -> int | None:
    """Extract the numeric item id from an item link.

    Accepts full chat links (``|Hitem:1234:...|h[Name]|h|r``) and bare item
    strings (``item:1234``). Returns None when no id is present.
    """
    match = _ITEM_ID_RE.search(link)
    if match is None:
        return None
    return int(match.group(1))


def build_link(item_id: int, name: str, color: str = "ffffffff") -> str:
    """Build a chat link for an item id and display name."""
    return f"|c{color}|Hitem:{item_id}:0:0:0:0:0:0:0|h[{name}]|h|r"
