"""Compact output formatters for MCP tool responses."""

from collections.abc import Sequence

from item_search.core.registry import SearchPredicate, is_tag_only, predicate_tags
from item_search.models.catalog import CatalogItem
from item_search.providers.catalog import SLOT_LABELS


def format_item_header(item: CatalogItem, quality_labels: Sequence[str]) -> str:
    """Format: [19019] Thunderfury, Blessed Blade of the Windseeker (Legendary)."""
    header = f"[{item.id}] {item.name}"
    if item.quality is not None and item.quality < len(quality_labels):
        header = f"{header} ({quality_labels[item.quality]})"
    return header


def format_item_meta(item: CatalogItem) -> str:
    """Format: Weapon | Sword | One-Hand | ilvl 80."""
    slot = SLOT_LABELS.get(item.equip_slot, item.equip_slot) if item.equip_slot else None
    parts = [p for p in (item.type, item.sub_type, slot) if p]
    if item.level is not None:
        parts.append(f"ilvl {item.level}")
    return " | ".join(parts)


def format_item_compact(item: CatalogItem, quality_labels: Sequence[str]) -> str:
    """Header + meta line."""
    lines = [format_item_header(item, quality_labels)]
    meta = format_item_meta(item)
    if meta:
        lines.append(f"  {meta}")
    return "\n".join(lines)


def format_predicate(predicate: SearchPredicate) -> str:
    """Format: name: n:, name: (also untagged)."""
    tags = ", ".join(f"{t}:" for t in predicate_tags(predicate))
    if is_tag_only(predicate):
        usage = "tag only"
    elif tags:
        usage = "also untagged"
    else:
        usage = "untagged only"
    return f"{predicate.id}: {tags} ({usage})" if tags else f"{predicate.id} ({usage})"


def format_result_list(
    formatted_entries: list[str],
    header: str | None = None,
    note: str | None = None,
) -> str:
    """Count + note + entries joined by newlines."""
    if not formatted_entries:
        return "No results found."

    lines: list[str] = []
    if header:
        lines.append(header)
    lines.append(f"{len(formatted_entries)} result(s)")
    if note:
        lines.append(f"Note: {note}")
    lines.append("")
    lines.append("\n".join(formatted_entries))
    return "\n".join(lines)
