"""item_search MCP tool: boolean query over the item catalog."""

import logging
from typing import Annotated

from fastmcp import FastMCP
from fastmcp.server.context import Context
from pydantic import Field

from item_search.engine import ItemSearch
from item_search.models.catalog import CatalogItem
from item_search.providers.catalog import CatalogProvider
from item_search.tools.formatters import format_item_compact, format_predicate, format_result_list

logger = logging.getLogger(__name__)


def search_items(
    engine: ItemSearch, provider: CatalogProvider, query: str, limit: int
) -> list[CatalogItem]:
    """Return up to ``limit`` catalog items matching ``query``, in catalog order."""
    results: list[CatalogItem] = []
    for item in provider.items:
        if engine.matches(item.ref, query):
            results.append(item)
            if len(results) >= limit:
                break
    return results


def format_search_results(
    results: list[CatalogItem], provider: CatalogProvider, note: str | None = None
) -> str:
    """Format matching items as compact entries."""
    labels = provider.quality_labels()
    entries = [format_item_compact(item, labels) for item in results]
    return format_result_list(entries, note=note)


def run_item_search(
    engine: ItemSearch, provider: CatalogProvider, query: str, limit: int
) -> str:
    """Search and format, noting when more than ``limit`` items matched."""
    results = search_items(engine, provider, query, limit + 1)
    logger.info("item_search %r -> %d result(s)", query, min(len(results), limit))

    note = None
    if len(results) > limit:
        results = results[:limit]
        note = f"Showing the first {limit} matches."
    return format_search_results(results, provider, note)


def format_predicate_list(engine: ItemSearch) -> str:
    """One line per registered predicate, in probing order."""
    lines = [format_predicate(p) for p in engine.list_predicates()]
    return "\n".join(lines)


def register_item_search(mcp: FastMCP) -> None:
    """Register the item_search and item_search_predicates tools with the MCP server."""

    @mcp.tool()
    async def item_search(
        query: Annotated[
            str,
            Field(
                description=(
                    "Search query, e.g. 'sword & q>=rare', 'lvl>=80 | s:tank', '!boe', "
                    "'tt:increases spell power'"
                )
            ),
        ],
        limit: Annotated[
            int, Field(description="Maximum results to return (1-200)", ge=1, le=200)
        ] = 20,
        ctx: Context | None = None,
    ) -> str:
        """Search the item catalog with a boolean item query.

        Terms are joined with '&' (and) and '|' (or); prefix a term with '!' to
        negate it. Use tags to target one attribute: n: name, t: type/slot,
        q: quality, l:/lvl: item level, tt: tooltip text, s: equipment set.
        Quality and level accept comparisons (q>=rare, lvl<100). Untagged terms
        match any attribute, including the bind keywords boe, bop, bou, boa,
        soulbound and quest.
        """
        if ctx is None:
            raise RuntimeError("Context not injected")
        lifespan = ctx.lifespan_context
        engine: ItemSearch = lifespan["engine"]
        provider: CatalogProvider = lifespan["catalog"]
        limit = min(limit, lifespan["max_results"])
        return run_item_search(engine, provider, query, limit)

    @mcp.tool()
    async def item_search_predicates(ctx: Context | None = None) -> str:
        """List the search predicates and the tags that reach them."""
        if ctx is None:
            raise RuntimeError("Context not injected")
        return format_predicate_list(ctx.lifespan_context["engine"])
