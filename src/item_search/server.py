"""FastMCP server with lifespan management and tool registration."""

import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastmcp import FastMCP

from item_search.config import get_catalog_path, get_log_level, get_max_results, get_set_backend
from item_search.engine import ItemSearch
from item_search.models.catalog import Catalog
from item_search.providers.catalog import CatalogProvider, load_catalog
from item_search.providers.sets import select_set_provider
from item_search.tools.item_in_set import register_item_in_set
from item_search.tools.item_search import register_item_search


def build_engine(
    catalog: Catalog, set_backend: str | None = None
) -> tuple[CatalogProvider, ItemSearch]:
    """Wire a catalog into providers and a search engine.

    The catalog's own ``set_backend`` wins over the configured default.
    """
    provider = CatalogProvider(catalog)
    backend = catalog.set_backend or set_backend or get_set_backend()
    sets = select_set_provider(backend, catalog.sets)
    return provider, ItemSearch(provider, provider, sets)


@asynccontextmanager
async def lifespan(server: FastMCP) -> AsyncIterator[dict[str, Any]]:
    """Load the item catalog and build the search engine."""
    # Configure logging to stderr (stdout is MCP stdio transport)
    logging.basicConfig(
        level=getattr(logging, get_log_level()),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )
    logger = logging.getLogger(__name__)

    catalog_path = get_catalog_path()
    if catalog_path is None:
        logger.warning("ITEM_SEARCH_CATALOG_PATH not set, serving an empty catalog")
        catalog = Catalog()
    else:
        catalog = load_catalog(catalog_path)

    provider, engine = build_engine(catalog)
    logger.info(
        "Catalog ready: %d item(s), %d predicate(s)",
        len(provider.items),
        len(engine.list_predicates()),
    )

    yield {
        "catalog": provider,
        "engine": engine,
        "max_results": get_max_results(),
    }


_INSTRUCTIONS = """\
Searches an item catalog with a compact boolean query language.

QUERY SYNTAX:
- Terms: plain text matches item names, types, quality names, levels, set \
names and bind keywords (boe, bop, bou, boa, soulbound, quest).
- Tags target one attribute: n: name, t: type or slot, q: quality, \
l:/lvl:/ilvl: item level, tt: tooltip text, s: equipment set (s:* = any set).
- Comparisons for quality and level: q>=rare, lvl<100, ilvl:80, q!=poor.
- Combine with '&' (and), '|' (or), and prefix '!' (not). '&' binds tighter \
than '|': 'sword & epic | shield' is '(sword and epic) or shield'.

TOOLS:
- item_search: list catalog items matching a query.
- item_in_set: check one item's equipment set membership.
- item_search_predicates: show available tags.
"""


def create_server() -> FastMCP:
    """Create and configure the MCP server with all tools."""
    mcp = FastMCP(
        "item-search",
        instructions=_INSTRUCTIONS,
        lifespan=lifespan,
    )

    register_item_search(mcp)
    register_item_in_set(mcp)

    return mcp
