"""item_in_set MCP tool: equipment set membership for one item."""

from typing import Annotated

from fastmcp import FastMCP
from fastmcp.server.context import Context
from pydantic import Field

from item_search.engine import ItemSearch
from item_search.providers.catalog import CatalogProvider


def check_item_in_set(
    engine: ItemSearch, provider: CatalogProvider, item: str, set_query: str
) -> str:
    """Resolve ``item`` in the catalog and report whether it is in a matching set."""
    entry = provider.find(item)
    if entry is None:
        return f"Item not found: {item}"
    if not provider.is_equippable(entry.ref):
        return f"[{entry.id}] {entry.name} is not equippable."
    if engine.in_set(entry.ref, set_query):
        return f"[{entry.id}] {entry.name} is in a set matching '{set_query}'."
    return f"[{entry.id}] {entry.name} is not in any set matching '{set_query}'."


def register_item_in_set(mcp: FastMCP) -> None:
    """Register the item_in_set tool with the MCP server."""

    @mcp.tool()
    async def item_in_set(
        item: Annotated[str, Field(description="Item link, item id, or exact item name")],
        set_query: Annotated[
            str, Field(description="Text contained in the set name, or '*' for any set")
        ] = "*",
        ctx: Context | None = None,
    ) -> str:
        """Check whether an item belongs to an equipment set."""
        if ctx is None:
            raise RuntimeError("Context not injected")
        lifespan = ctx.lifespan_context
        return check_item_in_set(lifespan["engine"], lifespan["catalog"], item, set_query)
