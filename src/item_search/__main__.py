"""Entry point for the item-search MCP server."""

from item_search.server import create_server


def main() -> None:
    """Run the item-search MCP server."""
    server = create_server()
    server.run(transport="stdio")


if __name__ == "__main__":
    main()
