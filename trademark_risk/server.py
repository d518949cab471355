"""
trademark-risk MCP Server

MCP delivery layer - wraps the handlers as FastMCP tools.
Separation of concerns: this file only handles MCP protocol.
"""
import argparse
import logging
import os
from pathlib import Path
from typing import Optional

from mcp.server.fastmcp import FastMCP

from . import config
from .adapters.mcp import MCPHandlers
from .container import Container

# Suppress per-request INFO logs
logging.getLogger("httpx").setLevel(logging.WARNING)

# Default cache directory (can be overridden via env var or CLI arg)
CACHE_DIR: Path = config.get_cache_dir()

# Get port from env or default
HTTP_PORT = int(os.getenv("TRADEMARK_MCP_HTTP_PORT", "6661"))
HTTP_HOST = os.getenv("TRADEMARK_MCP_HTTP_HOST", "0.0.0.0")

# Initialize MCP server with HTTP config
mcp = FastMCP("trademark-risk", host=HTTP_HOST, port=HTTP_PORT)

_handlers: Optional[MCPHandlers] = None


def get_handlers() -> MCPHandlers:
    """Handlers bound to a container for the current CACHE_DIR (created on first use)"""
    global _handlers
    if _handlers is None:
        _handlers = MCPHandlers(Container.from_env(cache_dir=CACHE_DIR))
    return _handlers


@mcp.tool()
async def search_trademarks(names: str) -> dict:
    """
    Check proposed product names against registered trademarks.

    Each name is searched on the public register; every filing found is
    parsed (or reused from the on-disk cache) and the name gets a score:

        Green  - no live filings
        Yellow - live filings, none in classes 009, 028 or 041
        Red    - at least one live filing in class 009, 028 or 041

    Args:
        names: One or more names separated by commas or new lines

    Returns:
        Dictionary with per-name score, explanation and filing details

    Example:
        search_trademarks("Golden Emperor, Urban Jungle")
        → {results: {"Golden Emperor": {score: "Red", ...}, "Urban Jungle": {score: "Green", ...}}}
    """
    return await get_handlers().search_trademarks(names)


@mcp.tool()
async def list_cached() -> dict:
    """
    List names whose filing details are cached on disk.

    Returns:
        Cached names with record counts, file paths and disk usage
    """
    return await get_handlers().list_cached()


def main():
    """Main entry point for the MCP server."""
    global CACHE_DIR, _handlers

    parser = argparse.ArgumentParser(
        description="trademark-risk: traffic-light trademark checks over MCP."
    )
    parser.add_argument(
        "--transport",
        default="stdio",
        choices=["stdio", "streamable-http"],
        help="Transport method (default: stdio)"
    )
    parser.add_argument(
        "--cache-dir",
        default=None,
        help=f"Cache directory for filing details (default: {CACHE_DIR}, or set CACHE_DIR env var)"
    )
    args = parser.parse_args()

    # Override cache dir if specified
    if args.cache_dir:
        CACHE_DIR = Path(args.cache_dir)
        _handlers = None

    # Run the server
    if args.transport == "streamable-http":
        print(f"Starting trademark-risk MCP on http://{HTTP_HOST}:{HTTP_PORT}")
        print(f"Cache directory: {CACHE_DIR}")
        mcp.run(transport="streamable-http")
    else:
        mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
