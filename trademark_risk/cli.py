#!/usr/bin/env python3
"""
CLI for trademark-risk - run searches without a server

Usage:
  trademark-risk list-tools                         # Show MCP tool definitions
  trademark-risk search "Golden Emperor"            # Score one name (uses env CACHE_DIR or ./cache)
  trademark-risk search "Golden Emperor, Dragon Train"  # Comma or newline separated batch
  trademark-risk search "Urban Jungle" --json       # Raw JSON, same shape as POST /api/search
  trademark-risk list-cached                        # Names with cached filing details

Fast iteration: Uses hexagonal core directly (no MCP layer)
"""

import argparse
import asyncio
import json
import logging
import sys

from . import config
from .container import Container
from .adapters.mcp import TOOL_SCHEMAS, MCPHandlers
from .formatters import format_list_cached, format_search_trademarks


async def list_tools_command() -> int:
    """Show MCP tool definitions"""
    print("=" * 80)
    print("MCP TOOL DEFINITIONS")
    print("=" * 80)
    print()

    for tool_schema in TOOL_SCHEMAS.values():
        print(f"Tool: {tool_schema['name']}")
        print()
        print("Description:")
        print(tool_schema['description'])
        print()
        print("Input Schema:")
        print(json.dumps(tool_schema['inputSchema'], indent=2))
        print()
        print("-" * 80)
        print()

    return 0


async def search_command(names: str, as_json: bool, cache_dir: str, workers: int | None) -> int:
    """Score names against the trademark register"""
    try:
        container = Container.from_env(cache_dir=cache_dir, max_workers=workers)
        handlers = MCPHandlers(container)

        result = await handlers.search_trademarks(names)

        if as_json and result["success"]:
            print(json.dumps(result["results"], indent=2))
        else:
            print(format_search_trademarks(result))

        if not result["success"]:
            return 1

        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


async def list_cached_command(cache_dir: str) -> int:
    """List cached names"""
    try:
        container = Container.from_env(cache_dir=cache_dir)
        handlers = MCPHandlers(container)

        result = await handlers.list_cached()
        print(format_list_cached(result))

        if not result["success"]:
            return 1

        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="trademark-risk CLI - traffic-light trademark checks for product names"
    )
    parser.add_argument(
        "--cache-dir",
        default=str(config.get_cache_dir()),
        help="Cache directory (default: $CACHE_DIR or ./cache)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log cache hits and fetches"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # list-tools command
    subparsers.add_parser("list-tools", help="Show MCP tool definitions")

    # search command
    search_parser = subparsers.add_parser("search", help="Score one or more names")
    search_parser.add_argument("names", help="Names separated by commas or new lines")
    search_parser.add_argument("--json", action="store_true", help="Print raw JSON results")
    search_parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Concurrent detail fetches per name (default: $DETAIL_WORKERS or 4)"
    )

    # list-cached command
    subparsers.add_parser("list-cached", help="List cached names")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(message)s"
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    if not args.command:
        parser.print_help()
        return 1

    # Run command
    if args.command == "list-tools":
        return asyncio.run(list_tools_command())
    elif args.command == "search":
        return asyncio.run(search_command(
            names=args.names,
            as_json=args.json,
            cache_dir=args.cache_dir,
            workers=args.workers
        ))
    elif args.command == "list-cached":
        return asyncio.run(list_cached_command(cache_dir=args.cache_dir))
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
