"""
MCP Tool Handlers

Shared handlers for MCP tools that use the hexagonal core.
"""
import asyncio
from typing import Any

from ...container import Container
from ...core import split_names


class MCPHandlers:
    """Handlers for MCP tools using dependency injection"""

    def __init__(self, container: Container):
        self.container = container

    async def search_trademarks(self, names: str | list[str]) -> dict[str, Any]:
        """Score every name and return per-name results"""
        try:
            name_list = split_names(names) if isinstance(names, str) else [n.strip() for n in names if n.strip()]
            if not name_list:
                return {
                    "success": False,
                    "error": "No names given."
                }

            results = await asyncio.to_thread(
                self.container.search_batch.execute,
                name_list
            )

            return {
                "success": True,
                "results": {name: result.to_dict() for name, result in results.items()},
                "count": len(results)
            }

        except Exception as e:
            return {
                "success": False,
                "error": f"Failed to search trademarks: {str(e)}"
            }

    async def list_cached(self) -> dict[str, Any]:
        """List cached names"""
        try:
            cached, disk_usage = await asyncio.to_thread(
                self.container.list_cached.execute
            )

            formatted_names = []
            for c in cached:
                formatted_names.append({
                    "name": c.name,
                    "record_count": c.record_count,
                    "size_bytes": c.size_bytes,
                    "path": str(c.path) if c.path else None
                })

            return {
                "success": True,
                "names": formatted_names,
                "count": len(formatted_names),
                "disk_usage_kb": round(disk_usage / 1024, 2),
                "cache_dir": str(getattr(self.container.cache, "cache_dir", ""))
            }

        except Exception as e:
            return {
                "success": False,
                "error": f"Failed to list cached names: {str(e)}"
            }
