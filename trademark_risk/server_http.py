#!/usr/bin/env python3
"""
HTTP Server - JSON search API plus MCP over SSE

Run with: uvicorn trademark_risk.server_http:app --host 127.0.0.1 --port 3000
(or: trademark-risk-http)

Endpoints:
- POST /api/search  {"names": "Golden Emperor, Urban Jungle"} -> {name: result}
- GET  /ping        health check
- GET  /sse, POST /messages  MCP over SSE
- /                 static UI files when STATIC_DIR is set

Configuration: PORT, HOST, CACHE_DIR, USER_AGENT, TRADEMARK_BASE_URL,
TRADEMARK_JURISDICTION, DETAIL_WORKERS, STATIC_DIR
"""

import asyncio
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from mcp.server import Server
from mcp.server.sse import SseServerTransport
from mcp.types import TextContent, Tool
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Mount, Route
from starlette.staticfiles import StaticFiles

from . import config
from .container import Container
from .adapters.mcp import TOOL_SCHEMAS, MCPHandlers
from .core import split_names
from .formatters import format_list_cached, format_search_trademarks

# Configure logging with millisecond precision
logging.basicConfig(
    level=logging.INFO,
    format="[%(asctime)s] [%(levelname)s] %(message)s",
    datefmt="%Y/%m/%d %H:%M:%S"
)
logging.getLogger("httpx").setLevel(logging.WARNING)


class MillisecondFormatter(logging.Formatter):
    """Custom formatter with milliseconds as :XXXX format"""
    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        """Override formatTime to include milliseconds with : separator"""
        ct = datetime.fromtimestamp(record.created, tz=timezone.utc)
        if datefmt:
            s = ct.strftime("%Y/%m/%d %H:%M:%S")
            ms = int((record.created % 1) * 10000)
            return f"{s}:{ms:04d}"
        return super().formatTime(record, datefmt)


# Apply custom formatter to root logger
for handler in logging.root.handlers:
    handler.setFormatter(MillisecondFormatter(
        "[%(asctime)s] [%(levelname)s] %(message)s",
        datefmt="%Y/%m/%d %H:%M:%S"
    ))

logger = logging.getLogger(__name__)

INVALID_JSON = "Invalid JSON body."
INVALID_NAMES = 'Missing or invalid "names" field.'


def _parse_names(data: Any) -> Optional[list[str]]:
    """Names from a request body, or None when the body is malformed"""
    if not isinstance(data, dict):
        return None
    names = data.get("names")
    if isinstance(names, str) and names:
        return split_names(names)
    if isinstance(names, list) and names and all(isinstance(n, str) for n in names):
        return [n.strip() for n in names if n.strip()]
    return None


def create_app(container: Container, static_dir: Optional[Path] = None) -> Starlette:
    """Build the Starlette app around a container"""
    handlers = MCPHandlers(container)

    # MCP Server instance
    mcp_server = Server("trademark-risk")

    # SSE transport for multi-client support
    sse_transport = SseServerTransport("/messages/")

    @mcp_server.list_tools()  # type: ignore[misc,no-untyped-call]
    async def list_tools() -> list[Tool]:
        """List available MCP tools"""
        return [Tool(**schema) for schema in TOOL_SCHEMAS.values()]

    @mcp_server.call_tool()  # type: ignore[misc,no-untyped-call]
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
        """Handle tool calls"""
        logger.info(f"call_tool: {name} args={arguments}")

        if name == "search_trademarks":
            formatted_text = format_search_trademarks(
                await handlers.search_trademarks(arguments["names"])
            )
        elif name == "list_cached":
            formatted_text = format_list_cached(await handlers.list_cached())
        else:
            raise ValueError(f"Unknown tool: {name}")

        logger.info(f"call_tool: {name} returning {len(formatted_text)} chars")
        return [TextContent(type="text", text=formatted_text)]

    # HTTP routes
    async def handle_ping(request: Request) -> Response:
        """Health check endpoint"""
        return JSONResponse({"status": "ok"})

    async def handle_search(request: Request) -> Response:
        """Score a batch of names"""
        body = await request.body()
        try:
            data = json.loads(body or b"{}")
        except ValueError:
            return JSONResponse({"error": INVALID_JSON}, status_code=400)

        names = _parse_names(data)
        if names is None:
            return JSONResponse({"error": INVALID_NAMES}, status_code=400)

        logger.info(f"search: {len(names)} names")
        results = await asyncio.to_thread(container.search_batch.execute, names)
        return JSONResponse({name: result.to_dict() for name, result in results.items()})

    async def handle_sse(request: Request) -> Response:
        """SSE endpoint for MCP communication"""
        client_addr = request.client.host if request.client else "unknown"
        logger.info(f"SSE connect from {client_addr}")
        async with sse_transport.connect_sse(
            request.scope, request.receive, request._send
        ) as streams:
            await mcp_server.run(
                streams[0], streams[1], mcp_server.create_initialization_options()
            )
            logger.info(f"SSE disconnect from {client_addr}")
        return Response()

    routes = [
        Route("/ping", handle_ping),
        Route("/api/search", handle_search, methods=["POST"]),
        Route("/sse", handle_sse),
        Mount("/messages/", app=sse_transport.handle_post_message),
    ]
    if static_dir is not None and static_dir.is_dir():
        routes.append(Mount("/", app=StaticFiles(directory=static_dir, html=True)))

    return Starlette(routes=routes)


app = create_app(Container.from_env(), config.get_static_dir())


def main():
    """Run the HTTP server with uvicorn"""
    import uvicorn
    port = config.get_port()
    host = config.get_host()
    logger.info(f"Starting trademark search server on http://{host}:{port}")
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
