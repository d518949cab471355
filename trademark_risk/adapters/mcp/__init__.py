"""
MCP Adapter - Tool schemas and handlers shared by the MCP servers
"""
from .handlers import MCPHandlers
from .tool_definitions import TOOL_SCHEMAS

__all__ = ["MCPHandlers", "TOOL_SCHEMAS"]
