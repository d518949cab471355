"""
MCP Tool Definitions

Single source of truth for tool schemas and descriptions.
Used by both stdio and HTTP/SSE servers.
"""

# Tool schemas for MCP
TOOL_SCHEMAS = {
    "search_trademarks": {
        "name": "search_trademarks",
        "description": """Check proposed product names against registered trademarks. Returns a traffic-light score per name.

Green = no live filings. Yellow = live filings outside classes 009/028/041. Red = live filing in 009, 028 or 041.

search_trademarks("Golden Emperor, Urban Jungle") → {"Golden Emperor": {score: "Red", details: [...]}, ...}
""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "names": {
                    "type": "string",
                    "description": "One or more names separated by commas or new lines"
                }
            },
            "required": ["names"]
        }
    },
    "list_cached": {
        "name": "list_cached",
        "description": """List names whose filing details are cached on disk, with record counts and disk usage.""",
        "inputSchema": {
            "type": "object",
            "properties": {}
        }
    },
}
