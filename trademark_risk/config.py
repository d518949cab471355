"""
Configuration - Environment-driven settings with defaults

Shared by the CLI, the MCP server and the HTTP server.
"""
import os
from pathlib import Path
from typing import Optional

from .adapters.http import DEFAULT_USER_AGENT
from .core.parsing import DEFAULT_JURISDICTION
from .core.services import DEFAULT_BASE_URL, DEFAULT_WORKERS

DEFAULT_PORT = 3000
DEFAULT_HOST = "127.0.0.1"
DEFAULT_CACHE_DIR = "cache"


def _get_int(var: str, default: int) -> int:
    value = os.environ.get(var, str(default))
    try:
        return int(value)
    except ValueError:
        msg = f"Invalid {var} value: {value}"
        raise ValueError(msg) from None


def get_port() -> int:
    """Get server port from environment or use default"""
    return _get_int("PORT", DEFAULT_PORT)


def get_host() -> str:
    """Get server bind address from environment or use default"""
    return os.environ.get("HOST", DEFAULT_HOST)


def get_cache_dir() -> Path:
    """Get cache directory from environment or use default"""
    return Path(os.environ.get("CACHE_DIR", DEFAULT_CACHE_DIR))


def get_user_agent() -> str:
    """Get user agent from environment or use default"""
    return os.environ.get("USER_AGENT", DEFAULT_USER_AGENT)


def get_base_url() -> str:
    return os.environ.get("TRADEMARK_BASE_URL", DEFAULT_BASE_URL)


def get_jurisdiction() -> str:
    return os.environ.get("TRADEMARK_JURISDICTION", DEFAULT_JURISDICTION)


def get_detail_workers() -> int:
    """Max concurrent detail fetches per name (1 = sequential)"""
    return _get_int("DETAIL_WORKERS", DEFAULT_WORKERS)


def get_static_dir() -> Optional[Path]:
    """Optional directory of UI files served by the HTTP server"""
    value = os.environ.get("STATIC_DIR")
    return Path(value) if value else None
