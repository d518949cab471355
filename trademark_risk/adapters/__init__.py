"""
Adapters - External implementations of ports

This package contains implementations of the core ports:
- filesystem.py: JSON-file-per-name detail cache
- memory.py: In-memory detail cache
- http.py: httpx page fetcher
"""
from .filesystem import FilesystemNameCache
from .http import HttpxPageFetcher
from .memory import InMemoryNameCache

__all__ = [
    "FilesystemNameCache",
    "HttpxPageFetcher",
    "InMemoryNameCache",
]
