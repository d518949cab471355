"""
Dependency Injection Container

Wires together the hexagonal architecture by creating and injecting dependencies.
"""
from pathlib import Path
from typing import Optional

from . import config
from .adapters import FilesystemNameCache, HttpxPageFetcher
from .adapters.http import DEFAULT_USER_AGENT
from .core import (
    BatchSearchService,
    ListCachedService,
    NameCacheStore,
    PageFetcher,
    SearchNameService
)
from .core.parsing import DEFAULT_JURISDICTION
from .core.services import DEFAULT_BASE_URL, DEFAULT_WORKERS


class Container:
    """Dependency injection container for the application"""

    def __init__(
        self,
        cache_dir: str | Path,
        user_agent: str = DEFAULT_USER_AGENT,
        base_url: str = DEFAULT_BASE_URL,
        jurisdiction: str = DEFAULT_JURISDICTION,
        max_workers: int = DEFAULT_WORKERS,
        fetcher: Optional[PageFetcher] = None,
        cache: Optional[NameCacheStore] = None
    ):
        # Adapters (infrastructure)
        self.cache = cache or FilesystemNameCache(cache_dir)
        self.fetcher = fetcher or HttpxPageFetcher(user_agent)

        # Services (use cases)
        self.search_name = SearchNameService(
            fetcher=self.fetcher,
            store=self.cache,
            base_url=base_url,
            jurisdiction=jurisdiction,
            max_workers=max_workers
        )

        self.search_batch = BatchSearchService(
            search_service=self.search_name
        )

        self.list_cached = ListCachedService(
            store=self.cache
        )

    @classmethod
    def from_env(cls, cache_dir: Optional[str | Path] = None, max_workers: Optional[int] = None) -> "Container":
        """Build a container from environment configuration, with optional overrides"""
        return cls(
            cache_dir=cache_dir or config.get_cache_dir(),
            user_agent=config.get_user_agent(),
            base_url=config.get_base_url(),
            jurisdiction=config.get_jurisdiction(),
            max_workers=max_workers if max_workers is not None else config.get_detail_workers()
        )
