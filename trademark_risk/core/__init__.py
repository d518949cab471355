"""
Core - Domain logic and ports

This package contains:
- domain.py: Pure domain models
- ports.py: Port interfaces (abstractions for external dependencies)
- parsing.py: Search-results and detail-page extraction
- scoring.py: Traffic-light risk classification
- services.py: Application services (use cases)
"""
from .domain import CachedName, DetailRecord, SearchResult
from .ports import FetchError, NameCacheStore, PageFetcher
from .scoring import classify
from .services import (
    BatchSearchService,
    ListCachedService,
    SearchNameService,
    split_names
)

__all__ = [
    # Domain models
    "CachedName",
    "DetailRecord",
    "SearchResult",
    # Ports
    "FetchError",
    "NameCacheStore",
    "PageFetcher",
    # Services
    "BatchSearchService",
    "ListCachedService",
    "SearchNameService",
    "classify",
    "split_names",
]
