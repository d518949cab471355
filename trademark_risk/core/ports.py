"""
Ports - Interfaces for external dependencies

These define HOW the core interacts with the outside world,
but NOT the implementation details.
"""
from abc import ABC, abstractmethod
from typing import Optional

from .domain import CachedName, DetailRecord


class FetchError(Exception):
    """A page could not be retrieved (non-2xx status or transport failure)"""

    def __init__(self, url: str, status_code: Optional[int] = None, reason: Optional[str] = None):
        self.url = url
        self.status_code = status_code
        self.reason = reason
        detail = status_code if status_code is not None else reason
        super().__init__(f"Failed to fetch {url}: {detail}")


class PageFetcher(ABC):
    """Port for retrieving upstream pages as text"""

    @abstractmethod
    def fetch(self, url: str) -> str:
        """GET the absolute URL and return the body, or raise FetchError"""
        pass


class NameCacheStore(ABC):
    """Port for the durable per-name detail cache"""

    @abstractmethod
    def load(self, name: str) -> dict[str, DetailRecord]:
        """Return the cached url -> record mapping for name (empty if absent or unreadable)"""
        pass

    @abstractmethod
    def save(self, name: str, records: dict[str, DetailRecord]) -> None:
        """Overwrite the cached mapping for name; failures are logged, never raised"""
        pass

    @abstractmethod
    def list_all(self) -> list[CachedName]:
        """List every name that has a cache blob"""
        pass

    @abstractmethod
    def get_disk_usage(self) -> int:
        """Get total storage used in bytes"""
        pass
