"""
Application Services - Use cases that orchestrate domain logic

These are the entry points to the core. They coordinate between
domain models and ports, but contain no infrastructure concerns.
"""
import logging
import re
import threading
import weakref
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from typing import Iterable
from urllib.parse import quote, urljoin

from .domain import CachedName, DetailRecord, SearchResult
from .parsing import DEFAULT_JURISDICTION, extract_detail_links, parse_detail
from .ports import FetchError, NameCacheStore, PageFetcher
from .scoring import classify

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.trademarkelite.com"
DEFAULT_WORKERS = 4

# Characters a browser's encodeURIComponent leaves alone
_URI_COMPONENT_SAFE = "-_.!~*'()"

_NAME_SPLIT_RE = re.compile(r"[\n,]+")


def split_names(raw: str) -> list[str]:
    """Split a comma/newline separated list of names, dropping blanks"""
    return [n.strip() for n in _NAME_SPLIT_RE.split(raw) if n.strip()]


class SearchNameService:
    """Use case: score one name against the upstream trademark register"""

    def __init__(
        self,
        fetcher: PageFetcher,
        store: NameCacheStore,
        base_url: str = DEFAULT_BASE_URL,
        jurisdiction: str = DEFAULT_JURISDICTION,
        max_workers: int = DEFAULT_WORKERS
    ):
        self.fetcher = fetcher
        self.store = store
        self.base_url = base_url.rstrip("/")
        self.jurisdiction = jurisdiction
        self.max_workers = max_workers
        # Entries vanish once no call holds the lock
        self._locks: weakref.WeakValueDictionary[str, threading.Lock] = weakref.WeakValueDictionary()
        self._locks_guard = threading.Lock()

    def search_url(self, name: str) -> str:
        query = quote(name, safe=_URI_COMPONENT_SAFE)
        return f"{self.base_url}/{self.jurisdiction}/trademark/trademark-search.aspx?sw={query}"

    def detail_url(self, path: str) -> str:
        return urljoin(self.base_url + "/", path)

    def execute(self, name: str) -> SearchResult:
        """
        Search, resolve every discovered filing, and score the name.

        The search page is always fetched fresh. Detail pages come from the
        name's cache when seen before; new ones are fetched, parsed and
        added to the cache. Failed detail fetches are reported in the
        result but never cached, so they are retried on the next call.
        """
        try:
            search_html = self.fetcher.fetch(self.search_url(name))
        except FetchError as e:
            logger.warning(f"Search page failed for {name!r}: {e}")
            return SearchResult(name=name, error=str(e))

        links = extract_detail_links(search_html, self.jurisdiction)
        urls = list(dict.fromkeys(self.detail_url(link) for link in links))

        # Load-modify-save is atomic per name within this process
        with self._lock_for(name):
            cached = self.store.load(name)
            missing = [url for url in urls if url not in cached]
            fetched = self._fetch_details(missing)

            details: list[DetailRecord] = []
            for url in urls:
                if url in cached:
                    record = cached[url]
                    if not record.detail_url:
                        record = replace(record, detail_url=url)
                        cached[url] = record
                else:
                    record = fetched[url]
                    if record.error is None:
                        cached[url] = record
                details.append(record)

            self.store.save(name, cached)

        score, explanation = classify(details)
        logger.info(
            f"{name!r}: {len(urls)} filings ({len(urls) - len(missing)} cached, "
            f"{len(missing)} fetched) -> {score}"
        )
        return SearchResult(name=name, score=score, explanation=explanation, details=details)

    def _lock_for(self, name: str) -> threading.Lock:
        with self._locks_guard:
            return self._locks.setdefault(name, threading.Lock())

    def _fetch_details(self, urls: list[str]) -> dict[str, DetailRecord]:
        """Fetch and parse detail pages, concurrently when more than one worker is allowed"""
        if self.max_workers <= 1 or len(urls) <= 1:
            return {url: self._fetch_detail(url) for url in urls}

        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(urls))) as executor:
            return dict(zip(urls, executor.map(self._fetch_detail, urls)))

    def _fetch_detail(self, url: str) -> DetailRecord:
        try:
            html = self.fetcher.fetch(url)
        except FetchError as e:
            logger.warning(f"Detail page failed: {e}")
            return DetailRecord(detail_url=url, error=f"Error processing detail page: {e}")
        except Exception as e:
            logger.exception(f"Detail page fetch raised: {url}")
            return DetailRecord(detail_url=url, error=f"Error processing detail page: {e}")

        try:
            record = parse_detail(html)
        except Exception as e:
            logger.exception(f"Detail page could not be parsed: {url}")
            return DetailRecord(detail_url=url, error=f"Error processing detail page: {e}")
        return replace(record, detail_url=url)


class BatchSearchService:
    """Use case: score several names independently"""

    def __init__(self, search_service: SearchNameService):
        self.search_service = search_service

    def execute(self, names: Iterable[str]) -> dict[str, SearchResult]:
        """
        Process each name in turn.

        A failure for one name is recorded as that name's error and never
        stops the rest of the batch. Repeated names are processed once.
        """
        results: dict[str, SearchResult] = {}
        for name in names:
            if name in results:
                continue
            try:
                results[name] = self.search_service.execute(name)
            except Exception as e:
                logger.exception(f"Search failed for {name!r}")
                results[name] = SearchResult(name=name, error=str(e))
        return results


class ListCachedService:
    """Use case: List cached names"""

    def __init__(self, store: NameCacheStore):
        self.store = store

    def execute(self) -> tuple[list[CachedName], int]:
        """
        List cached names and disk usage.

        Returns:
            (cached_names, disk_usage_bytes)
        """
        names = self.store.list_all()
        disk_usage = self.store.get_disk_usage()

        return names, disk_usage
