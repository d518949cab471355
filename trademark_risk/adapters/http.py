"""
HTTP Adapter

Implements PageFetcher port using httpx.
"""
from typing import Optional

import httpx

from ..core.ports import FetchError, PageFetcher

DEFAULT_USER_AGENT = "Mozilla/5.0 (Python trademark search tool)"


class HttpxPageFetcher(PageFetcher):
    """Single-shot GET with a fixed User-Agent; no retries"""

    def __init__(self, user_agent: str = DEFAULT_USER_AGENT, client: Optional[httpx.Client] = None):
        self.user_agent = user_agent
        # httpx default timeouts bound every request
        self.client = client or httpx.Client(follow_redirects=True)

    def fetch(self, url: str) -> str:
        """GET url and return the body text"""
        try:
            response = self.client.get(url, headers={"User-Agent": self.user_agent})
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(url, reason=str(e) or type(e).__name__) from e

        if not response.is_success:
            raise FetchError(url, status_code=response.status_code)
        return response.text

    def close(self) -> None:
        self.client.close()
