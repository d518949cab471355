"""
Shared fixtures: a scripted upstream site and page builders.
"""
import pytest

from trademark_risk.adapters import InMemoryNameCache
from trademark_risk.container import Container
from trademark_risk.core.ports import FetchError, PageFetcher

BASE_URL = "https://www.trademarkelite.com"
DETAIL_PATH = "/australia/trademark/trademark-detail"


def search_url(name_query: str) -> str:
    return f"{BASE_URL}/australia/trademark/trademark-search.aspx?sw={name_query}"


def detail_url(filing_id: int, slug: str) -> str:
    return f"{BASE_URL}{DETAIL_PATH}/{filing_id}/{slug}"


def search_page(*links: str) -> str:
    """Search-results markup linking to the given detail paths"""
    rows = "\n".join(f'<tr><td><a href="{link}">{link.rsplit("/", 1)[-1]}</a></td></tr>' for link in links)
    return f"<html><body><table class=\"results\">\n{rows}\n</table></body></html>"


def detail_page(
    word_mark: str = "GOLDEN EMPEROR",
    status: str = "LIVE",
    classes: tuple = ("028",),
    owner_html: str = "<div>Acme Pty Ltd</div><div>1 Main St, Sydney</div>",
    application_number: str = "1001",
) -> str:
    """Detail-page markup shaped like the upstream filing page"""
    class_items = "".join(f"<li>Class {c}: goods and services</li>" for c in classes)
    return f"""<html><body>
<table class="detail">
  <tr><th>Application Number</th><td>{application_number}</td></tr>
  <tr><th>Word Mark</th><td><b>{word_mark}</b></td></tr>
  <tr><th>Trademark Owner</th><td>{owner_html}</td></tr>
  <tr><th>Filing Date</th><td>01&nbsp;Jan   2020</td></tr>
</table>
<p>Current Status {status} - Registered/Protected</p>
<ul>{class_items}</ul>
</body></html>"""


class ScriptedFetcher(PageFetcher):
    """PageFetcher serving canned pages; unknown URLs answer 404"""

    def __init__(self, pages: dict):
        self.pages = pages
        self.calls: list[str] = []

    def fetch(self, url: str) -> str:
        self.calls.append(url)
        page = self.pages.get(url)
        if page is None:
            raise FetchError(url, status_code=404)
        if isinstance(page, Exception):
            raise page
        return page


@pytest.fixture
def store():
    return InMemoryNameCache()


@pytest.fixture
def golden_emperor_site():
    """Two filings for "Golden Emperor": a live class 028 mark and a dead one"""
    link_a = f"{DETAIL_PATH}/1001/golden-emperor"
    link_b = f"{DETAIL_PATH}/1002/golden-emperor-tea"
    return {
        search_url("Golden%20Emperor"): search_page(link_a, link_b, link_a),
        detail_url(1001, "golden-emperor"): detail_page(status="LIVE", classes=("028",)),
        detail_url(1002, "golden-emperor-tea"): detail_page(
            word_mark="GOLDEN EMPEROR TEA",
            status="DEAD",
            classes=("030",),
            owner_html="Tea Co -&gt; 2 High St, Perth",
            application_number="1002",
        ),
        search_url("Urban%20Jungle"): search_page(),
    }


@pytest.fixture
def fetcher(golden_emperor_site):
    return ScriptedFetcher(golden_emperor_site)


@pytest.fixture
def container(fetcher, store, tmp_path):
    return Container(cache_dir=tmp_path, fetcher=fetcher, cache=store, max_workers=1)
