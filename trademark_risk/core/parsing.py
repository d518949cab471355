"""
Markup Parsing - Search-results link discovery and detail-page extraction

Pure functions over raw HTML strings. Every extractor is best-effort:
a field that cannot be found comes back empty, it never raises.
Upstream markup is not under our control, so matching is regex-based
and tolerant of attribute and whitespace changes.
"""
import re
from typing import Optional

from .domain import STATUS_DEAD, STATUS_LIVE, DetailRecord

DEFAULT_JURISDICTION = "australia"

_TAG_RE = re.compile(r"<[^>]*>")
_NBSP_RE = re.compile(r"&nbsp;|\xa0", re.IGNORECASE)
_WS_RE = re.compile(r"\s+")

# "->", "--->", "-&gt;", "&gt;", "→", "&rarr;"
_ARROW_RE = re.compile(r"\s*(?:-+>|-*&gt;|→|&rarr;)\s*", re.IGNORECASE)

# One owner sub-block per <div> or <p> inside the owner cell
_BLOCK_RE = re.compile(r"<(div|p)\b[^>]*>(.*?)</\1\s*>", re.IGNORECASE | re.DOTALL)

_LIVE_RE = re.compile(r"\bLIVE\b", re.IGNORECASE)
_DEAD_RE = re.compile(r"\bDEAD\b", re.IGNORECASE)
_STATUS_DESC_RE = re.compile(r"Current\s+Status\s*:?\s*([^<\n]+)", re.IGNORECASE)
_CLASS_RE = re.compile(r"\bClass\s*(\d{3})(?!\d)", re.IGNORECASE)


def clean_text(fragment: str) -> str:
    """Strip tags, turn non-breaking spaces into spaces and collapse whitespace"""
    text = _TAG_RE.sub(" ", fragment)
    text = _NBSP_RE.sub(" ", text)
    return _WS_RE.sub(" ", text).strip()


def extract_detail_links(html: str, jurisdiction: str = DEFAULT_JURISDICTION) -> list[str]:
    """
    Find detail-page paths in search-results markup.

    Matches /<jurisdiction>/trademark/trademark-detail/<id>/<slug>.
    Duplicates collapse onto their first occurrence, so the returned order
    is the order filings appear on the page. No matches is an empty list.
    """
    if not html:
        return []
    pattern = re.compile(
        rf"/{re.escape(jurisdiction)}/trademark/trademark-detail/\d+/[^\"'>\s]+",
        re.IGNORECASE,
    )
    return list(dict.fromkeys(pattern.findall(html)))


def _table_cell(html: str, label: str) -> Optional[str]:
    """Raw HTML of the value cell next to a label cell, or None"""
    label_pattern = r"\s+".join(re.escape(word) for word in label.split())
    pattern = re.compile(
        rf"<t[hd][^>]*>\s*{label_pattern}\s*:?\s*</t[hd]>\s*<td[^>]*>(.*?)</td>",
        re.IGNORECASE | re.DOTALL,
    )
    match = pattern.search(html)
    return match.group(1) if match else None


def extract_table_value(html: str, label: str) -> str:
    """Plain-text value of a label/value table row ("" when the label is absent)"""
    cell = _table_cell(html, label)
    return clean_text(cell) if cell is not None else ""


def _drop_arrows(text: str) -> str:
    return _WS_RE.sub(" ", _ARROW_RE.sub(" ", text)).strip()


def split_owner(cell_html: str) -> tuple[str, str]:
    """
    Split an owner cell into (name, address).

    Structured cells carry one block per line: the first block is the
    name and the rest form the address. Flat cells are split on an
    arrow separator instead ("Acme Pty Ltd -> 1 Main St").
    """
    blocks = [_drop_arrows(clean_text(m.group(2))) for m in _BLOCK_RE.finditer(cell_html)]
    blocks = [b for b in blocks if b]
    if blocks:
        return blocks[0], " ".join(blocks[1:])

    parts = [p.strip() for p in _ARROW_RE.split(clean_text(cell_html))]
    parts = [p for p in parts if p]
    if not parts:
        return "", ""
    return parts[0], " ".join(parts[1:])


def extract_owner(html: str) -> tuple[str, str]:
    cell = _table_cell(html, "Trademark Owner")
    if cell is None:
        return "", ""
    return split_owner(cell)


def detect_status(html: str) -> str:
    """
    LIVE or DEAD from a whole-word scan of the raw page.

    A page mentioning both resolves to LIVE so that risk is never
    understated.
    """
    if _LIVE_RE.search(html):
        return STATUS_LIVE
    if _DEAD_RE.search(html):
        return STATUS_DEAD
    return ""


def extract_status_description(html: str) -> str:
    match = _STATUS_DESC_RE.search(html)
    if match and match.group(1).strip():
        return clean_text(match.group(1))
    # Label and value in separate table cells
    return extract_table_value(html, "Current Status")


def extract_classes(html: str) -> list[str]:
    """All "Class NNN" codes on the page, de-duplicated in first-seen order"""
    return list(dict.fromkeys(_CLASS_RE.findall(html)))


def parse_detail(html: str) -> DetailRecord:
    """Build a DetailRecord from one detail page (detail_url is left to the caller)"""
    owner_name, owner_address = extract_owner(html)
    return DetailRecord(
        application_number=extract_table_value(html, "Application Number"),
        word_mark=extract_table_value(html, "Word Mark"),
        owner_name=owner_name,
        owner_address=owner_address,
        filing_date=extract_table_value(html, "Filing Date"),
        status=detect_status(html),
        status_description=extract_status_description(html),
        classes=tuple(extract_classes(html)),
    )
