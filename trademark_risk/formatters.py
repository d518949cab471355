"""
BBG Lite formatters for tool results

Format handler results as Bloomberg Terminal-inspired text output.
Used by both CLI and MCP adapters for consistent presentation.
"""

from typing import Any

SCORE_MARKERS = {"Green": "[G]", "Yellow": "[Y]", "Red": "[R]"}


def _truncate(text: str, width: int) -> str:
    return text if len(text) <= width else text[:width - 1] + "…"


def format_name_result(name: str, info: dict[str, Any]) -> str:
    """Format one name's SearchResult dict.

    Example output:
        GOLDEN EMPEROR | [R] RED | 2 filings
        At least one live filing lists classes 009, 028 or 041.
        ──────────────────────────────────────────────────────────────────────
        LIVE   GOLDEN EMPEROR                 028, 041    Acme Pty Ltd, 1 Main St
               https://www.trademarkelite.com/australia/trademark/trademark-detail/123/golden-emperor
        DEAD   GOLDEN EMPRESS                 016         Other Co
               https://www.trademarkelite.com/australia/trademark/trademark-detail/456/golden-empress
    """
    if "error" in info:
        return f"{name.upper()} | ERROR\n{info['error']}"

    score = info["score"]
    details = info.get("details", [])
    lines = []

    plural = "filing" if len(details) == 1 else "filings"
    lines.append(f"{name.upper()} | {SCORE_MARKERS.get(score, '')} {score.upper()} | {len(details)} {plural}")
    lines.append(info["explanation"])

    if not details:
        return "\n".join(lines)

    lines.append("─" * 70)
    for det in details:
        if "error" in det:
            lines.append(f"{'ERROR':<6} {det['error']}")
        else:
            status = det.get("status") or "?"
            mark = _truncate(det.get("wordMark") or "(no word mark)", 30)
            classes = ", ".join(det.get("classes", [])) or "-"
            lines.append(f"{status:<6} {mark:<30} {_truncate(classes, 11):<11} {det.get('owner', '')}")
        if det.get("detailUrl"):
            lines.append(f"{'':<6} {det['detailUrl']}")

    return "\n".join(lines)


def format_search_trademarks(result: dict[str, Any]) -> str:
    """Format search_trademarks result as BBG Lite text, one block per name."""
    if not result.get("success"):
        return f"ERROR: {result.get('error', 'Unknown error')}"

    blocks = [format_name_result(name, info) for name, info in result["results"].items()]
    return "\n\n".join(blocks)


def format_list_cached(result: dict[str, Any]) -> str:
    """Format list_cached result as BBG Lite text.

    Example output:
        CACHED NAMES (2 | 14.2 KB)
        ──────────────────────────────────────────────────────────────────────
        NAME                            FILINGS  PATH
        Golden Emperor                        2  cache/Golden%20Emperor.json
        Urban Jungle                         11  cache/Urban%20Jungle.json
    """
    if not result.get("success"):
        return f"ERROR: {result.get('error', 'Unknown error')}"

    if result["count"] == 0:
        return f"NO CACHED NAMES\n\nCACHE: {result.get('cache_dir') or '(memory)'}"

    lines = []
    lines.append(f"CACHED NAMES ({result['count']} | {result['disk_usage_kb']} KB)")
    lines.append("─" * 70)
    lines.append(f"{'NAME':<30}  {'FILINGS':>7}  PATH")
    for entry in result["names"]:
        lines.append(f"{_truncate(entry['name'], 30):<30}  {entry['record_count']:>7}  {entry['path'] or '-'}")

    return "\n".join(lines)
