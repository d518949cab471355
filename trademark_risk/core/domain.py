"""
Domain Models - Pure business entities

No external dependencies. These represent the core business concepts.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional

Score = Literal["Green", "Yellow", "Red"]

STATUS_LIVE = "LIVE"
STATUS_DEAD = "DEAD"


def _text(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    return value if isinstance(value, str) else ""


@dataclass(frozen=True)
class DetailRecord:
    """One trademark filing, as parsed from its detail page"""
    application_number: str = ""
    word_mark: str = ""
    owner_name: str = ""
    owner_address: str = ""
    filing_date: str = ""
    status: str = ""  # "LIVE", "DEAD", or "" when unknown
    status_description: str = ""
    classes: tuple[str, ...] = ()  # 3-digit codes, first-occurrence order
    detail_url: str = ""
    error: Optional[str] = None

    @property
    def owner(self) -> str:
        """Owner name, followed by the address when there is one"""
        if self.owner_address:
            return f"{self.owner_name}, {self.owner_address}"
        return self.owner_name

    @property
    def is_live(self) -> bool:
        return self.error is None and self.status == STATUS_LIVE

    def to_dict(self) -> dict[str, Any]:
        """JSON shape used both on the wire and in the cache blob"""
        if self.error is not None:
            return {"detailUrl": self.detail_url, "error": self.error}
        return {
            "applicationNumber": self.application_number,
            "wordMark": self.word_mark,
            "ownerName": self.owner_name,
            "ownerAddress": self.owner_address,
            "owner": self.owner,
            "filingDate": self.filing_date,
            "status": self.status,
            "statusDescription": self.status_description,
            "classes": list(self.classes),
            "detailUrl": self.detail_url,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DetailRecord":
        """
        Rebuild a record from its JSON shape.

        Unknown fields are ignored and missing fields default to empty, so
        blobs written by older or newer versions stay readable. The derived
        "owner" field is recomputed rather than trusted.
        """
        classes = data.get("classes")
        if not isinstance(classes, list):
            classes = []
        error = data.get("error")
        return cls(
            application_number=_text(data, "applicationNumber"),
            word_mark=_text(data, "wordMark"),
            owner_name=_text(data, "ownerName"),
            owner_address=_text(data, "ownerAddress"),
            filing_date=_text(data, "filingDate"),
            status=_text(data, "status"),
            status_description=_text(data, "statusDescription") or _text(data, "statusDesc"),
            classes=tuple(dict.fromkeys(str(c) for c in classes)),
            detail_url=_text(data, "detailUrl"),
            error=error if isinstance(error, str) else None,
        )


@dataclass
class SearchResult:
    """Risk verdict for one searched name"""
    name: str
    score: Optional[Score] = None
    explanation: str = ""
    details: list[DetailRecord] = field(default_factory=list)
    error: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        if self.error is not None:
            return {"error": self.error}
        return {
            "score": self.score,
            "explanation": self.explanation,
            "details": [d.to_dict() for d in self.details],
        }


@dataclass
class CachedName:
    """A searched name that has a cache blob"""
    name: str
    record_count: int
    size_bytes: int
    path: Optional[Path] = None  # None for stores without files
