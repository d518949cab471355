"""
In-Memory Cache Adapter

Implements NameCacheStore port with a dict of JSON blobs. Records go
through the same JSON shape as the filesystem store, so a reload behaves
like a restart.
"""
import json

from ..core.domain import CachedName, DetailRecord
from ..core.ports import NameCacheStore


class InMemoryNameCache(NameCacheStore):
    """Process-local cache, mainly for tests and throwaway runs"""

    def __init__(self):
        self.blobs: dict[str, str] = {}

    def load(self, name: str) -> dict[str, DetailRecord]:
        blob = self.blobs.get(name)
        if blob is None:
            return {}
        entries = json.loads(blob)["detailCache"]
        return {url: DetailRecord.from_dict(value) for url, value in entries.items()}

    def save(self, name: str, records: dict[str, DetailRecord]) -> None:
        self.blobs[name] = json.dumps({
            "name": name,
            "detailCache": {url: record.to_dict() for url, record in records.items()},
        })

    def list_all(self) -> list[CachedName]:
        names = []
        for name, blob in sorted(self.blobs.items(), key=lambda x: x[0].lower()):
            names.append(CachedName(
                name=name,
                record_count=len(json.loads(blob)["detailCache"]),
                size_bytes=len(blob.encode("utf-8"))
            ))
        return names

    def get_disk_usage(self) -> int:
        return sum(len(blob.encode("utf-8")) for blob in self.blobs.values())
