"""
Filesystem Cache Adapter

Implements NameCacheStore port using one JSON file per searched name.

File layout: {cache_dir}/{key}.json containing
    {"name": <searched name>, "detailCache": {<detail url>: <record>, ...}}
"""
import hashlib
import json
import logging
import os
import tempfile
from dataclasses import replace
from pathlib import Path
from typing import Any
from urllib.parse import quote, unquote

from ..core.domain import CachedName, DetailRecord
from ..core.ports import NameCacheStore

logger = logging.getLogger(__name__)

# Longer keys are truncated and suffixed with a digest (filename limits)
MAX_KEY_LENGTH = 150


def cache_key(name: str) -> str:
    """Filesystem-safe key for a name; distinct names give distinct keys"""
    key = quote(name, safe="")
    if len(key) > MAX_KEY_LENGTH:
        digest = hashlib.sha256(name.encode("utf-8")).hexdigest()
        key = f"{key[:MAX_KEY_LENGTH]}-{digest}"
    return key


class FilesystemNameCache(NameCacheStore):
    """Filesystem-based per-name detail cache"""

    def __init__(self, cache_dir: str | Path):
        self.cache_dir = Path(cache_dir)

    def _get_path(self, name: str) -> Path:
        """Get path for a name's cache file"""
        return self.cache_dir / f"{cache_key(name)}.json"

    def _read(self, path: Path) -> dict[str, Any]:
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("cache blob is not a JSON object")
        entries = data.get("detailCache", {})
        if not isinstance(entries, dict):
            raise ValueError("detailCache is not a JSON object")
        return data

    def load(self, name: str) -> dict[str, DetailRecord]:
        """Load the url -> record mapping for name; unreadable files count as empty"""
        path = self._get_path(name)
        if not path.exists():
            return {}

        try:
            data = self._read(path)
        except (OSError, ValueError) as e:
            logger.warning(f"Error reading cache file {path}: {e}")
            return {}

        # Case-insensitive filesystems map "Acme" and "ACME" to one file
        stored_name = data.get("name")
        if isinstance(stored_name, str) and stored_name != name:
            logger.warning(f"Cache file {path} belongs to {stored_name!r}, not {name!r}")
            return {}

        records = {}
        for url, value in data.get("detailCache", {}).items():
            if not isinstance(value, dict):
                continue
            record = DetailRecord.from_dict(value)
            if record.error is not None:
                continue
            if not record.detail_url:
                record = replace(record, detail_url=url)
            records[url] = record
        return records

    def save(self, name: str, records: dict[str, DetailRecord]) -> None:
        """Overwrite the cache file for name (atomic rename of a temp file)"""
        path = self._get_path(name)
        payload = {
            "name": name,
            "detailCache": {url: record.to_dict() for url, record in records.items()},
        }
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=path.stem, suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(payload, f)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.error(f"Error writing cache file {path}: {e}")

    def list_all(self) -> list[CachedName]:
        """List all cached names"""
        if not self.cache_dir.exists():
            return []

        names = []
        for file_path in self.cache_dir.glob("*.json"):
            if not file_path.is_file():
                continue
            try:
                data = self._read(file_path)
            except (OSError, ValueError) as e:
                logger.warning(f"Skipping unreadable cache file {file_path}: {e}")
                continue

            name = data.get("name")
            if not isinstance(name, str):
                name = unquote(file_path.stem)
            names.append(CachedName(
                name=name,
                record_count=len(data.get("detailCache", {})),
                size_bytes=file_path.stat().st_size,
                path=file_path
            ))

        names.sort(key=lambda x: x.name.lower())
        return names

    def get_disk_usage(self) -> int:
        """Get total disk usage in bytes"""
        if not self.cache_dir.exists():
            return 0

        total = 0
        for file_path in self.cache_dir.glob("*.json"):
            if file_path.is_file():
                total += file_path.stat().st_size
        return total
