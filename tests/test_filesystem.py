"""
Unit tests for trademark_risk.adapters.filesystem

Tests the per-name JSON cache without the search pipeline.
"""
import json
import logging

from trademark_risk.adapters.filesystem import MAX_KEY_LENGTH, FilesystemNameCache, cache_key
from trademark_risk.core.domain import DetailRecord

URL_A = "https://www.trademarkelite.com/australia/trademark/trademark-detail/1001/golden-emperor"
URL_B = "https://www.trademarkelite.com/australia/trademark/trademark-detail/1002/golden-emperor-tea"


def record(url=URL_A, **kwargs):
    fields = dict(word_mark="GOLDEN EMPEROR", status="LIVE", classes=("028", "041"), detail_url=url)
    fields.update(kwargs)
    return DetailRecord(**fields)


class TestCacheKey:
    """Test name -> file key encoding."""

    def test_path_unsafe_characters_are_encoded(self):
        key = cache_key("../etc/passwd")
        assert "/" not in key
        assert key == "..%2Fetc%2Fpasswd"

    def test_distinct_names_distinct_keys(self):
        """Names that look alike after naive escaping stay apart."""
        names = ["a/b", "a%2Fb", "a b", "a+b", "A b", "a_b"]
        assert len({cache_key(n) for n in names}) == len(names)

    def test_long_names_are_hashed(self):
        """Long keys are bounded and still distinct."""
        long_a = "x" * 300 + "a"
        long_b = "x" * 300 + "b"
        assert len(cache_key(long_a)) == MAX_KEY_LENGTH + 65
        assert cache_key(long_a) != cache_key(long_b)


class TestFilesystemNameCache:
    """Test FilesystemNameCache load/save."""

    def test_missing_file_is_empty(self, tmp_path):
        cache = FilesystemNameCache(tmp_path / "cache")
        assert cache.load("Golden Emperor") == {}

    def test_round_trip(self, tmp_path):
        """A reloaded record classifies the same as the original."""
        original = record()
        FilesystemNameCache(tmp_path).save("Golden Emperor", {URL_A: original})

        # Fresh instance simulates a restart
        reloaded = FilesystemNameCache(tmp_path).load("Golden Emperor")

        assert reloaded == {URL_A: original}
        assert reloaded[URL_A].status == "LIVE"
        assert set(reloaded[URL_A].classes) == {"028", "041"}

    def test_file_layout(self, tmp_path):
        """One JSON file per name, keyed by the encoded name."""
        cache = FilesystemNameCache(tmp_path)
        cache.save("Golden Emperor", {URL_A: record()})

        path = tmp_path / "Golden%20Emperor.json"
        data = json.loads(path.read_text())
        assert data["name"] == "Golden Emperor"
        assert data["detailCache"][URL_A]["wordMark"] == "GOLDEN EMPEROR"
        assert data["detailCache"][URL_A]["owner"] == ""
        assert list(tmp_path.iterdir()) == [path]

    def test_names_never_mix(self, tmp_path):
        cache = FilesystemNameCache(tmp_path)
        cache.save("Golden Emperor", {URL_A: record()})
        cache.save("Dragon Train", {URL_B: record(URL_B)})

        assert list(cache.load("Golden Emperor")) == [URL_A]
        assert list(cache.load("Dragon Train")) == [URL_B]

    def test_blob_for_another_name_is_empty(self, tmp_path, caplog):
        """A file written for "ACME" is not served to "Acme" on case-folding filesystems."""
        cache = FilesystemNameCache(tmp_path)
        cache.save("ACME", {URL_A: record()})
        (tmp_path / "ACME.json").rename(tmp_path / "Acme.json")

        with caplog.at_level(logging.WARNING):
            assert cache.load("Acme") == {}
        assert "belongs to 'ACME'" in caplog.text

    def test_save_overwrites(self, tmp_path):
        """Save replaces the whole mapping."""
        cache = FilesystemNameCache(tmp_path)
        cache.save("Golden Emperor", {URL_A: record()})
        cache.save("Golden Emperor", {URL_B: record(URL_B)})

        assert list(cache.load("Golden Emperor")) == [URL_B]

    def test_corrupt_file_is_empty(self, tmp_path, caplog):
        """Unreadable JSON is logged and treated as no cache."""
        (tmp_path / "Golden%20Emperor.json").write_text("{not json")
        cache = FilesystemNameCache(tmp_path)

        with caplog.at_level(logging.WARNING):
            assert cache.load("Golden Emperor") == {}
        assert "Error reading cache file" in caplog.text

    def test_wrong_shape_is_empty(self, tmp_path, caplog):
        (tmp_path / "Golden%20Emperor.json").write_text('["not", "an", "object"]')
        (tmp_path / "Dragon%20Train.json").write_text('{"detailCache": []}')
        cache = FilesystemNameCache(tmp_path)

        with caplog.at_level(logging.WARNING):
            assert cache.load("Golden Emperor") == {}
            assert cache.load("Dragon Train") == {}

    def test_blob_without_detail_cache_is_empty(self, tmp_path):
        (tmp_path / "Golden%20Emperor.json").write_text("{}")
        assert FilesystemNameCache(tmp_path).load("Golden Emperor") == {}

    def test_tolerant_reader(self, tmp_path):
        """Unknown fields are ignored, missing ones default, legacy names are accepted."""
        blob = {
            "detailCache": {
                URL_A: {
                    "wordMark": "GOLDEN EMPEROR",
                    "status": "LIVE",
                    "statusDesc": "Registered/Protected",
                    "classes": ["009"],
                    "futureField": {"nested": True},
                },
                URL_B: "garbage",
            }
        }
        (tmp_path / "Golden%20Emperor.json").write_text(json.dumps(blob))

        loaded = FilesystemNameCache(tmp_path).load("Golden Emperor")

        assert list(loaded) == [URL_A]
        rec = loaded[URL_A]
        assert rec.status_description == "Registered/Protected"
        assert rec.owner_name == ""
        assert rec.detail_url == URL_A  # back-filled from the key

    def test_error_entries_are_not_trusted(self, tmp_path):
        blob = {"detailCache": {URL_A: {"error": "Error processing detail page: 500"}}}
        (tmp_path / "Golden%20Emperor.json").write_text(json.dumps(blob))

        assert FilesystemNameCache(tmp_path).load("Golden Emperor") == {}

    def test_write_failure_is_logged(self, tmp_path, caplog):
        """A failed write never raises."""
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("")
        cache = FilesystemNameCache(blocker)

        with caplog.at_level(logging.ERROR):
            cache.save("Golden Emperor", {URL_A: record()})
        assert "Error writing cache file" in caplog.text

    def test_no_temp_files_left(self, tmp_path):
        cache = FilesystemNameCache(tmp_path)
        cache.save("Golden Emperor", {URL_A: record()})
        cache.save("Golden Emperor", {URL_A: record()})

        assert [p.name for p in tmp_path.iterdir()] == ["Golden%20Emperor.json"]


class TestListCached:
    """Test cache inspection."""

    def test_empty(self, tmp_path):
        cache = FilesystemNameCache(tmp_path / "missing")
        assert cache.list_all() == []
        assert cache.get_disk_usage() == 0

    def test_lists_names_and_usage(self, tmp_path):
        cache = FilesystemNameCache(tmp_path)
        cache.save("Urban Jungle", {})
        cache.save("Golden Emperor", {URL_A: record(), URL_B: record(URL_B)})

        names = cache.list_all()

        assert [n.name for n in names] == ["Golden Emperor", "Urban Jungle"]
        assert [n.record_count for n in names] == [2, 0]
        assert names[0].path == tmp_path / "Golden%20Emperor.json"
        assert cache.get_disk_usage() == sum(n.size_bytes for n in names)

    def test_long_name_recovered_from_blob(self, tmp_path):
        name = "Golden Emperor " * 20
        cache = FilesystemNameCache(tmp_path)
        cache.save(name, {})

        assert [n.name for n in cache.list_all()] == [name]
