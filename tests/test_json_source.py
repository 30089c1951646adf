"""Tests for the JSON file record source."""

import json

import pytest

from daygrid.adapters.json_file import JsonFileSource, SourceError


@pytest.fixture
def write(tmp_path):
    def _write(name: str, data) -> str:
        path = tmp_path / name
        path.write_text(data if isinstance(data, str) else json.dumps(data))
        return str(path)
    return _write


class TestJsonFileSource:
    def test_bare_lists(self, write):
        source = JsonFileSource(write("posts.json", [{"id": "p1"}]), write("events.json", [{"_id": "e1"}]))
        assert source.fetch_posts() == [{"id": "p1"}]
        assert source.fetch_calendar_events() == [{"_id": "e1"}]

    def test_backend_envelopes(self, write):
        source = JsonFileSource(
            write("posts.json", {"success": True, "posts": [{"id": "p1"}]}),
            write("events.json", {"success": True, "events": [{"_id": "e1"}]}),
        )
        assert source.fetch_posts() == [{"id": "p1"}]
        assert source.fetch_calendar_events() == [{"_id": "e1"}]

    def test_data_envelope(self, write):
        source = JsonFileSource(write("posts.json", {"data": [{"id": "p1"}]}), None)
        assert source.fetch_posts() == [{"id": "p1"}]

    def test_missing_files_yield_nothing(self, tmp_path):
        source = JsonFileSource(tmp_path / "nope.json", None)
        assert source.fetch_posts() == []
        assert source.fetch_calendar_events() == []

    def test_invalid_json(self, write):
        source = JsonFileSource(write("posts.json", "{not json"), None)
        with pytest.raises(SourceError, match="Invalid JSON"):
            source.fetch_posts()

    def test_wrong_shape(self, write):
        source = JsonFileSource(None, write("events.json", {"success": False}))
        with pytest.raises(SourceError, match="Expected a list of events"):
            source.fetch_calendar_events()

    def test_non_object_entries_skipped(self, write, caplog):
        source = JsonFileSource(write("posts.json", [{"id": "p1"}, "junk", 3]), None)
        assert source.fetch_posts() == [{"id": "p1"}]
        assert "Skipped 2" in caplog.text
