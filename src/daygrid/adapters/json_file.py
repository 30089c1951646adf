"""JSON file record source adapter."""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class SourceError(Exception):
    """Raised when an input document cannot be read."""


class JsonFileSource:
    """
    File-based record source.

    Implements RecordSource protocol. Each file holds either a bare JSON
    array or a backend response envelope such as
    {"success": true, "posts": [...]} / {"success": true, "events": [...]}.
    A missing file yields no records.
    """

    def __init__(self, posts_path: Path | str | None, events_path: Path | str | None):
        self.posts_path = Path(posts_path).expanduser() if posts_path else None
        self.events_path = Path(events_path).expanduser() if events_path else None

    def fetch_posts(self) -> list[dict]:
        return self._load(self.posts_path, "posts")

    def fetch_calendar_events(self) -> list[dict]:
        return self._load(self.events_path, "events")

    def _load(self, path: Path | None, envelope_key: str) -> list[dict]:
        if path is None:
            return []
        if not path.exists():
            logger.info(f"No {envelope_key} file at {path}")
            return []

        try:
            data = json.loads(path.read_text())
        except json.JSONDecodeError as e:
            raise SourceError(f"Invalid JSON in {path}: {e}") from e
        except OSError as e:
            raise SourceError(f"Cannot read {path}: {e}") from e

        if isinstance(data, dict):
            data = data.get(envelope_key, data.get("data"))
        if not isinstance(data, list):
            raise SourceError(f"Expected a list of {envelope_key} in {path}")

        records = [item for item in data if isinstance(item, dict)]
        skipped = len(data) - len(records)
        if skipped:
            logger.warning(f"Skipped {skipped} non-object entries in {path}")
        return records
