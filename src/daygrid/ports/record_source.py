"""Record source interface."""

from typing import Protocol


class RecordSource(Protocol):
    """Interface for loading raw posts and calendar events from any backend."""

    def fetch_posts(self) -> list[dict]:
        """Fetch raw post mappings."""
        ...

    def fetch_calendar_events(self) -> list[dict]:
        """Fetch raw calendar-event mappings."""
        ...
