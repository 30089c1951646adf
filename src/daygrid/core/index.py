"""Built per-day index and its read-only queries - no I/O dependencies."""

from dataclasses import dataclass, field
from datetime import date, datetime
from types import MappingProxyType
from typing import Mapping

from .categories import ChipColors
from .daykey import DayKeys, month_key, parse_date_value

POST = "post"
CALENDAR = "calendar"


@dataclass(frozen=True)
class NormalizedItem:
    """One day-cell entry produced from a post or calendar event."""

    id: str
    title: str
    date_key: str
    category: str
    color: str
    source: str
    chip: ChipColors
    time: str = ""
    description: str = ""
    date_type: str = ""
    start_date: str = ""
    end_date: str = ""
    is_pinned: bool = False
    is_urgent: bool = False

    def display_time(self) -> str:
        return self.time or "All Day"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "dateKey": self.date_key,
            "type": self.category,
            "color": self.color,
            "chip": self.chip.to_dict(),
            "source": self.source,
            "time": self.time,
            "description": self.description,
            "dateType": self.date_type,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "isPinned": self.is_pinned,
            "isUrgent": self.is_urgent,
        }


@dataclass(frozen=True)
class CalendarIndex:
    """
    Day key -> items, plus "year-month" -> count.

    Built once by the aggregator; every accessor is a lookup and nothing
    here mutates the underlying maps.
    """

    days: Mapping[str, tuple[NormalizedItem, ...]]
    month_counts: Mapping[str, int]
    day_keys: DayKeys = field(compare=False, repr=False)

    @classmethod
    def freeze(
        cls,
        days: dict[str, list[NormalizedItem]],
        month_counts: dict[str, int],
        day_keys: DayKeys,
    ) -> "CalendarIndex":
        return cls(
            days=MappingProxyType({k: tuple(v) for k, v in days.items()}),
            month_counts=MappingProxyType(dict(month_counts)),
            day_keys=day_keys,
        )

    def _day(self, value: date | datetime | str) -> date | None:
        if isinstance(value, str):
            parsed = parse_date_value(value)
            return self.day_keys.day(parsed) if parsed is not None else None
        return self.day_keys.day(value)

    def events_for_date(self, value: date | datetime | str) -> tuple[NormalizedItem, ...]:
        """Items on the day containing value, or an empty tuple."""
        day = self._day(value)
        if day is None:
            return ()
        return self.days.get(day.isoformat(), ())

    def month_count(self, value: date | datetime | str) -> int:
        """Counter for the month containing value, or 0."""
        day = self._day(value)
        if day is None:
            return 0
        return self.month_counts.get(month_key(day.year, day.month), 0)

    def grouped_by_day(self, descending: bool = True) -> list[tuple[str, tuple[NormalizedItem, ...]]]:
        """All (day key, items) pairs sorted by date, newest first by default."""
        return sorted(self.days.items(), key=lambda kv: kv[0], reverse=descending)

    def total_items(self) -> int:
        return sum(len(items) for items in self.days.values())

    def to_dict(self) -> dict:
        return {
            "days": {k: [item.to_dict() for item in v] for k, v in self.days.items()},
            "monthCounts": dict(self.month_counts),
        }


def unique_for_display(items: list[NormalizedItem] | tuple[NormalizedItem, ...]) -> list[NormalizedItem]:
    """
    Collapse items that look identical in a detail list.

    Items sharing title, category and time (case-insensitive) are shown
    once; first occurrence wins.
    """
    seen: set[str] = set()
    unique = []
    for item in items:
        key = f"{item.title}_{item.category}_{item.display_time()}".lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(item)
    return unique
