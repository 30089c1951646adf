"""Typed input records built from loosely-structured source mappings."""

from dataclasses import dataclass
from typing import Any, Union

SINGLE = "single"
DATE_RANGE = "date_range"
PLACEHOLDER_TYPES = frozenset({"week_in_month", "week", "month_only", "month"})


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _int_or_none(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def _category(data: dict) -> str | None:
    """Raw category, falling back to type. None when neither is present."""
    for key in ("category", "type"):
        value = data.get(key)
        if value is not None and str(value).strip():
            return str(value)
    return None


@dataclass
class RawPost:
    """An announcement/post as delivered by the posts source."""

    id: str
    title: str
    category: str | None
    dates: tuple[Any, ...] = ()
    time: str = ""
    description: str = ""
    is_pinned: bool = False
    is_urgent: bool = False
    source: str = ""

    @classmethod
    def from_api(cls, data: dict) -> "RawPost":
        """Create RawPost from a posts API/document mapping."""
        return cls(
            id=_text(data.get("id") or data.get("_id")),
            title=_text(data.get("title")),
            category=_category(data),
            dates=(data.get("isoDate"), data.get("date")),
            time=_text(data.get("time")),
            description=_text(data.get("description")),
            is_pinned=bool(data.get("isPinned")),
            is_urgent=bool(data.get("isUrgent")),
            source=_text(data.get("source")),
        )


@dataclass(kw_only=True)
class CalendarRecord:
    """Fields shared by every calendar event variant."""

    id: str
    title: str
    category: str | None
    description: str = ""
    time: str = ""


@dataclass(kw_only=True)
class SingleEvent(CalendarRecord):
    """A one-day event; the first parseable candidate date wins."""

    dates: tuple[Any, ...] = ()
    date_type: str = SINGLE


@dataclass(kw_only=True)
class RangeEvent(CalendarRecord):
    """An event spanning start..end inclusive."""

    start: Any
    end: Any
    date_type: str = DATE_RANGE


@dataclass(kw_only=True)
class PlaceholderEvent(CalendarRecord):
    """A week- or month-level event that never lands on a day cell."""

    year: int | None
    month: int | None
    week_of_month: int | None = None
    date_type: str = "month_only"


CalendarEvent = Union[SingleEvent, RangeEvent, PlaceholderEvent]


def _calendar_id(data: dict) -> str:
    ident = data.get("_id") or data.get("id")
    if ident:
        return str(ident)
    anchor = data.get("isoDate") or data.get("startDate") or ""
    return f"calendar-{anchor}-{_text(data.get('title'))}"


def parse_calendar_event(data: dict) -> CalendarEvent:
    """
    Build the typed variant for a calendar-event mapping.

    A date_range without both bounds is treated as a single-day event on
    whichever of isoDate/date/startDate is present. Unknown dateType
    values are also treated as single-day events.
    """
    date_type = _text(data.get("dateType")).strip() or SINGLE
    common = dict(
        id=_calendar_id(data),
        title=_text(data.get("title")),
        category=_category(data),
        description=_text(data.get("description")),
        time=_text(data.get("time")),
    )

    if date_type in PLACEHOLDER_TYPES:
        return PlaceholderEvent(
            **common,
            year=_int_or_none(data.get("year")),
            month=_int_or_none(data.get("month")),
            week_of_month=_int_or_none(data.get("weekOfMonth")),
            date_type=date_type,
        )

    if date_type == DATE_RANGE and data.get("startDate") and data.get("endDate"):
        return RangeEvent(**common, start=data["startDate"], end=data["endDate"])

    return SingleEvent(
        **common,
        dates=(data.get("isoDate"), data.get("date"), data.get("startDate")),
        date_type=date_type,
    )


def as_post(record: RawPost | dict) -> RawPost:
    return record if isinstance(record, RawPost) else RawPost.from_api(record)


def as_calendar_event(record: CalendarEvent | dict) -> CalendarEvent:
    if isinstance(record, CalendarRecord):
        return record
    return parse_calendar_event(record)
