"""Merge posts and calendar events into a per-day index - no I/O dependencies."""

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Iterator

from .categories import category_colors, category_key, normalize_category
from .daykey import DayKeys, month_key, parse_date_value
from .index import CALENDAR, POST, CalendarIndex, NormalizedItem
from .records import (
    CalendarEvent,
    PlaceholderEvent,
    RangeEvent,
    RawPost,
    as_calendar_event,
    as_post,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AggregationOptions:
    """Tunables for building the index."""

    range_threshold_days: int = 90
    max_range_days: int = 365
    excluded_post_sources: tuple[str, ...] = ("CSV Upload",)
    filter_posts_by_selection: bool = False


@dataclass(frozen=True)
class DayInsertion:
    """A candidate item for one day cell."""

    item: NormalizedItem
    day: date


@dataclass(frozen=True)
class MonthIncrement:
    """A week/month placeholder that only bumps a month counter."""

    year: int
    month: int


def expand_range(start: date, end: date, max_days: int = 365) -> list[date]:
    """
    Every day from start to end inclusive.

    Spans covering more than max_days days collapse to just the two
    boundary days. A reversed range is empty.
    """
    if end < start:
        return []
    diff = (end - start).days
    if diff + 1 > max_days:
        return [start, end]
    return [start + timedelta(days=i) for i in range(diff + 1)]


def _first_parsed(values: Iterable):
    for value in values:
        parsed = parse_date_value(value)
        if parsed is not None:
            return parsed
    return None


def is_duplicate(existing: NormalizedItem, candidate: NormalizedItem) -> bool:
    """
    Whether candidate repeats an item already in the same day cell.

    Matches on equal non-empty identifiers, or on equal
    (source, title, day key). Titles compare exactly.
    """
    if candidate.id and existing.id == candidate.id:
        return True
    return (existing.source, existing.title, existing.date_key) == (
        candidate.source,
        candidate.title,
        candidate.date_key,
    )


class EventAggregator:
    """
    Builds a CalendarIndex from raw posts and calendar events.

    Posts are processed before calendar events, each in collection order.
    Records with unusable dates or categories are dropped, never raised.
    """

    def __init__(self, day_keys: DayKeys, options: AggregationOptions | None = None):
        self.day_keys = day_keys
        self.options = options or AggregationOptions()
        self._excluded_sources = {s.strip().lower() for s in self.options.excluded_post_sources}

    def build(
        self,
        posts: Iterable[RawPost | dict],
        calendar_events: Iterable[CalendarEvent | dict],
        selected: Iterable[str],
    ) -> CalendarIndex:
        selected_keys = {category_key(s) for s in selected}
        days: dict[str, list[NormalizedItem]] = {}
        counts: dict[str, int] = {}

        candidates = [
            *self._post_candidates(posts, selected_keys),
            *self._calendar_candidates(calendar_events, selected_keys),
        ]
        for candidate in candidates:
            if isinstance(candidate, MonthIncrement):
                key = month_key(candidate.year, candidate.month)
                counts[key] = counts.get(key, 0) + 1
                continue

            cell = days.setdefault(candidate.item.date_key, [])
            if any(is_duplicate(existing, candidate.item) for existing in cell):
                logger.debug(f"Suppressed duplicate {candidate.item.title!r} on {candidate.item.date_key}")
                continue
            cell.append(candidate.item)
            key = month_key(candidate.day.year, candidate.day.month)
            counts[key] = counts.get(key, 0) + 1

        return CalendarIndex.freeze(days, counts, self.day_keys)

    # ---- posts ----

    def _post_candidates(self, posts: Iterable, selected_keys: set[str]) -> Iterator[DayInsertion]:
        for raw in posts:
            post = as_post(raw)
            if post.source.strip().lower() in self._excluded_sources:
                continue
            if post.category is None:
                logger.debug(f"Dropping post {post.id or post.title!r}: no category")
                continue
            category = normalize_category(post.category)
            if not category:
                continue
            if self.options.filter_posts_by_selection and category_key(category) not in selected_keys:
                continue

            parsed = _first_parsed(post.dates)
            if parsed is None:
                logger.debug(f"Dropping post {post.id or post.title!r}: unparseable date")
                continue

            day = self.day_keys.day(parsed)
            colors = category_colors(category)
            yield DayInsertion(
                item=NormalizedItem(
                    id=post.id,
                    title=post.title,
                    date_key=day.isoformat(),
                    category=category,
                    color=colors.dot,
                    source=POST,
                    chip=colors,
                    time=post.time,
                    description=post.description,
                    is_pinned=post.is_pinned,
                    is_urgent=post.is_urgent,
                ),
                day=day,
            )

    # ---- calendar events ----

    def _calendar_candidates(
        self, events: Iterable, selected_keys: set[str]
    ) -> Iterator[DayInsertion | MonthIncrement]:
        for raw in events:
            event = as_calendar_event(raw)
            if event.category is None:
                logger.debug(f"Dropping calendar event {event.id!r}: no category")
                continue
            category = normalize_category(event.category)
            if not category or category_key(category) not in selected_keys:
                continue

            if isinstance(event, PlaceholderEvent):
                if event.year and event.month:
                    yield MonthIncrement(event.year, event.month)
                continue

            for day in self._event_days(event):
                yield DayInsertion(item=self._calendar_item(event, category, day), day=day)

    def _event_days(self, event: CalendarEvent) -> list[date]:
        if isinstance(event, RangeEvent):
            start = parse_date_value(event.start)
            end = parse_date_value(event.end)
            if start is None or end is None:
                logger.debug(f"Dropping range {event.id!r}: unparseable bounds")
                return []
            start_day = self.day_keys.day(start)
            end_day = self.day_keys.day(end)
            if end_day < start_day:
                logger.debug(f"Dropping range {event.id!r}: ends before it starts")
                return []
            span = (end_day - start_day).days + 1
            if span > self.options.range_threshold_days:
                return list(dict.fromkeys((start_day, end_day)))
            return expand_range(start_day, end_day, self.options.max_range_days)

        parsed = _first_parsed(event.dates)
        if parsed is None:
            logger.debug(f"Dropping calendar event {event.id!r}: unparseable date")
            return []
        return [self.day_keys.day(parsed)]

    def _calendar_item(self, event: CalendarEvent, category: str, day: date) -> NormalizedItem:
        colors = category_colors(category)
        start_date = end_date = ""
        if isinstance(event, RangeEvent):
            start_date, end_date = str(event.start), str(event.end)
        return NormalizedItem(
            id=event.id,
            title=event.title,
            date_key=day.isoformat(),
            category=category,
            color=colors.dot,
            source=CALENDAR,
            chip=colors,
            time=event.time,
            description=event.description,
            date_type=event.date_type,
            start_date=start_date,
            end_date=end_date,
        )


def build_index(
    posts: Iterable[RawPost | dict],
    calendar_events: Iterable[CalendarEvent | dict],
    selected: Iterable[str],
    day_keys: DayKeys,
    options: AggregationOptions | None = None,
) -> CalendarIndex:
    """
    Build the per-day index and month counters.

    Pure function - no I/O. The same inputs always yield an equal index.
    """
    return EventAggregator(day_keys, options).build(posts, calendar_events, selected)
