"""Shared workflow layer between the CLI and other front ends.

Each function loads records from a source, builds the index and returns
plain data ready to print or serialize.
"""

from datetime import date

from .config import Config
from .core.aggregator import build_index
from .core.daykey import month_days, month_key
from .core.index import CalendarIndex, unique_for_display
from .core.indicators import indicators_for
from .ports.record_source import RecordSource


def load_index(
    source: RecordSource,
    config: Config,
    selected: list[str] | None = None,
) -> CalendarIndex:
    """Fetch raw records and build the day index."""
    return build_index(
        source.fetch_posts(),
        source.fetch_calendar_events(),
        selected if selected else config.selected_categories,
        config.day_keys(),
        config.aggregation_options(),
    )


def day_summary(index: CalendarIndex, target: date) -> dict:
    """Items and indicator colors for one day."""
    items = index.events_for_date(target)
    indicators = indicators_for(items)
    return {
        "date": target.isoformat(),
        "items": [item.to_dict() for item in unique_for_display(items)],
        "indicators": list(indicators.colors),
        "uniqueCategories": indicators.unique_count,
    }


def month_summary(index: CalendarIndex, year: int, month: int) -> dict:
    """Month counter plus per-day indicators for every day with items."""
    days = []
    for d in month_days(year, month):
        items = index.events_for_date(d)
        if not items:
            continue
        indicators = indicators_for(items)
        days.append(
            {
                "date": d.isoformat(),
                "count": len(items),
                "indicators": list(indicators.colors),
            }
        )
    return {
        "month": month_key(year, month),
        "count": index.month_count(date(year, month, 1)),
        "days": days,
    }


def agenda(index: CalendarIndex, descending: bool = True) -> list[dict]:
    """Every day with items, newest first by default."""
    return [
        {"date": key, "items": [item.to_dict() for item in unique_for_display(items)]}
        for key, items in index.grouped_by_day(descending)
    ]
