"""Pure display formatting - no I/O dependencies."""

from datetime import date, datetime

from .daykey import parse_date_value
from .index import NormalizedItem


def _as_date(value) -> date | None:
    parsed = parse_date_value(value)
    if isinstance(parsed, datetime):
        return parsed.date()
    return parsed


def format_date(value) -> str:
    """Format as "Sep 12, 2025". Unparseable strings are returned unchanged."""
    d = _as_date(value)
    if d is None:
        return value if isinstance(value, str) else ""
    return d.strftime("%b %d, %Y")


def format_calendar_date(value) -> str:
    """Format as "Sep 12"."""
    d = _as_date(value)
    if d is None:
        return ""
    return d.strftime("%b %d")


def format_item_line(item: NormalizedItem) -> str:
    """
    Format a single item for display.

    Pure function - no I/O.
    """
    flags = ""
    if item.is_pinned:
        flags += " [pinned]"
    if item.is_urgent:
        flags += " [urgent]"
    span = ""
    if item.start_date and item.end_date:
        span = f" ({format_calendar_date(item.start_date)} - {format_calendar_date(item.end_date)})"
    return f"- {item.display_time():8} [{item.category}] {item.title}{span}{flags}"
