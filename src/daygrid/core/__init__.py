"""Functional core - pure aggregation logic with no I/O."""

from .daykey import DayKeys, parse_date_value, month_key, month_days
from .categories import ChipColors, TAXONOMY, normalize_category, category_colors
from .records import RawPost, SingleEvent, RangeEvent, PlaceholderEvent, parse_calendar_event
from .index import NormalizedItem, CalendarIndex, unique_for_display
from .aggregator import AggregationOptions, EventAggregator, build_index, expand_range
from .indicators import Indicators, indicators_for

__all__ = [
    # Day keys
    "DayKeys",
    "parse_date_value",
    "month_key",
    "month_days",
    # Categories
    "ChipColors",
    "TAXONOMY",
    "normalize_category",
    "category_colors",
    # Records
    "RawPost",
    "SingleEvent",
    "RangeEvent",
    "PlaceholderEvent",
    "parse_calendar_event",
    # Index
    "NormalizedItem",
    "CalendarIndex",
    "unique_for_display",
    # Aggregation
    "AggregationOptions",
    "EventAggregator",
    "build_index",
    "expand_range",
    # Indicators
    "Indicators",
    "indicators_for",
]
