"""Shared fixtures."""

from datetime import timedelta, timezone

import pytest

from daygrid.core.aggregator import AggregationOptions, build_index
from daygrid.core.daykey import DayKeys

ALL_CATEGORIES = {"academic", "institutional", "announcement", "event", "news"}


@pytest.fixture
def utc8():
    return timezone(timedelta(hours=8), "UTC+8")


@pytest.fixture
def day_keys(utc8):
    return DayKeys(utc8)


@pytest.fixture
def build(day_keys):
    """Build an index with the UTC+8 reference zone."""
    def _build(posts=(), events=(), selected=ALL_CATEGORIES, **options):
        return build_index(posts, events, selected, day_keys, AggregationOptions(**options))
    return _build
