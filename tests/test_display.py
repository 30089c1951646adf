"""Tests for display formatting."""

from daygrid.core.categories import category_colors
from daygrid.core.display import format_calendar_date, format_date, format_item_line
from daygrid.core.index import NormalizedItem


class TestFormatDate:
    def test_iso(self):
        assert format_date("2025-09-12") == "Sep 12, 2025"

    def test_instant(self):
        assert format_date("2025-09-12T08:00:00+08:00") == "Sep 12, 2025"

    def test_invalid_string_returned(self):
        assert format_date("TBA") == "TBA"

    def test_none(self):
        assert format_date(None) == ""

    def test_calendar_date(self):
        assert format_calendar_date("2025-09-02") == "Sep 02"
        assert format_calendar_date("TBA") == ""


class TestFormatItemLine:
    def _item(self, **overrides):
        fields = dict(
            id="e1",
            title="Semester Break",
            date_key="2024-06-10",
            category="Institutional",
            color="#4B5563",
            source="calendar",
            chip=category_colors("Institutional"),
        )
        fields.update(overrides)
        return NormalizedItem(**fields)

    def test_all_day(self):
        assert format_item_line(self._item()) == "- All Day  [Institutional] Semester Break"

    def test_timed_with_flags(self):
        line = format_item_line(self._item(time="09:00", is_pinned=True, is_urgent=True))
        assert line == "- 09:00    [Institutional] Semester Break [pinned] [urgent]"

    def test_range_span(self):
        line = format_item_line(self._item(start_date="2024-06-10", end_date="2024-06-12"))
        assert line.endswith("Semester Break (Jun 10 - Jun 12)")
