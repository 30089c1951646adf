"""Tests for category normalization and colors."""

import pytest

from daygrid.core.categories import (
    FALLBACK_COLORS,
    FALLBACK_PRIORITY,
    TAXONOMY,
    category_colors,
    category_key,
    category_priority,
    normalize_category,
)


class TestNormalizeCategory:
    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_empty_defaults_to_announcement(self, raw):
        assert normalize_category(raw) == "Announcement"

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("events", "Event"),
            ("EVENT", "Event"),
            ("Announcements", "Announcement"),
            ("announcement", "Announcement"),
            ("academics", "Academic"),
            ("ACADEMIC", "Academic"),
            ("institutionals", "Institutional"),
            ("Institutional", "Institutional"),
            ("news", "News"),
            ("new", "News"),
            ("  event  ", "Event"),
        ],
    )
    def test_known_variants(self, raw, expected):
        assert normalize_category(raw) == expected

    def test_unknown_is_capitalized(self):
        assert normalize_category("sPORTS day") == "Sports day"

    def test_unknown_single_letter(self):
        assert normalize_category("x") == "X"

    @pytest.mark.parametrize(
        "raw",
        ["events", "NEWS", "sPORTS", "ßtraße", "İstanbul", "  mixed Case  ", "Announcement", "ÉVÉNEMENT"],
    )
    def test_idempotent(self, raw):
        once = normalize_category(raw)
        assert normalize_category(once) == once

    def test_canonical_forms_are_fixed_points(self):
        for category in TAXONOMY:
            assert normalize_category(category) == category


class TestCategoryColors:
    def test_known_category(self):
        colors = category_colors("Institutional")
        assert colors.dot == "#4B5563"
        assert colors.chip_bg == "#F3F4F6"

    def test_lookup_is_case_insensitive(self):
        assert category_colors("NEWS").dot == "#EF4444"

    def test_extra_known_categories(self):
        assert category_colors("Service").dot == "#059669"
        assert category_colors("Infrastructure").dot == "#DC2626"

    def test_unknown_falls_back(self):
        assert category_colors("Sports") == FALLBACK_COLORS
        assert category_colors(None) == FALLBACK_COLORS

    def test_to_dict_uses_chip_field_names(self):
        assert set(category_colors("Event").to_dict()) == {
            "dot",
            "chipBg",
            "chipBorder",
            "chipText",
            "cellColor",
        }


class TestPriority:
    def test_fixed_order(self):
        ranked = sorted(TAXONOMY, key=category_priority)
        assert ranked == ["Institutional", "Academic", "Event", "Announcement", "News"]

    def test_unknown_shares_fallback_rank(self):
        assert category_priority("Sports") == category_priority("Service") == FALLBACK_PRIORITY

    def test_category_key(self):
        assert category_key(" Academic ") == "academic"
