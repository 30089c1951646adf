"""Tests for configuration loading."""

import logging

from daygrid.config import Config, load_config


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "absent.conf")
        assert config == Config()
        assert config.timezone == "Asia/Manila"
        assert config.range_threshold_days == 90
        assert config.excluded_post_sources == ["CSV Upload"]

    def test_parses_values(self, tmp_path):
        path = tmp_path / "daygrid.conf"
        path.write_text(
            "\n".join(
                [
                    "# comment",
                    'TIMEZONE = "Asia/Singapore"  # inline comment',
                    "RANGE_THRESHOLD_DAYS = 30",
                    "MAX_RANGE_DAYS = 120 # shorter cap",
                    "EXCLUDED_POST_SOURCES = CSV Upload, Bulk Import",
                    "SELECTED_CATEGORIES = Academic, news",
                    "FILTER_POSTS_BY_SELECTION = yes",
                    "POSTS_FILE = '~/data/posts.json'",
                    "EVENTS_FILE = /tmp/events.json",
                    "not a setting",
                    "UNKNOWN_KEY = whatever",
                ]
            )
        )
        config = load_config(path)
        assert config.timezone == "Asia/Singapore"
        assert config.range_threshold_days == 30
        assert config.max_range_days == 120
        assert config.excluded_post_sources == ["CSV Upload", "Bulk Import"]
        assert config.selected_categories == ["academic", "news"]
        assert config.filter_posts_by_selection is True
        assert config.posts_file == "~/data/posts.json"
        assert config.events_file == "/tmp/events.json"

    def test_invalid_integer_keeps_default(self, tmp_path, caplog):
        path = tmp_path / "daygrid.conf"
        path.write_text("RANGE_THRESHOLD_DAYS = ninety\nMAX_RANGE_DAYS = 0\n")
        with caplog.at_level(logging.WARNING):
            config = load_config(path)
        assert config.range_threshold_days == 90
        assert config.max_range_days == 365
        assert "RANGE_THRESHOLD_DAYS" in caplog.text
        assert "MAX_RANGE_DAYS" in caplog.text


class TestConfigHelpers:
    def test_aggregation_options(self):
        config = Config(range_threshold_days=10, excluded_post_sources=["A", "B"], filter_posts_by_selection=True)
        options = config.aggregation_options()
        assert options.range_threshold_days == 10
        assert options.excluded_post_sources == ("A", "B")
        assert options.filter_posts_by_selection is True

    def test_day_keys_falls_back_for_unknown_zone(self):
        assert Config(timezone="Nowhere/Imaginary").day_keys().tz is None
