"""Configuration management for daygrid."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from .core.aggregator import AggregationOptions
from .core.daykey import DayKeys

logger = logging.getLogger(__name__)

DAYGRID_HOME = Path(os.environ.get("DAYGRID_HOME", Path.home() / "daygrid"))
CONFIG_FILE = DAYGRID_HOME / "config" / "daygrid.conf"
DATA_DIR = DAYGRID_HOME / "data"

DEFAULT_SELECTED = ["academic", "institutional", "announcement", "event", "news"]


@dataclass
class Config:
    """daygrid configuration."""

    timezone: str = "Asia/Manila"
    range_threshold_days: int = 90
    max_range_days: int = 365
    excluded_post_sources: list[str] = field(default_factory=lambda: ["CSV Upload"])
    selected_categories: list[str] = field(default_factory=lambda: list(DEFAULT_SELECTED))
    filter_posts_by_selection: bool = False
    posts_file: str = str(DATA_DIR / "posts.json")
    events_file: str = str(DATA_DIR / "calendar_events.json")

    def day_keys(self) -> DayKeys:
        return DayKeys(self.timezone)

    def aggregation_options(self) -> AggregationOptions:
        return AggregationOptions(
            range_threshold_days=self.range_threshold_days,
            max_range_days=self.max_range_days,
            excluded_post_sources=tuple(self.excluded_post_sources),
            filter_posts_by_selection=self.filter_posts_by_selection,
        )


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _parse_list(value: str) -> list[str]:
    return [v.strip() for v in value.split(",") if v.strip()]


def _parse_int(key: str, value: str, default: int) -> int:
    try:
        parsed = int(value)
    except ValueError:
        logger.warning(f"Invalid integer for {key.upper()}: {value!r}, keeping {default}")
        return default
    if parsed < 1:
        logger.warning(f"{key.upper()} must be positive, keeping {default}")
        return default
    return parsed


def load_config(path: Path | None = None) -> Config:
    """Load configuration from daygrid.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = value.strip()

        # Handle quoted values with inline comments: "value" # comment
        if value.startswith('"') or value.startswith("'"):
            quote = value[0]
            end_quote = value.find(quote, 1)
            value = value[1:end_quote] if end_quote != -1 else value[1:]
        elif "#" in value:
            value = value.split("#")[0].strip()

        match key:
            case "timezone":
                config.timezone = value
            case "range_threshold_days":
                config.range_threshold_days = _parse_int(key, value, config.range_threshold_days)
            case "max_range_days":
                config.max_range_days = _parse_int(key, value, config.max_range_days)
            case "excluded_post_sources":
                config.excluded_post_sources = _parse_list(value)
            case "selected_categories":
                config.selected_categories = [c.lower() for c in _parse_list(value)]
            case "filter_posts_by_selection":
                config.filter_posts_by_selection = _parse_bool(value)
            case "posts_file":
                config.posts_file = value
            case "events_file":
                config.events_file = value

    return config
