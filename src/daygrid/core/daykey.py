"""Timezone-stable day keys and tolerant date parsing - no I/O dependencies."""

import calendar
import logging
from datetime import date, datetime, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

# Accepted after ISO parsing fails, in order
_LOOSE_FORMATS = ("%d/%m/%Y", "%b %d, %Y", "%B %d, %Y")


def resolve_timezone(reference_tz: str | tzinfo | None) -> tzinfo | None:
    """Resolve a timezone name or object. None means local-date fallback."""
    if reference_tz is None or isinstance(reference_tz, tzinfo):
        return reference_tz
    try:
        return ZoneInfo(reference_tz)
    except (ZoneInfoNotFoundError, ValueError) as e:
        logger.warning(f"Cannot resolve timezone {reference_tz!r}, using local dates: {e}")
        return None


def parse_date_value(value) -> datetime | date | None:
    """
    Parse a loosely-typed date value.

    Accepts datetime/date objects, epoch milliseconds, ISO instants
    ("2024-06-03T10:00:00Z"), ISO dates ("2024-06-03") and loose strings
    ("03/06/2024" as dd/mm/yyyy, "Jun 03, 2024"). Returns None when
    nothing parses.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (datetime, date)):
        return value
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    # Date-only strings name a calendar day, not an instant
    if len(text) == 10 and text[4:5] == "-":
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass

    iso = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        return datetime.fromisoformat(iso)
    except ValueError:
        pass

    for fmt in _LOOSE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


class DayKeys:
    """
    Canonical day keys in a fixed reference timezone.

    Aware instants are converted into the reference zone before the
    calendar date is taken, so the same instant yields the same key no
    matter where the process runs. Naive datetimes are read as wall-clock
    time in the reference zone and plain dates are used as-is.

    If the zone cannot be resolved, aware instants fall back to the
    machine's local date.
    """

    def __init__(self, reference_tz: str | tzinfo | None):
        self.tz = resolve_timezone(reference_tz)

    def day(self, value: datetime | date) -> date:
        """Calendar date of a value in the reference timezone."""
        if not isinstance(value, datetime):
            return value
        if value.tzinfo is None:
            return value.date()
        if self.tz is None:
            return value.astimezone().date()
        return value.astimezone(self.tz).date()

    def key(self, value: datetime | date) -> str:
        """Day key in "YYYY-MM-DD" form."""
        return self.day(value).isoformat()

    def now(self) -> datetime:
        return datetime.now(self.tz) if self.tz else datetime.now().astimezone()

    def today(self) -> date:
        return self.day(self.now())

    def is_today(self, value: datetime | date, now: datetime | None = None) -> bool:
        """Check if a value falls on the current day in the reference timezone."""
        return self.day(value) == self.day(now or self.now())

    def is_selected(self, value: datetime | date, reference: datetime | date | None) -> bool:
        """Check if a value falls on the same day as the selected reference."""
        if reference is None:
            return False
        return self.day(value) == self.day(reference)


def month_key(year: int, month: int) -> str:
    """Month counter key, e.g. "2024-6"."""
    return f"{year}-{month}"


def month_days(year: int, month: int) -> list[date]:
    """All dates in a month, in order."""
    _, last = calendar.monthrange(year, month)
    return [date(year, month, d) for d in range(1, last + 1)]
