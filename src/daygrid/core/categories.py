"""Category taxonomy, normalization and indicator colors - no I/O dependencies."""

from dataclasses import dataclass

ACADEMIC = "Academic"
INSTITUTIONAL = "Institutional"
ANNOUNCEMENT = "Announcement"
EVENT = "Event"
NEWS = "News"

TAXONOMY = (ACADEMIC, INSTITUTIONAL, ANNOUNCEMENT, EVENT, NEWS)
DEFAULT_CATEGORY = ANNOUNCEMENT

# Lower-cased variant -> canonical category
_VARIANTS = {
    "events": EVENT,
    "event": EVENT,
    "announcements": ANNOUNCEMENT,
    "announcement": ANNOUNCEMENT,
    "academics": ACADEMIC,
    "academic": ACADEMIC,
    "institutionals": INSTITUTIONAL,
    "institutional": INSTITUTIONAL,
    "news": NEWS,
    "new": NEWS,
}

# Display order for indicators (lower first)
PRIORITY = {
    INSTITUTIONAL: 1,
    ACADEMIC: 2,
    EVENT: 3,
    ANNOUNCEMENT: 4,
    NEWS: 5,
}
FALLBACK_PRIORITY = 99

# ASCII-only case folding keeps normalization locale independent
_TO_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")
_TO_UPPER = str.maketrans("abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ")


def _lower(text: str) -> str:
    return text.translate(_TO_LOWER)


@dataclass(frozen=True)
class ChipColors:
    """Colors used to draw a category's dot and chip."""

    dot: str
    chip_bg: str
    chip_border: str
    chip_text: str
    cell_color: str

    def to_dict(self) -> dict[str, str]:
        return {
            "dot": self.dot,
            "chipBg": self.chip_bg,
            "chipBorder": self.chip_border,
            "chipText": self.chip_text,
            "cellColor": self.cell_color,
        }


_PALETTE = {
    "academic": ChipColors("#2563EB", "#EEF2FF", "#E0E7FF", "#1D4ED8", "#2563EB"),
    "institutional": ChipColors("#4B5563", "#F3F4F6", "#E5E7EB", "#1F2937", "#4B5563"),
    "announcement": ChipColors("#EAB308", "#FEF9C3", "#FDE047", "#854D0E", "#EAB308"),
    "event": ChipColors("#10B981", "#ECFDF5", "#BBF7D0", "#065F46", "#10B981"),
    "news": ChipColors("#EF4444", "#FEE2E2", "#FECACA", "#991B1B", "#EF4444"),
    "service": ChipColors("#059669", "#ECFDF5", "#BBF7D0", "#065F46", "#059669"),
    "infrastructure": ChipColors("#DC2626", "#FEE2E2", "#FECACA", "#991B1B", "#DC2626"),
}
FALLBACK_COLORS = _PALETTE["academic"]


def normalize_category(raw: str | None) -> str:
    """
    Map a raw category/type string onto the taxonomy.

    Empty input becomes Announcement. Known singular/plural variants are
    matched case-insensitively. Anything else is passed through with the
    first letter upper-cased and the rest lower-cased.
    """
    if raw is None:
        return DEFAULT_CATEGORY
    trimmed = str(raw).strip()
    if not trimmed:
        return DEFAULT_CATEGORY

    lower = _lower(trimmed)
    if lower in _VARIANTS:
        return _VARIANTS[lower]
    return trimmed[0].translate(_TO_UPPER) + lower[1:]


def category_colors(category: str | None) -> ChipColors:
    """Chip colors for a category; unknown categories get the fallback palette."""
    return _PALETTE.get(_lower(str(category or "").strip()), FALLBACK_COLORS)


def category_key(category: str | None) -> str:
    """Lower-cased form used for selection matching."""
    return _lower(str(category or "").strip())


def category_priority(category: str) -> int:
    """Indicator priority rank; unknown categories share the fallback rank."""
    return PRIORITY.get(category, FALLBACK_PRIORITY)
