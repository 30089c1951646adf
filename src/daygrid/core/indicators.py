"""Indicator dot colors for a day cell - no I/O dependencies."""

from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable

from .categories import category_colors, category_priority, normalize_category
from .index import NormalizedItem


@dataclass(frozen=True)
class Indicators:
    """Ordered dot colors for a cell and how many distinct categories it holds."""

    colors: tuple[str, ...]
    unique_count: int


def category_set(items: Iterable[NormalizedItem]) -> frozenset[str]:
    """Distinct normalized categories among items."""
    return frozenset(normalize_category(item.category) for item in items)


@lru_cache(maxsize=256)
def indicators_for_categories(categories: frozenset[str]) -> Indicators:
    """
    Colors for a set of categories, sorted by priority then name.

    Cached on the category set, so identical sets return the same object.
    """
    ordered = sorted(categories, key=lambda c: (category_priority(c), c))
    return Indicators(
        colors=tuple(category_colors(c).cell_color for c in ordered),
        unique_count=len(ordered),
    )


def indicators_for(items: Iterable[NormalizedItem]) -> Indicators:
    """
    Derive a cell's indicator colors from its items.

    Only the set of categories matters: item order, count and repeats of
    a category do not change the result. There is no cap on the number
    of indicators.
    """
    return indicators_for_categories(category_set(items))
