"""
Local list filtering: exact category match, then fuzzy text match.

Fuzzy matching scores the query against title, type, director and year with
rapidfuzz's partial ratio and keeps items whose best field clears the
threshold. ``threshold`` follows the usual fuzzy-search convention: 0.0
accepts only exact matches, 1.0 accepts everything.
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence

from rapidfuzz import fuzz, utils

from mediacatalog.client.schemas import MediaItem

SEARCH_KEYS: tuple[str, ...] = ("title", "type", "director", "year")
DEFAULT_THRESHOLD = 0.3
ALL_CATEGORIES = "All"
CATEGORIES: tuple[str, ...] = (ALL_CATEGORIES, "Movie", "TV Show", "Documentary")


def match_score(item: MediaItem, query: str, keys: Sequence[str] = SEARCH_KEYS) -> float:
    """Best 0..1 similarity between ``query`` and any of the item's search fields."""
    best = 0.0
    for key in keys:
        value = getattr(item, key, None)
        if not value:
            continue
        score = fuzz.partial_ratio(query, str(value), processor=utils.default_process)
        best = max(best, score / 100.0)
    return best


def filter_by_category(items: Iterable[MediaItem], category: str) -> list[MediaItem]:
    if not category or category == ALL_CATEGORIES:
        return list(items)
    wanted = category.casefold()
    return [item for item in items if item.type.casefold() == wanted]


def fuzzy_filter(
    items: Iterable[MediaItem],
    query: str,
    *,
    threshold: float = DEFAULT_THRESHOLD,
) -> list[MediaItem]:
    """Items matching ``query``, best match first; a blank query keeps everything in order."""
    items = list(items)
    query = query.strip()
    if not query:
        return items

    cutoff = 1.0 - threshold
    scored = [
        (score, index, item)
        for index, item in enumerate(items)
        if (score := match_score(item, query)) >= cutoff
    ]
    scored.sort(key=lambda row: (-row[0], row[1]))
    return [item for _, _, item in scored]


def apply_filters(
    items: Iterable[MediaItem],
    query: str,
    category: str,
    *,
    threshold: float = DEFAULT_THRESHOLD,
) -> list[MediaItem]:
    return fuzzy_filter(filter_by_category(items, category), query, threshold=threshold)
