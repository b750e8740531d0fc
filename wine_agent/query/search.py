"""
Full-text search across names, review text, regions and varietal.
"""
from __future__ import annotations

from collections.abc import Iterable

from wine_agent.config import DEFAULT_LIMIT, SEARCH_FIELDS
from wine_agent.data.schemas import SortOrder, Wine
from wine_agent.query.common import sort_and_limit


def searchable_text(wine: Wine) -> str:
    """Lower-cased searchable fields joined by single spaces."""
    return " ".join(wine.get(name) or "" for name in SEARCH_FIELDS).lower()


def search_wines(
    wines: Iterable[Wine],
    query: str,
    limit: int = DEFAULT_LIMIT,
    sort_by: str | None = None,
    sort_order: str = SortOrder.DESC,
) -> list[Wine]:
    """Wines containing every whitespace-separated word of query.

    An empty query matches everything.
    """
    words = query.lower().split()
    results = [
        wine for wine, text in ((w, searchable_text(w)) for w in wines)
        if all(word in text for word in words)
    ]
    return sort_and_limit(results, limit, sort_by, sort_order)
