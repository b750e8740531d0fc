"""
Comparison and sorting helpers shared by the search, filter and detail tools.
"""
from __future__ import annotations

from collections.abc import Iterable

from wine_agent.data.parsers import parse_date, parse_price, parse_rating, parse_vintage
from wine_agent.data.schemas import Comparable, SortOrder, ValueKind, Wine

PRICE_FIELDS = {"price"}
RATING_FIELDS = {"rating"}
VINTAGE_FIELDS = {"vintage"}
DATE_FIELDS = {"tastingDate", "publicationDate"}


# ---------------------------------------------------------------------------
# Field projection
# ---------------------------------------------------------------------------

def project_field(wine: Wine, field_name: str) -> Comparable:
    """Typed value of a wine field for comparison and sorting.

    Unknown field names project to empty text.
    """
    raw = wine.get(field_name) or ""
    if field_name in PRICE_FIELDS:
        return Comparable.number(parse_price(raw))
    if field_name in RATING_FIELDS:
        return Comparable.number(parse_rating(raw))
    if field_name in VINTAGE_FIELDS:
        return Comparable.number(parse_vintage(raw))
    if field_name in DATE_FIELDS:
        return Comparable.instant(parse_date(raw))
    return Comparable.text(raw)


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------

def compare_values(actual: Comparable, operator: str, expected: Comparable) -> bool:
    """Apply a filter operator. Unknown operators never match.

    Text only supports "=", as case-insensitive containment of expected in actual.
    """
    if actual.kind == ValueKind.TEXT:
        if operator == "=":
            return str(expected.value).lower() in str(actual.value).lower()
        return False

    a, e = actual.value, expected.value
    if operator == ">":
        return a > e
    if operator == "<":
        return a < e
    if operator == ">=":
        return a >= e
    if operator == "<=":
        return a <= e
    if operator in ("=", "=="):
        return a == e
    return False


# ---------------------------------------------------------------------------
# Sorting & limiting
# ---------------------------------------------------------------------------

def sort_wines(wines: Iterable[Wine], sort_by: str, sort_order: str = SortOrder.DESC) -> list[Wine]:
    """Stable sort on a field projection. Ties keep their input order."""
    descending = sort_order != SortOrder.ASC
    return sorted(wines, key=lambda w: project_field(w, sort_by).value, reverse=descending)


def sort_and_limit(
    wines: list[Wine],
    limit: int,
    sort_by: str | None = None,
    sort_order: str = SortOrder.DESC,
) -> list[Wine]:
    if sort_by:
        wines = sort_wines(wines, sort_by, sort_order)
    return wines[:limit]
