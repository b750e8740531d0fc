"""
Structured filtering with comparison operators (AND across fields).
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping

from wine_agent.config import DEFAULT_LIMIT
from wine_agent.data.parsers import (
    leading_float, parse_date, parse_filter_value, parse_rating_literal, parse_vintage,
)
from wine_agent.data.schemas import Comparable, SortOrder, Wine
from wine_agent.query.common import (
    DATE_FIELDS, PRICE_FIELDS, RATING_FIELDS, VINTAGE_FIELDS,
    compare_values, project_field, sort_and_limit,
)


def expected_value(field_name: str, literal: str) -> Comparable:
    """Parse a filter literal into the same domain as the field projection."""
    if field_name in PRICE_FIELDS:
        return Comparable.number(leading_float(literal))
    if field_name in RATING_FIELDS:
        return Comparable.number(parse_rating_literal(literal))
    if field_name in VINTAGE_FIELDS:
        return Comparable.number(parse_vintage(literal))
    if field_name in DATE_FIELDS:
        return Comparable.instant(parse_date(literal))
    return Comparable.text(literal)


def matches_filter(wine: Wine, field_name: str, filter_value: str) -> bool:
    """Whether one wine satisfies one filter entry. Unknown fields never match."""
    if wine.get(field_name) is None:
        return False
    expr = parse_filter_value(filter_value)
    return compare_values(
        project_field(wine, field_name),
        expr.operator,
        expected_value(field_name, expr.value),
    )


def filter_wines(
    wines: Iterable[Wine],
    filters: Mapping[str, str],
    limit: int = DEFAULT_LIMIT,
    sort_by: str | None = None,
    sort_order: str = SortOrder.DESC,
) -> list[Wine]:
    """Wines matching every filter, e.g. {"mainVarietal": "Pinot Noir", "rating": ">4"}.

    Numeric and date fields take ">", "<", ">=", "<=" or "=" prefixes;
    other fields match by case-insensitive substring.
    """
    results = [
        wine for wine in wines
        if all(matches_filter(wine, key, value) for key, value in filters.items())
    ]
    return sort_and_limit(results, limit, sort_by, sort_order)
