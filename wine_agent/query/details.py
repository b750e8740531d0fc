"""
Wine lookup by name, exact or partial.
"""
from __future__ import annotations

from collections.abc import Iterable

from wine_agent.data.schemas import Wine


def get_wine_details(wines: Iterable[Wine], wine_name: str, exact_match: bool = False) -> list[Wine]:
    """Wines whose name, or "brand name", equals (exact) or contains wine_name."""
    needle = wine_name.lower()
    results = []
    for wine in wines:
        name = wine.wine_name.lower()
        full_name = f"{wine.brand_name} {wine.wine_name}".lower()
        if exact_match:
            matched = needle in (name, full_name)
        else:
            matched = needle in name or needle in full_name
        if matched:
            results.append(wine)
    return results
