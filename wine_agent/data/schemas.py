"""
Wine record, filter expression and comparison value schemas.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


# ---------------------------------------------------------------------------
# Canonical field name → Wine attribute
# ---------------------------------------------------------------------------
WINE_FIELDS = {
    "id": "id",
    "brandName": "brand_name",
    "wineName": "wine_name",
    "ava": "ava",
    "vintage": "vintage",
    "price": "price",
    "rating": "rating",
    "review": "review",
    "region": "region",
    "type": "type",
    "mainVarietal": "main_varietal",
    "tastingDate": "tasting_date",
    "publicationDate": "publication_date",
    "setting": "setting",
    "purchasedProvided": "purchased_provided",
    "temp": "temp",
    "hyperlink": "hyperlink",
}


@dataclass(frozen=True)
class Wine:
    """One normalized wine review row. Every value is the raw cell text."""
    id: str = ""
    brand_name: str = ""
    wine_name: str = ""
    ava: str = ""
    vintage: str = ""
    price: str = "N/A"              # e.g. "$30"; "N/A" when the cell is blank
    rating: str = ""                # e.g. "*** 1/2"
    review: str = ""
    region: str = ""
    type: str = ""                  # Red, White, Rosé, ...
    main_varietal: str = ""         # Pinot Noir, Chardonnay, ...
    tasting_date: str = ""
    publication_date: str = ""
    setting: str = ""
    purchased_provided: str = ""
    temp: str = ""
    hyperlink: str = ""

    def get(self, field_name: str) -> Optional[str]:
        """Value for a canonical field name, or None if the name is unknown."""
        attr = WINE_FIELDS.get(field_name)
        if attr is None:
            return None
        return getattr(self, attr)

    def to_dict(self) -> dict[str, str]:
        """JSON-ready dict keyed by canonical field names."""
        return {name: getattr(self, attr) for name, attr in WINE_FIELDS.items()}


# ---------------------------------------------------------------------------
# Filter expressions
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FilterExpression:
    """Operator + literal parsed from a filter string like ">=2012"."""
    operator: str
    value: str


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


# ---------------------------------------------------------------------------
# Comparison values
# ---------------------------------------------------------------------------

class ValueKind(str, Enum):
    NUMBER = "number"
    INSTANT = "instant"     # epoch milliseconds
    TEXT = "text"


@dataclass(frozen=True)
class Comparable:
    kind: ValueKind
    value: Union[float, int, str]

    @classmethod
    def number(cls, value: float) -> "Comparable":
        return cls(ValueKind.NUMBER, value)

    @classmethod
    def instant(cls, value: int) -> "Comparable":
        return cls(ValueKind.INSTANT, value)

    @classmethod
    def text(cls, value: str) -> "Comparable":
        return cls(ValueKind.TEXT, value)
