"""
Value parsers: price, star rating, dates, vintage, filter expressions.

All of these are total. Malformed input degrades to a fallback value
(0 or the Unix epoch) instead of raising.
"""
from __future__ import annotations

import re
import warnings

import pandas as pd

from wine_agent.data.schemas import FilterExpression

_LEADING_FLOAT_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_FILTER_RE = re.compile(r"^([><=]+)(.+)\Z")

EPOCH_MS = 0

# pandas reads these as the current time
_RELATIVE_DATES = {"now", "today"}


def leading_float(text: str, default: float = 0.0) -> float:
    """Parse the longest numeric prefix of text ("30 (magnum)" -> 30.0)."""
    m = _LEADING_FLOAT_RE.match(text or "")
    if not m:
        return default
    try:
        return float(m.group(1))
    except (ValueError, OverflowError):
        return default


def parse_price(price_str: str) -> float:
    """"$45.99" -> 45.99, "$1,200" -> 1200.0, "" / "N/A" / garbage -> 0."""
    if not price_str:
        return 0.0
    cleaned = re.sub(r"[$,]", "", price_str).strip()
    return leading_float(cleaned)


def parse_rating(rating_str: str) -> float:
    """Star string to number: "***" -> 3, "*** 1/2" -> 3.5."""
    if not rating_str:
        return 0.0
    stars = rating_str.count("*")
    return stars + (0.5 if "1/2" in rating_str else 0.0)


def parse_rating_literal(value: str) -> float:
    """Rating filter literal: a star string ("*** 1/2") or a leading number ("4", "4.5+")."""
    stripped = (value or "").strip()
    if "*" in stripped or stripped == "1/2":
        return parse_rating(stripped)
    return leading_float(stripped)


def parse_vintage(vintage_str: str) -> int:
    """Leading integer of the cell ("2012" -> 2012, "NV" -> 0)."""
    m = _LEADING_INT_RE.match(vintage_str or "")
    return int(m.group(1)) if m else 0


def parse_date(date_str: str) -> int:
    """Single calendar parse of a free-form date, as epoch milliseconds.

    Anything pandas cannot read (including blanks) maps to the epoch, and so
    do the relative keywords "now" and "today".
    """
    text = (date_str or "").strip()
    if not text or text.lower() in _RELATIVE_DATES:
        return EPOCH_MS
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            ts = pd.to_datetime(text, errors="coerce")
    except (ValueError, TypeError, OverflowError):
        return EPOCH_MS
    if ts is None or pd.isna(ts):
        return EPOCH_MS
    return int(ts.value // 1_000_000)


def parse_filter_value(filter_value: str) -> FilterExpression:
    """Split ">=2012" into (">=", "2012"). No operator prefix means "="."""
    m = _FILTER_RE.match(filter_value)
    if m:
        return FilterExpression(m.group(1), m.group(2).strip())
    return FilterExpression("=", filter_value)
