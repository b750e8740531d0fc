"""
Header normalisation, column mapping, and row → Wine parsing.
"""
from __future__ import annotations

import re
from collections.abc import Sequence

from wine_agent.config import COLUMN_OVERRIDES, PRICE_MISSING
from wine_agent.data.schemas import WINE_FIELDS, Wine

_PARENS_RE = re.compile(r"\(.*?\)")
_NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9\s]")
_CAMEL_RE = re.compile(r"[a-z][a-zA-Z0-9]*")


class SheetDataError(ValueError):
    """Raised when a sheet has no rows or no header row."""


# ---------------------------------------------------------------------------
# Header normalisation
# ---------------------------------------------------------------------------

def normalize_column_name(header: str) -> str:
    """Turn raw header text into a canonical camelCase field name.

    "Wine Name" -> "wineName", "Tasting Date (MM/DD/YY)" -> "tastingDate".
    A name that is already camelCase comes back unchanged.
    """
    if header in COLUMN_OVERRIDES:
        return COLUMN_OVERRIDES[header]

    cleaned = _NON_ALNUM_RE.sub("", _PARENS_RE.sub("", header)).strip()
    if _CAMEL_RE.fullmatch(cleaned):
        return cleaned

    words = cleaned.split()
    return "".join(
        word.lower() if i == 0 else word[0].upper() + word[1:].lower()
        for i, word in enumerate(words)
    )


def build_column_mapping(headers: Sequence[str]) -> dict[str, int]:
    """Canonical name → column index. A repeated name keeps its last column."""
    mapping: dict[str, int] = {}
    for index, header in enumerate(headers):
        mapping[normalize_column_name("" if header is None else str(header))] = index
    return mapping


# ---------------------------------------------------------------------------
# Row parsing
# ---------------------------------------------------------------------------

def _cell(row: Sequence, index: int | None) -> str:
    if index is None or index >= len(row) or row[index] is None:
        return ""
    return str(row[index])


def parse_wine_row(row: Sequence, mapping: dict[str, int]) -> Wine:
    """Build a Wine from one data row using the header mapping."""
    values = {attr: _cell(row, mapping.get(name)) for name, attr in WINE_FIELDS.items()}
    if not values["price"].strip():
        values["price"] = PRICE_MISSING
    return Wine(**values)


def _is_blank_row(row: Sequence | None) -> bool:
    return not row or not any(cell is not None and str(cell).strip() for cell in row)


def find_header_index(rows: Sequence[Sequence]) -> int:
    """Index of the first row with any non-blank cell."""
    for index, row in enumerate(rows):
        if not _is_blank_row(row):
            return index
    raise SheetDataError("No header row found in sheet")


def parse_rows(rows: Sequence[Sequence]) -> tuple[dict[str, int], list[Wine]]:
    """Header mapping + Wine list from raw sheet rows.

    Rows after the header are kept when they have at least one cell.
    """
    if not rows:
        raise SheetDataError("No data found in sheet")

    header_index = find_header_index(rows)
    mapping = build_column_mapping(rows[header_index])
    wines = [
        parse_wine_row(row, mapping)
        for row in rows[header_index + 1:]
        if row
    ]
    return mapping, wines
