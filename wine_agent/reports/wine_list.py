"""
Wine List Report — a search/filter result as JSON summary or styled Excel.
"""
from __future__ import annotations

from pathlib import Path

import pandas as pd

from wine_agent.config import PRICE_MISSING
from wine_agent.data.parsers import parse_price, parse_rating, parse_vintage
from wine_agent.data.schemas import Wine
from wine_agent.excel.writer import ExcelWriter


WINE_COLS = [
    ("brandName", "text", "Brand"),
    ("wineName", "text", "Wine"),
    ("vintage", "year", "Vintage"),
    ("price", "currency", "Price"),
    ("rating", "decimal", "Rating"),
    ("type", "text", "Type"),
    ("mainVarietal", "text", "Varietal"),
    ("region", "text", "Region"),
    ("ava", "text", "AVA"),
    ("review", "long_text", "Review"),
]


def _report_row(wine: Wine) -> dict:
    """Display row: numeric price/rating/vintage, None where the sheet has no value."""
    row = wine.to_dict()
    row["price"] = None if wine.price == PRICE_MISSING else parse_price(wine.price)
    row["rating"] = parse_rating(wine.rating)
    row["vintage"] = parse_vintage(wine.vintage) or None
    return row


def generate_json(wines: list[Wine], label: str = "All wines") -> dict:
    rows = [_report_row(w) for w in wines]
    df = pd.DataFrame(rows, columns=[key for key, _, _ in WINE_COLS])

    priced = df["price"].dropna() if not df.empty else pd.Series(dtype=float)
    rated = df["rating"][df["rating"] > 0] if not df.empty else pd.Series(dtype=float)

    return {
        "label": label,
        "count": len(rows),
        "avg_rating": round(float(rated.mean()), 2) if len(rated) else 0.0,
        "avg_price": round(float(priced.mean()), 2) if len(priced) else 0.0,
        "wines": rows,
    }


def generate_excel(wines: list[Wine], output_path: str | Path, label: str = "All wines") -> Path:
    data = generate_json(wines, label)
    ew = ExcelWriter()

    ws = ew.add_sheet("Wine List")
    ew.write_title(ws, "WINE LIST",
                   f"{data['label']}  |  Generated {pd.Timestamp.now():%B %d, %Y}",
                   merge_cols=len(WINE_COLS))

    row = ew.write_section(ws, 4, "SUMMARY")
    row = ew.write_kpi_row(ws, row, [
        (data["count"], "WINES", "number"),
        (data["avg_rating"], "AVG RATING", "decimal"),
        (data["avg_price"], "AVG PRICE", "currency"),
    ])

    row = ew.write_section(ws, row, "WINES")
    ew.write_table(
        ws, row, WINE_COLS, data["wines"],
        highlight_fn=lambda _, r: "gold" if r["rating"] >= 4.5 else None,
    )
    ws.column_dimensions["J"].width = 80

    return ew.save(output_path)
