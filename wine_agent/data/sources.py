"""
Raw row sources: Google Sheets (service account) and local CSV exports.

A source only returns rows of cell text; header detection and Wine parsing
happen in normalize.py.
"""
from __future__ import annotations

import csv
from pathlib import Path

import pandas as pd

from wine_agent.config import (
    GOOGLE_SHEET_ID, GOOGLE_SHEET_NAME, GOOGLE_SHEET_RANGE,
    GOOGLE_CREDENTIALS_PATH, SHEETS_SCOPES, WINE_CSV_PATH,
)


class SheetsSource:
    """Reads a value range from a Google Sheet."""

    def __init__(
        self,
        spreadsheet_id: str,
        sheet_name: str = GOOGLE_SHEET_NAME,
        cell_range: str = GOOGLE_SHEET_RANGE,
        credentials_path: Path = GOOGLE_CREDENTIALS_PATH,
    ) -> None:
        self.spreadsheet_id = spreadsheet_id
        self.sheet_name = sheet_name
        self.cell_range = cell_range
        self.credentials_path = Path(credentials_path)
        self._service = None

    @property
    def label(self) -> str:
        return f"Google Sheet {self.spreadsheet_id} ({self.sheet_name}!{self.cell_range})"

    def _get_service(self):
        if self._service is None:
            from google.oauth2 import service_account
            from googleapiclient.discovery import build

            if not self.credentials_path.exists():
                raise FileNotFoundError(f"Missing service account credentials at: {self.credentials_path}")
            creds = service_account.Credentials.from_service_account_file(
                str(self.credentials_path), scopes=SHEETS_SCOPES
            )
            self._service = build("sheets", "v4", credentials=creds, cache_discovery=False)
        return self._service

    def fetch_rows(self) -> list[list[str]]:
        response = (
            self._get_service()
            .spreadsheets()
            .values()
            .get(spreadsheetId=self.spreadsheet_id, range=f"{self.sheet_name}!{self.cell_range}")
            .execute()
        )
        return response.get("values", [])


class CsvSource:
    """Reads every cell of a CSV export as text."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    @property
    def label(self) -> str:
        return f"CSV {self.path}"

    def fetch_rows(self) -> list[list[str]]:
        if not self.path.exists():
            raise FileNotFoundError(f"CSV not found: {self.path}")
        # pandas sizes columns from the first line unless given names
        width = _widest_row(self.path)
        if not width:
            return []
        df = pd.read_csv(
            self.path,
            header=None,
            names=list(range(width)),
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=False,
        )
        # short rows come back padded with NaN
        return [_trim_trailing(row) for row in df.fillna("").values.tolist()]


def _widest_row(path: Path) -> int:
    with open(path, newline="", encoding="utf-8") as f:
        return max((len(row) for row in csv.reader(f)), default=0)


def _trim_trailing(row: list[str]) -> list[str]:
    """Drop trailing blank cells, the way the Sheets API omits them."""
    end = len(row)
    while end and not str(row[end - 1]).strip():
        end -= 1
    return [str(cell) for cell in row[:end]]


def build_source() -> SheetsSource | CsvSource:
    """Source chosen from the environment: WINE_CSV_PATH, else GOOGLE_SHEET_ID."""
    if WINE_CSV_PATH:
        return CsvSource(WINE_CSV_PATH)
    if not GOOGLE_SHEET_ID:
        raise ValueError("GOOGLE_SHEET_ID environment variable is required (or set WINE_CSV_PATH)")
    return SheetsSource(GOOGLE_SHEET_ID)
