"""
WineStore refresh/snapshot behaviour and the CSV / Sheets row sources.
"""
import csv
import threading
import time

import pytest

from wine_agent.api.dependencies import MetaCache, dropdown_meta
from wine_agent.data import sources
from wine_agent.data.normalize import SheetDataError
from wine_agent.data.sources import CsvSource, SheetsSource, build_source
from wine_agent.data.store import WineStore


def test_store_starts_empty(make_source):
    store = WineStore(make_source([]))
    assert not store.is_loaded
    assert store.loaded_at is None
    assert store.wines() == ()
    assert store.wine_count() == 0
    assert store.column_names() == []


def test_refresh_loads_wines_and_columns(store):
    assert store.is_loaded
    assert store.wine_count() == 5
    assert store.column_names()[:3] == ["id", "brandName", "wineName"]
    assert store.column_index("price") == 5
    assert store.column_index("hyperlink") == 16
    assert store.column_index("colour") == -1


def test_refresh_replaces_the_snapshot(sheet_rows, make_source):
    smaller = sheet_rows[:2]
    source = make_source(sheet_rows, smaller)
    store = WineStore(source).refresh()
    first = store.snapshot
    held = store.wines()

    store.refresh()
    assert store.snapshot is not first
    assert store.wine_count() == 1
    # a reader holding the old collection still sees all of it
    assert len(held) == 5
    assert source.calls == 2


def test_failed_refresh_keeps_previous_snapshot(sheet_rows, make_source, capsys):
    source = make_source(sheet_rows, RuntimeError("quota exceeded"))
    store = WineStore(source).refresh()
    before = store.snapshot

    with pytest.raises(RuntimeError, match="quota exceeded"):
        store.refresh()

    assert store.snapshot is before
    assert store.wine_count() == 5
    assert "Error loading wine data: quota exceeded" in capsys.readouterr().out


def test_refresh_with_empty_sheet_raises(make_source):
    store = WineStore(make_source([]))
    with pytest.raises(SheetDataError, match="No data found"):
        store.refresh()
    assert not store.is_loaded


def test_refresh_logs_progress(sheet_rows, make_source, capsys):
    WineStore(make_source(sheet_rows)).refresh()
    out = capsys.readouterr().out
    assert "Loading wine data from stub sheet..." in out
    assert "Loaded 5 wines (17 columns)" in out


class GatedSource:
    """First fetch blocks until released; later fetches record the store size they see."""

    label = "gated sheet"

    def __init__(self, first, second):
        self.first, self.second = first, second
        self.started = threading.Event()
        self.release = threading.Event()
        self.seen = []
        self.calls = 0
        self.store = None

    def fetch_rows(self):
        self.calls += 1
        if self.calls == 1:
            self.started.set()
            self.release.wait(5)
            return self.first
        self.seen.append(self.store.wine_count())
        return self.second


def test_concurrent_refreshes_are_serialized(sheet_rows):
    source = GatedSource(sheet_rows[:2], sheet_rows)
    store = source.store = WineStore(source)

    first = threading.Thread(target=store.refresh)
    first.start()
    assert source.started.wait(5)

    second = threading.Thread(target=store.refresh)
    second.start()
    time.sleep(0.1)
    assert source.calls == 1

    source.release.set()
    first.join(5)
    second.join(5)

    # the second fetch only ran after the first snapshot was installed
    assert source.seen == [1]
    assert store.wine_count() == 5


# ---------------------------------------------------------------------------
# Dropdown metadata
# ---------------------------------------------------------------------------

def test_dropdown_meta(wines):
    meta = dropdown_meta(wines)
    assert meta["varietals"] == ["Cabernet Sauvignon", "Chardonnay", "Grenache", "Pinot Noir"]
    assert meta["types"] == ["Red", "Rosé", "White"]
    assert meta["regions"] == ["California", "Oregon", "Washington"]
    assert meta["avaList"] == [
        "Columbia Valley", "Dundee Hills", "Russian River Valley", "Willamette Valley",
    ]


def test_meta_cache_recomputes_after_refresh(sheet_rows, make_source):
    only_white = [sheet_rows[0], sheet_rows[3]]
    store = WineStore(make_source(sheet_rows, only_white)).refresh()
    cache = MetaCache()

    first = cache.get(store)
    assert cache.get(store) is first

    store.refresh()
    assert cache.get(store)["types"] == ["White"]


# ---------------------------------------------------------------------------
# Sources
# ---------------------------------------------------------------------------

def _write_csv(path, rows):
    with open(path, "w", newline="", encoding="utf-8") as f:
        csv.writer(f).writerows(rows)


def test_csv_source_reads_text_cells(tmp_path, sheet_rows):
    path = tmp_path / "wines.csv"
    _write_csv(path, sheet_rows)

    rows = CsvSource(path).fetch_rows()
    assert rows[0] == sheet_rows[0]
    assert rows[1][5] == "$45.99"
    # vintage stays text, short rows are not padded
    assert rows[5][4] == "NV"
    assert rows[5] == sheet_rows[5]


def test_csv_source_feeds_the_store(tmp_path, sheet_rows):
    path = tmp_path / "wines.csv"
    _write_csv(path, sheet_rows)

    store = WineStore(CsvSource(path)).refresh()
    assert store.wine_count() == 5
    assert store.wines()[3].price == "N/A"
    assert store.wines()[4].tasting_date == ""


def test_csv_source_uneven_rows(tmp_path):
    path = tmp_path / "notes.csv"
    path.write_text("ID,Wine Name\n1,Alpha,extra note\n2\n\n3,Gamma\n", encoding="utf-8")

    rows = CsvSource(path).fetch_rows()
    assert rows == [["ID", "Wine Name"], ["1", "Alpha", "extra note"], ["2"], [], ["3", "Gamma"]]

    store = WineStore(CsvSource(path)).refresh()
    assert [w.wine_name for w in store.wines()] == ["Alpha", "", "Gamma"]


def test_csv_source_empty_file(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("")
    assert CsvSource(path).fetch_rows() == []


def test_csv_source_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        CsvSource(tmp_path / "nope.csv").fetch_rows()


def test_sheets_source_missing_credentials(tmp_path):
    source = SheetsSource("sheet-123", credentials_path=tmp_path / "missing.json")
    assert source.label == "Google Sheet sheet-123 (Sheet1!A:Q)"
    with pytest.raises(FileNotFoundError, match="service account"):
        source.fetch_rows()


def test_build_source_prefers_csv(monkeypatch, tmp_path):
    monkeypatch.setattr(sources, "WINE_CSV_PATH", str(tmp_path / "w.csv"))
    monkeypatch.setattr(sources, "GOOGLE_SHEET_ID", "sheet-123")
    assert isinstance(build_source(), CsvSource)


def test_build_source_uses_sheet(monkeypatch):
    monkeypatch.setattr(sources, "WINE_CSV_PATH", "")
    monkeypatch.setattr(sources, "GOOGLE_SHEET_ID", "sheet-123")
    source = build_source()
    assert isinstance(source, SheetsSource)
    assert source.spreadsheet_id == "sheet-123"


def test_build_source_requires_configuration(monkeypatch):
    monkeypatch.setattr(sources, "WINE_CSV_PATH", "")
    monkeypatch.setattr(sources, "GOOGLE_SHEET_ID", "")
    with pytest.raises(ValueError, match="GOOGLE_SHEET_ID"):
        build_source()
