"""
FastAPI dependencies — WineStore singleton, dropdown metadata cache.
"""
from __future__ import annotations

import threading

import pandas as pd
from fastapi import HTTPException

from wine_agent.data.schemas import Wine
from wine_agent.data.store import WineSnapshot, WineStore

# ---------------------------------------------------------------------------
# Global store singleton (set during startup)
# ---------------------------------------------------------------------------
_store: WineStore | None = None


def set_store(store: WineStore) -> None:
    global _store
    _store = store


def get_store() -> WineStore:
    if _store is None or not _store.is_loaded:
        raise HTTPException(503, "Data not loaded yet")
    return _store


def get_store_or_empty() -> WineStore:
    """Return the store even if it has no data (for health/reload endpoints)."""
    if _store is None:
        raise HTTPException(503, "Server not initialized yet")
    return _store


# ---------------------------------------------------------------------------
# Filter dropdown metadata
# ---------------------------------------------------------------------------

def _unique_sorted(values: list[str]) -> list[str]:
    """Trimmed, non-empty, de-duplicated values sorted case-insensitively."""
    s = pd.Series(values, dtype="object").str.strip()
    s = s[s != ""].drop_duplicates()
    return sorted(s.tolist(), key=str.casefold)


def dropdown_meta(wines: tuple[Wine, ...]) -> dict[str, list[str]]:
    return {
        "varietals": _unique_sorted([w.main_varietal for w in wines]),
        "regions": _unique_sorted([w.region for w in wines]),
        "types": _unique_sorted([w.type for w in wines]),
        "avaList": _unique_sorted([w.ava for w in wines]),
    }


class MetaCache:
    """Dropdown values computed once per store snapshot.

    A new snapshot (after refresh) invalidates the cached values.
    """

    def __init__(self) -> None:
        self._snapshot: WineSnapshot | None = None
        self._meta: dict[str, list[str]] | None = None
        self._lock = threading.Lock()

    def get(self, store: WineStore) -> dict[str, list[str]]:
        snapshot = store.snapshot
        with self._lock:
            if self._meta is None or self._snapshot is not snapshot:
                self._meta = dropdown_meta(snapshot.wines)
                self._snapshot = snapshot
            return self._meta


_meta_cache = MetaCache()


def get_meta_cache() -> MetaCache:
    return _meta_cache
