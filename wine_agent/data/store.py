"""
WineStore — in-memory wine snapshot, refreshed wholesale from a row source.

Queries read `store.wines()` without locking. refresh() builds a complete new
snapshot and then replaces a single reference, so a reader sees either the old
collection or the new one, never a mix. A failed refresh keeps the old one.
"""
from __future__ import annotations

import datetime as dt
import threading
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Protocol

from wine_agent.data.normalize import parse_rows
from wine_agent.data.schemas import Wine


class RowSource(Protocol):
    label: str

    def fetch_rows(self) -> list[list[str]]: ...


@dataclass(frozen=True)
class WineSnapshot:
    wines: tuple[Wine, ...] = ()
    column_mapping: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    loaded_at: Optional[dt.datetime] = None


class WineStore:
    """Holds the current WineSnapshot for all query operators."""

    def __init__(self, source: RowSource) -> None:
        self.source = source
        self._snapshot = WineSnapshot()
        self._refresh_lock = threading.Lock()

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def refresh(self) -> "WineStore":
        """Fetch all rows and install a new snapshot. Errors propagate."""
        with self._refresh_lock:
            print(f"Loading wine data from {self.source.label}...")
            try:
                rows = self.source.fetch_rows()
                mapping, wines = parse_rows(rows)
            except Exception as exc:
                print(f"  Error loading wine data: {exc}")
                raise

            self._snapshot = WineSnapshot(
                wines=tuple(wines),
                column_mapping=MappingProxyType(dict(mapping)),
                loaded_at=dt.datetime.now(),
            )
            print(f"  Loaded {len(wines):,} wines ({len(mapping)} columns)")
        return self

    @property
    def snapshot(self) -> WineSnapshot:
        return self._snapshot

    @property
    def is_loaded(self) -> bool:
        return self._snapshot.loaded_at is not None

    @property
    def loaded_at(self) -> Optional[dt.datetime]:
        return self._snapshot.loaded_at

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def wines(self) -> tuple[Wine, ...]:
        return self._snapshot.wines

    def wine_count(self) -> int:
        return len(self._snapshot.wines)

    def column_names(self) -> list[str]:
        """Canonical names of the columns in the current header, in order."""
        return list(self._snapshot.column_mapping.keys())

    def column_index(self, column_name: str) -> int:
        """Column index for a canonical name, -1 if the header lacks it."""
        return self._snapshot.column_mapping.get(column_name, -1)
