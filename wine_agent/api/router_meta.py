"""
Meta endpoints: health, columns, dropdown metadata, reload.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from wine_agent.data.store import WineStore
from wine_agent.api.dependencies import MetaCache, get_meta_cache, get_store, get_store_or_empty
from wine_agent.api.response_models import (
    ColumnsResponse, HealthResponse, MetaResponse, ReloadResponse,
)

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
def health(store: WineStore = Depends(get_store_or_empty)):
    return HealthResponse(
        status="ok" if store.is_loaded else "loading",
        wines=store.wine_count(),
        columns=len(store.column_names()),
        loaded_at=store.loaded_at.isoformat() if store.loaded_at else None,
    )


@router.get("/columns", response_model=ColumnsResponse)
def list_columns(store: WineStore = Depends(get_store)):
    return ColumnsResponse(columns=store.column_names())


@router.get("/meta", response_model=MetaResponse)
def filter_meta(
    store: WineStore = Depends(get_store),
    cache: MetaCache = Depends(get_meta_cache),
):
    """Dropdown values for the filter panel."""
    return MetaResponse(**cache.get(store))


@router.post("/reload", response_model=ReloadResponse)
def reload_data(store: WineStore = Depends(get_store_or_empty)):
    """Re-fetch the sheet. On failure the previous data stays in place."""
    try:
        store.refresh()
    except Exception as exc:
        raise HTTPException(502, f"Reload failed: {exc}")
    return ReloadResponse(status="reloaded", wines=store.wine_count())
