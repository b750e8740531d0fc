"""
Wine endpoints: combined search + filter, detail lookup.
"""
from __future__ import annotations

from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query, Request

from wine_agent.config import DEFAULT_LIMIT, WEB_DEFAULT_SORT, WEB_SCAN_LIMIT
from wine_agent.data.store import WineStore
from wine_agent.api.dependencies import get_store
from wine_agent.api.response_models import WineOut
from wine_agent.query.common import sort_wines
from wine_agent.query.details import get_wine_details
from wine_agent.query.filter import filter_wines
from wine_agent.query.search import search_wines

router = APIRouter(prefix="/api", tags=["wines"])

_RESERVED_PARAMS = {"q", "limit", "sort_by", "sort_order"}


@router.get("/search", response_model=list[WineOut])
def search(
    request: Request,
    q: Optional[str] = Query(None, description="Full-text search terms"),
    limit: int = Query(DEFAULT_LIMIT, ge=1),
    sort_by: str = Query(WEB_DEFAULT_SORT, description="Column to sort by"),
    sort_order: Literal["asc", "desc"] = Query("desc"),
    store: WineStore = Depends(get_store),
):
    """Search, then filter by any other query params (e.g. ?rating=>4&mainVarietal=Syrah)."""
    results = list(store.wines())

    if q and q.strip():
        results = search_wines(results, q, limit=WEB_SCAN_LIMIT)

    filters = {
        key: value
        for key, value in request.query_params.items()
        if key not in _RESERVED_PARAMS and value.strip()
    }
    if filters:
        results = filter_wines(results, filters, limit=WEB_SCAN_LIMIT)

    if sort_by:
        results = sort_wines(results, sort_by, sort_order)

    return [WineOut.from_wine(w) for w in results[:limit]]


@router.get("/wine/{name}", response_model=list[WineOut])
def wine_details(
    name: str,
    exact_match: bool = Query(False),
    store: WineStore = Depends(get_store),
):
    return [WineOut.from_wine(w) for w in get_wine_details(store.wines(), name, exact_match)]
