"""
Maps tool names (declared in agent/specs.py) to Python callables over the WineStore.
This is what the chat agent and the MCP server use to execute a tool call.
"""
from __future__ import annotations

from typing import Any, Callable

from pydantic import ValidationError

from wine_agent.data.store import WineStore
from wine_agent.query.details import get_wine_details
from wine_agent.query.filter import filter_wines
from wine_agent.query.params import DetailsParams, FilterParams, SearchParams
from wine_agent.query.search import search_wines
from wine_agent.agent.specs import (
    SEARCH_WINES_SPEC,
    FILTER_WINES_SPEC,
    GET_WINE_DETAILS_SPEC,
    LIST_COLUMNS_SPEC,
)


def _search(store: WineStore, args: dict) -> list[dict]:
    params = SearchParams(**args)
    return [w.to_dict() for w in search_wines(store.wines(), **params.model_dump())]


def _filter(store: WineStore, args: dict) -> list[dict]:
    params = FilterParams(**args)
    return [w.to_dict() for w in filter_wines(store.wines(), **params.model_dump())]


def _details(store: WineStore, args: dict) -> list[dict]:
    params = DetailsParams(**args)
    return [w.to_dict() for w in get_wine_details(store.wines(), **params.model_dump())]


def _list_columns(store: WineStore, args: dict) -> dict:
    return {
        "columns": store.column_names(),
        "description": "Available columns for filtering and sorting",
    }


# ---------------------------------------------------------------------
# EXECUTION REGISTRY (actual Python callables)
# ---------------------------------------------------------------------
TOOL_REGISTRY: dict[str, Callable[[WineStore, dict], Any]] = {
    "search_wines": _search,
    "filter_wines": _filter,
    "get_wine_details": _details,
    "list_columns": _list_columns,
}

# ---------------------------------------------------------------------
# SCHEMA REGISTRY (for the Anthropic messages API)
# ---------------------------------------------------------------------
TOOLS_SPECS = [
    SEARCH_WINES_SPEC,
    FILTER_WINES_SPEC,
    GET_WINE_DETAILS_SPEC,
    LIST_COLUMNS_SPEC,
]


def execute_tool(store: WineStore, name: str, args: dict | None) -> Any:
    """Run a registered tool. Bad arguments or unknown names come back as {"error": ...}."""
    fn = TOOL_REGISTRY.get(name)
    if fn is None:
        return {"error": f"Unknown tool: {name}"}
    try:
        return fn(store, args or {})
    except ValidationError as exc:
        return {"error": f"Invalid arguments for {name}: {exc.errors(include_url=False)}"}
