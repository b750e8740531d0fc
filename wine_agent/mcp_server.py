"""
MCP server exposing the wine query tools over stdio.

Run with:  python -m wine_agent.mcp_server   (or: wine-agent mcp)
"""
from __future__ import annotations

import sys
from contextlib import redirect_stdout
from typing import Any, Literal, Optional

from mcp.server.fastmcp import FastMCP

from wine_agent.agent.registry import execute_tool
from wine_agent.data.sources import build_source
from wine_agent.data.store import WineStore

mcp = FastMCP("wine-agent")

_store: WineStore | None = None


def _get_store() -> WineStore:
    global _store
    if _store is None:
        _store = WineStore(build_source()).refresh()
    return _store


def _call(name: str, args: dict) -> Any:
    """Run a registry tool, turning error payloads into MCP tool errors."""
    result = execute_tool(_get_store(), name, {k: v for k, v in args.items() if v is not None})
    if isinstance(result, dict) and "error" in result:
        raise ValueError(result["error"])
    return result


@mcp.tool()
def search_wines(
    query: str,
    limit: int = 20,
    sort_by: Optional[str] = None,
    sort_order: Literal["asc", "desc"] = "desc",
) -> list[dict]:
    """Search for wines using full-text search across wine names, brands, reviews,
    regions, AVAs, and varietals. Use this when searching for keywords or phrases
    in wine descriptions (e.g. "cherry oak", "Napa Valley")."""
    return _call("search_wines", {
        "query": query, "limit": limit, "sort_by": sort_by, "sort_order": sort_order,
    })


@mcp.tool()
def filter_wines(
    filters: dict[str, str],
    limit: int = 20,
    sort_by: Optional[str] = None,
    sort_order: Literal["asc", "desc"] = "desc",
) -> list[dict]:
    """Filter wines by specific criteria with operators, combined with AND logic.
    Keys: mainVarietal, type, region, ava, brandName, price, rating, vintage,
    publicationDate, tastingDate. Use ">90", "<50", ">=2012" style values for
    numeric/date fields; text fields match partially.
    Example: {"mainVarietal": "Pinot Noir", "rating": ">4", "price": "<40"}"""
    return _call("filter_wines", {
        "filters": filters, "limit": limit, "sort_by": sort_by, "sort_order": sort_order,
    })


@mcp.tool()
def get_wine_details(wine_name: str, exact_match: bool = False) -> list[dict]:
    """Get detailed information about a specific wine by name, including review,
    ratings, pricing, and links."""
    return _call("get_wine_details", {"wine_name": wine_name, "exact_match": exact_match})


@mcp.tool()
def list_columns() -> dict:
    """List all available column names in the wine database, for filtering and sorting."""
    return _call("list_columns", {})


def main() -> None:
    # stdout carries the MCP protocol; progress lines go to stderr
    print("Initializing Wine Agent MCP Server...", file=sys.stderr)
    with redirect_stdout(sys.stderr):
        _get_store()
    print("MCP Server running on stdio", file=sys.stderr)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
