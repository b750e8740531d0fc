#!/usr/bin/env python3
"""
Wine Agent CLI — search, filter, look up and export wines; run the API, MCP server or chat.

USAGE:
  python -m wine_agent.cli search "cherry oak"                      # Full-text search
  python -m wine_agent.cli search "napa" --sort-by rating --limit 5
  python -m wine_agent.cli filter --where mainVarietal="Pinot Noir" --where rating=">4"
  python -m wine_agent.cli details "Estate Pinot Noir" --exact      # Name lookup
  python -m wine_agent.cli columns                                  # Column names in the sheet

  python -m wine_agent.cli export --query "syrah" --output syrah.xlsx
  python -m wine_agent.cli export --where price="<30" --sort-by rating

  python -m wine_agent.cli serve --port 3001                        # Start API server
  python -m wine_agent.cli mcp                                      # MCP server on stdio
  python -m wine_agent.cli chat                                     # Interactive chat
"""
from __future__ import annotations

import argparse
import json
import os
from datetime import datetime

from wine_agent.config import DEFAULT_LIMIT, REPORTS_FOLDER, WEB_SCAN_LIMIT
from wine_agent.data.schemas import Wine
from wine_agent.data.sources import build_source
from wine_agent.data.store import WineStore
from wine_agent.query.common import sort_wines
from wine_agent.query.details import get_wine_details
from wine_agent.query.filter import filter_wines
from wine_agent.query.search import search_wines


def _load_store() -> WineStore:
    return WineStore(build_source()).refresh()


def parse_where(items: list[str] | None) -> dict[str, str]:
    """["rating=>4", "mainVarietal=Pinot Noir"] -> {"rating": ">4", "mainVarietal": "Pinot Noir"}."""
    filters: dict[str, str] = {}
    for item in items or []:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise argparse.ArgumentTypeError(f"Expected field=expression, got '{item}'")
        filters[key.strip()] = value
    return filters


def _print_wines(wines: list[Wine], as_json: bool = False) -> None:
    if as_json:
        print(json.dumps([w.to_dict() for w in wines], indent=2, ensure_ascii=False))
        return
    if not wines:
        print("\n  No wines found.\n")
        return
    print(f"\nWINES ({len(wines)}):\n")
    for i, w in enumerate(wines, 1):
        name = f"{w.brand_name} {w.wine_name}".strip()
        print(f"{i:<4}{name[:44]:<46}{w.vintage[:6]:<8}{w.price[:9]:>9}  {w.rating}")
    print()


def _query(store: WineStore, args, limit: int) -> list[Wine]:
    """Search and/or filter as requested by the shared --query/--where/--sort-by args."""
    results = list(store.wines())
    if getattr(args, "query", None):
        results = search_wines(results, args.query, limit=WEB_SCAN_LIMIT)
    filters = parse_where(getattr(args, "where", None))
    if filters:
        results = filter_wines(results, filters, limit=WEB_SCAN_LIMIT)
    if args.sort_by:
        results = sort_wines(results, args.sort_by, args.sort_order)
    return results[:limit]


def cmd_search(args):
    """Full-text search."""
    store = _load_store()
    results = search_wines(store.wines(), args.query, args.limit, args.sort_by, args.sort_order)
    _print_wines(results, args.json)


def cmd_filter(args):
    """Filter by field expressions."""
    store = _load_store()
    results = filter_wines(store.wines(), parse_where(args.where), args.limit, args.sort_by, args.sort_order)
    _print_wines(results, args.json)


def cmd_details(args):
    """Look up wines by name."""
    store = _load_store()
    results = get_wine_details(store.wines(), args.name, args.exact)
    if args.json:
        _print_wines(results, as_json=True)
        return
    if not results:
        print(f"\n  No wine matching '{args.name}'\n")
        return
    for w in results:
        print("\n" + "=" * 70)
        for field_name, value in w.to_dict().items():
            if value:
                print(f"  {field_name:<18}{value}")
    print("=" * 70 + "\n")


def cmd_columns(args):
    """List column names from the sheet header."""
    store = _load_store()
    print(f"\nCOLUMNS ({len(store.column_names())}):\n")
    for name in store.column_names():
        print(f"  {store.column_index(name):<4}{name}")
    print()


def cmd_export(args):
    """Export a search/filter result to an Excel wine list."""
    from wine_agent.reports.wine_list import generate_excel

    print("\n" + "=" * 70)
    print("  WINE AGENT — WINE LIST EXPORT")
    print("=" * 70)

    store = _load_store()
    results = _query(store, args, args.limit)

    parts = []
    if args.query:
        parts.append(f'"{args.query}"')
    parts.extend(f"{k} {v}" for k, v in parse_where(args.where).items())
    label = ", ".join(parts) or "All wines"

    if args.output:
        out = args.output
    else:
        out = REPORTS_FOLDER / f"Wine_List_{datetime.now():%Y%m%d_%H%M%S}.xlsx"
    path = generate_excel(results, out, label)
    print(f"\n  {len(results):,} wines  |  {label}")
    print(f"  Saved to: {path}\n")


def cmd_serve(args):
    """Start the API server."""
    import uvicorn
    print(f"\nStarting Wine Agent API on port {args.port}...")
    uvicorn.run("wine_agent.main:app", host="0.0.0.0", port=args.port, reload=args.reload,
                timeout_keep_alive=65)


def cmd_mcp(args):
    """Run the MCP server on stdio."""
    from wine_agent.mcp_server import main as mcp_main
    mcp_main()


def cmd_chat(args):
    """Interactive chat with the wine agent."""
    from wine_agent.agent.chat import WineChatAgent

    agent = WineChatAgent(_load_store())
    history: list[dict] = []
    print("\nAsk about wines (blank line or Ctrl-D to quit).\n")
    while True:
        try:
            text = input("you> ").strip()
        except EOFError:
            break
        if not text:
            break
        history.append({"role": "user", "content": text})
        answer = agent.chat(history)
        history.append({"role": "assistant", "content": answer})
        print(f"\nsommelier> {answer}\n")


def _add_sort_args(p: argparse.ArgumentParser, limit: int = DEFAULT_LIMIT) -> None:
    p.add_argument("--limit", type=int, default=limit, help=f"Max results (default {limit})")
    p.add_argument("--sort-by", dest="sort_by", help="Column to sort by (e.g. rating, price, vintage)")
    p.add_argument("--sort-order", dest="sort_order", choices=["asc", "desc"], default="desc")


def main():
    parser = argparse.ArgumentParser(
        description="Wine Agent — wine review search and chat",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    # search subcommand
    search_parser = subparsers.add_parser("search", help="Full-text search")
    search_parser.add_argument("query", nargs="?", default="", help="Search terms")
    _add_sort_args(search_parser)
    search_parser.add_argument("--json", action="store_true", help="Print JSON")
    search_parser.set_defaults(func=cmd_search)

    # filter subcommand
    filter_parser = subparsers.add_parser("filter", help="Filter by field expressions")
    filter_parser.add_argument("--where", action="append", metavar="FIELD=EXPR",
                               help='Filter, e.g. rating=">4" (repeatable, AND)')
    _add_sort_args(filter_parser)
    filter_parser.add_argument("--json", action="store_true", help="Print JSON")
    filter_parser.set_defaults(func=cmd_filter)

    # details subcommand
    details_parser = subparsers.add_parser("details", help="Look up a wine by name")
    details_parser.add_argument("name", help="Wine name, or brand + wine name")
    details_parser.add_argument("--exact", action="store_true", help="Require an exact name match")
    details_parser.add_argument("--json", action="store_true", help="Print JSON")
    details_parser.set_defaults(func=cmd_details)

    # columns subcommand
    columns_parser = subparsers.add_parser("columns", help="List sheet columns")
    columns_parser.set_defaults(func=cmd_columns)

    # export subcommand
    export_parser = subparsers.add_parser("export", help="Export results to Excel")
    export_parser.add_argument("--query", default="", help="Search terms")
    export_parser.add_argument("--where", action="append", metavar="FIELD=EXPR", help="Filter (repeatable)")
    export_parser.add_argument("--output", help="Output .xlsx path (default: reports folder)")
    _add_sort_args(export_parser, limit=WEB_SCAN_LIMIT)
    export_parser.set_defaults(func=cmd_export)

    # serve subcommand
    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "3001")), help="Port (default 3001)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    # mcp subcommand
    mcp_parser = subparsers.add_parser("mcp", help="Run MCP server on stdio")
    mcp_parser.set_defaults(func=cmd_mcp)

    # chat subcommand
    chat_parser = subparsers.add_parser("chat", help="Interactive chat with the wine agent")
    chat_parser.set_defaults(func=cmd_chat)

    args = parser.parse_args()
    if not args.command:
        parser.print_help()
        return

    try:
        args.func(args)
    except argparse.ArgumentTypeError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
