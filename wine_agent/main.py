"""
Wine Agent — FastAPI app factory with startup data loading.
"""
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wine_agent import __version__
from wine_agent.data.sources import build_source
from wine_agent.data.store import WineStore
from wine_agent.api.dependencies import set_store
from wine_agent.api.router_meta import router as meta_router
from wine_agent.api.router_wines import router as wines_router
from wine_agent.api.router_chat import router as chat_router


def create_app(store: WineStore | None = None) -> FastAPI:
    """Build the app. Without a store, one is built from the environment at startup."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Load wine data at startup."""
        active = store
        if active is None:
            active = WineStore(build_source())
        if not active.is_loaded:
            active.refresh()
        set_store(active)
        print(f"\nWine Agent ready — {active.wine_count():,} wines, "
              f"{len(active.column_names())} columns\n")
        yield

    app = FastAPI(
        title="Wine Agent API",
        description="Wine review search — full-text search, filters, details, and chat",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(meta_router)
    app.include_router(wines_router)
    app.include_router(chat_router)

    return app


app = create_app()
