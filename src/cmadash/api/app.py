"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from cmadash.api.routes import admin, comparison, dashboard, goals, health
from cmadash.core.config import AppSettings
from cmadash.core.log import configure_logging
from cmadash.core.protocols import ISheetFetcher
from cmadash.persistence import create_persistence
from cmadash.persistence.gateway import PersistenceGateway
from cmadash.services.sheet_fetcher import SheetFetcher


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize and tear down application resources.

    Anything already placed on ``app.state`` by ``create_app`` is kept.
    """
    settings = getattr(app.state, "settings", None) or AppSettings()
    configure_logging(settings.log_level)
    app.state.settings = settings

    if getattr(app.state, "gateway", None) is None:
        app.state.gateway = create_persistence(settings)

    owned_fetcher = None
    if getattr(app.state, "fetcher", None) is None:
        owned_fetcher = SheetFetcher(settings.sheets)
        app.state.fetcher = owned_fetcher
    yield
    if owned_fetcher is not None:
        owned_fetcher.close()


def create_app(
    settings: AppSettings | None = None,
    gateway: PersistenceGateway | None = None,
    fetcher: ISheetFetcher | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="CMA Agency Dashboard",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.gateway = gateway
    app.state.fetcher = fetcher

    app.include_router(health.router)
    app.include_router(dashboard.router, prefix="/dashboard")
    app.include_router(comparison.router, prefix="/comparison")
    app.include_router(goals.router, prefix="/goals")
    app.include_router(admin.router, prefix="/admin")
    return app
