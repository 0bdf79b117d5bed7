"""FastAPI application entrypoint."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tradezone.api.routes import api_router
from tradezone.config import get_settings
from tradezone.core.logging import setup_logging
from tradezone.core.telemetry import setup_telemetry
from tradezone.db.session import Database
from tradezone.services.record_store import SqlRecordSource
from tradezone.services.records import RecordSource

logger = logging.getLogger(__name__)


def create_app(database: Database | None = None, record_source: RecordSource | None = None) -> FastAPI:
    """Build the API around a ledger database, or around any record source."""

    settings = get_settings()
    setup_logging()
    db = database if database is not None or record_source is not None else Database()

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        if db is not None:
            await db.create_all()
        logger.info("TradeZone configuration", extra={"settings": settings.dict_for_logging()})
        yield
        if db is not None:
            await db.dispose()

    app = FastAPI(title=settings.app_name, version="0.1.0", lifespan=_lifespan)
    app.state.record_source = record_source if record_source is not None else SqlRecordSource(db)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    setup_telemetry(app, settings, engine=db.engine if db is not None else None)

    @app.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        return {
            "status": "ok",
            "timestamp": datetime.now().isoformat(),
            "base_currency": settings.base_currency,
        }

    app.include_router(api_router, prefix=settings.api_prefix)
    return app


__all__ = ["create_app"]
