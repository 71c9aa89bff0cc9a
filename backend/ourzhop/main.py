"""Ourzhop API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery, ExMA anti-pattern)
    - Global error handlers map OurzhopError → {"status": "error", ...} JSON responses
    - CORS configured from settings (not hardcoded)
    - Database manager initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - run() wraps uvicorn so the service starts with `ourzhop` on settings.port
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ourzhop.api.error_handlers import register_error_handlers
from ourzhop.api.routes import health, stores
from ourzhop.config import get_settings
from ourzhop.infrastructure.database import close_db, init_db
from ourzhop.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Starting backend services...")
    yield
    await close_db()
    logger.info("Backend services shutting down")


app = FastAPI(
    title="Ourzhop Backend Services", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(stores.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
