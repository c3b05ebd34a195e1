"""Session Titles API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map SessionTitlesError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Registries initialized on startup via lifespan context manager

Run with: uvicorn session_titles.main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from session_titles.api.dependencies import init_registries
from session_titles.api.error_handlers import register_error_handlers
from session_titles.api.routes import chats, health, schedules, titles
from session_titles.config import get_settings
from session_titles.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_registries()
    logger.info("Session Titles API started")
    yield
    logger.info("Session Titles API shutting down")


app = FastAPI(
    title="Session Titles API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(titles.router)
app.include_router(chats.router)
app.include_router(schedules.router)

register_error_handlers(app)
