"""Mentorship Admin API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map MentorshipError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging and database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py to keep this module's imports small
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mentorship.api.error_handlers import register_error_handlers
from mentorship.api.routes import (
    dashboard, documents, health, inventory, invoices, mentees,
    receipts, reference, search, staff, therapy_notes,
)
from mentorship.config import get_settings
from mentorship.infrastructure import database
from mentorship.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(
        settings.log_level, settings.log_format,
        settings.log_dir, settings.log_retention_days,
    )
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Mentorship Admin API started")
    yield
    if database.db_manager:
        await database.db_manager.close()
    logger.info("Mentorship Admin API shutting down")


app = FastAPI(
    title="Mentorship Admin API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(reference.router)
app.include_router(mentees.router)
app.include_router(staff.router)
app.include_router(invoices.router)
app.include_router(receipts.router)
app.include_router(inventory.router)
app.include_router(documents.router)
app.include_router(therapy_notes.router)
app.include_router(search.router)
app.include_router(dashboard.router)

register_error_handlers(app)
