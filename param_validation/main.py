"""Param Validation Demo — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map service and framework errors → plain-text responses
    - CORS configured from settings (not hardcoded)
    - Worker pool started on startup and closed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - run() hands uvicorn an import string; log_config=None keeps setup_logging
      as the only logging configuration
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from param_validation.api.error_handlers import register_error_handlers
from param_validation.api.routes import health, validation_demo
from param_validation.config import get_settings
from param_validation.infrastructure.observability import setup_logging
from param_validation.infrastructure.worker_pool import (
    close_worker_pool,
    init_worker_pool,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_worker_pool(settings.worker_pool_size)
    logger.info("Param validation demo started")
    yield
    close_worker_pool()
    logger.info("Param validation demo shutting down")


app = FastAPI(
    title="Param Validation Demo", version="0.1.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(validation_demo.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(
        "param_validation.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
