"""Motivation API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map MotivationError → structured JSON responses
    - CORS configured from settings, GET only
    - Static files mounted AFTER API routes so /api/* takes precedence
    - One httpx.AsyncClient per process, opened and closed by the lifespan
    - QuoteRequestConfig built once in create_app; invalid settings fail at startup
"""

import logging
import os
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from motivation_api import __version__
from motivation_api.api.error_handlers import register_error_handlers
from motivation_api.api.routes import health, motivation
from motivation_api.config import Settings, get_settings
from motivation_api.infrastructure.gemini_client import ResilientGeminiClient
from motivation_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not set; every quote request will fail")
    async with httpx.AsyncClient() as http_client:
        app.state.gemini_client = ResilientGeminiClient(http_client)
        logger.info(f"Server running on http://localhost:{settings.port}")
        yield
    logger.info("Motivation API shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title="Motivation API", version=__version__, lifespan=lifespan,
    )
    app.state.settings = settings
    # Raises ConfigurationError here, before the app serves anything
    app.state.quote_config = settings.quote_request_config()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
    )

    app.include_router(health.router)
    app.include_router(motivation.router)

    if settings.serve_static:
        _mount_static(app, settings.static_dir)

    register_error_handlers(app)
    return app


def _mount_static(app: FastAPI, directory: str) -> None:
    """Serve index.html and assets at / (SPA-style html=True)."""
    if not os.path.isdir(directory):
        logger.warning(
            f"SERVE_STATIC is enabled but '{directory}' is not a directory",
        )
        return
    app.mount("/", StaticFiles(directory=directory, html=True), name="static")


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn on HOST:PORT."""
    settings = get_settings()
    uvicorn.run(
        "motivation_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
