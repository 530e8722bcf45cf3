"""SpectroSPC FastAPI Application."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from spectrospc.api.v1.chart import router as chart_router
from spectrospc.api.v1.readings import router as readings_router
from spectrospc.api.v1.suggestions import router as suggestions_router
from spectrospc.core.config import get_settings
from spectrospc.core.logging import configure_logging
from spectrospc.core.session import MonitoringSession
from spectrospc.suggestions.client import SuggestionClient

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    settings = get_settings()
    configure_logging(settings.log_format, settings.log_level)

    logger.info("Starting SpectroSPC application", version=settings.app_version)

    app.state.session = MonitoringSession()
    app.state.suggestion_client = SuggestionClient.from_settings(settings)
    if not app.state.suggestion_client.enabled:
        logger.info("Suggestion service disabled (SPECTROSPC_SUGGESTION_URL not set)")

    yield

    logger.info("Shutting down SpectroSPC application")
    await app.state.suggestion_client.aclose()


def create_app() -> FastAPI:
    """Build the FastAPI application with middleware and routers."""
    settings = get_settings()

    app = FastAPI(
        title="SpectroSPC",
        description="I-MR Statistical Process Control for spectrophotometer readings",
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(readings_router)
    app.include_router(chart_router)
    app.include_router(suggestions_router)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint."""
        return {
            "name": "SpectroSPC",
            "version": settings.app_version,
            "docs": "/docs",
        }

    return app


app = create_app()


def run() -> None:
    """Run the API with uvicorn (console entry point)."""
    import uvicorn

    uvicorn.run("spectrospc.main:app", host="0.0.0.0", port=8000)
