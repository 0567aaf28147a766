"""FastAPI application factory and lifecycle management."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from solrdash import __version__
from solrdash.api.deps import set_service
from solrdash.api.errors import register_exception_handlers
from solrdash.api.routes.router import router as solr_router
from solrdash.config.settings import Settings, load_settings
from solrdash.core.service import DashboardService
from solrdash.observability.logging import setup_logging

API_PREFIX = "/api/solr"

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings. If None, loads from environment.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = load_settings()

    setup_logging(settings.observability)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Manage application lifecycle (startup/shutdown)."""
        logger.info("Starting SolrDash v%s", __version__)

        service = DashboardService(settings)
        await service.initialize()
        set_service(service)

        app.state.settings = settings
        app.state.service = service

        logger.info(
            "SolrDash is ready on port %d (core '%s' at %s)",
            settings.server.port,
            settings.solr.core,
            settings.solr.url,
        )
        yield

        logger.info("Shutting down SolrDash...")
        await service.shutdown()
        set_service(None)
        logger.info("SolrDash shutdown complete")

    app = FastAPI(
        title="SolrDash",
        description=(
            "Administrative API for a Solr core — ad-hoc queries with filters, facets "
            "and pagination, distinct-value browsing, and deletion by id or hash."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(solr_router, prefix=API_PREFIX)

    return app
