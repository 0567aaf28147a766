"""Dashboard router — config, connection, query, delete, values and health endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from solrdash.api.routes.endpoints.connection import router as connection_router
from solrdash.api.routes.endpoints.delete import router as delete_router
from solrdash.api.routes.endpoints.health import router as health_router
from solrdash.api.routes.endpoints.query import router as query_router

router = APIRouter(tags=["solr"])
router.include_router(connection_router)
router.include_router(query_router)
router.include_router(delete_router)
router.include_router(health_router)
