"""Health check endpoint — process liveness, without contacting Solr."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from solrdash import __version__
from solrdash.api.deps import get_service
from solrdash.core.service import DashboardService

router = APIRouter()


class HealthResponse(BaseModel):
    """System health check response."""

    status: str = Field(description="Health status (e.g. 'healthy')")
    version: str = Field(description="SolrDash server version")
    service: str = Field(description="Service name ('solrdash')")
    backend: str = Field(description="Name of the search backend")
    core: str = Field(description="Configured Solr core")


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="System Health Check",
    description="Reports that the API process is up. Use `/connection?action=test` to probe Solr.",
)
async def health_check(
    service: DashboardService = Depends(get_service),
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        service="solrdash",
        backend=service.backend.name,
        core=service.settings.solr.core,
    )
