"""Config and connection endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query

from solrdash.api.deps import get_service
from solrdash.api.errors import ErrorResponse
from solrdash.core.service import DashboardService
from solrdash.models.config import ConnectionProbe, PublicConfig

router = APIRouter()


@router.get(
    "/config",
    response_model=PublicConfig,
    summary="Connection Config",
    description="Solr URL, core name and the optional browsable field. Credentials are never returned.",
)
async def get_config(
    service: DashboardService = Depends(get_service),
) -> PublicConfig:
    return service.get_config()


@router.get(
    "/connection",
    response_model=None,
    summary="Connection Probe, Core Info and Schema",
    description=(
        "Dispatches on `action`:\n"
        "- `test` — `{\"connected\": bool}` from a zero-row query; never fails\n"
        "- `info` — Solr's `/admin/system` document\n"
        "- `schema` — the core's `/schema` document"
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Missing or unknown action"},
        500: {"model": ErrorResponse, "description": "Solr unreachable or returned an error"},
    },
)
async def connection(
    action: str | None = Query(default=None, description="One of: test, info, schema"),
    service: DashboardService = Depends(get_service),
) -> ConnectionProbe | dict[str, Any]:
    """Probe Solr or fetch its status/schema documents."""
    return await service.connection(action)
