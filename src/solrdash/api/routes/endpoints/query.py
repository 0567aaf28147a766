"""Query and value-browsing endpoints.

``POST /query`` takes ``QueryParameters`` as a JSON body; ``GET /query``
reads the same parameters from the query string, with repeated keys for
``fq``, ``fl`` and ``facet.field``.  Both return Solr's response as-is:
sections Solr did not send are not added.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Query, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from solrdash.api.deps import get_service
from solrdash.api.errors import ErrorResponse
from solrdash.core.service import DashboardService
from solrdash.models.config import UniqueValues
from solrdash.models.query import QueryParameters, QueryResult

logger = logging.getLogger(__name__)

router = APIRouter()

_MULTI_VALUED = ("fq", "fl", "facet.field")
_SINGLE_VALUED = ("q", "sort", "start", "rows", "facet", "facet.limit", "facet.mincount", "wt")

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Invalid parameters (e.g. negative rows/start)"},
    500: {"model": ErrorResponse, "description": "Solr unreachable or returned an error"},
}


@router.post(
    "/query",
    response_model=QueryResult,
    response_model_exclude_unset=True,
    summary="Execute Query",
    description="Run a `/select` query. Unset parameters are not sent to Solr.",
    responses=_ERROR_RESPONSES,
)
async def post_query(
    params: QueryParameters,
    service: DashboardService = Depends(get_service),
) -> QueryResult:
    logger.debug("Query request: %s", params.model_dump(by_alias=True, exclude_none=True))
    return await service.execute_query(params)


@router.get(
    "/query",
    response_model=QueryResult,
    response_model_exclude_unset=True,
    summary="Execute Query (query string)",
    description="Same as `POST /query` with parameters taken from the URL.",
    responses=_ERROR_RESPONSES,
)
async def get_query(
    request: Request,
    service: DashboardService = Depends(get_service),
) -> QueryResult:
    params = parse_query_string(request)
    return await service.execute_query(params)


@router.get(
    "/values",
    response_model=UniqueValues,
    summary="Distinct Field Values",
    description=(
        "Facet on `field` (default: `SHOW_UNIQUE_VALUES`, then the hash field) and "
        "return its values with document counts, most frequent first."
    ),
    responses=_ERROR_RESPONSES,
)
async def unique_values(
    field: str | None = Query(default=None, description="Field to list values of"),
    limit: int = Query(default=100, ge=1, description="Maximum number of values"),
    mincount: int = Query(default=1, ge=0, description="Minimum document count per value"),
    service: DashboardService = Depends(get_service),
) -> UniqueValues:
    return await service.unique_values(field, limit=limit, mincount=mincount)


def parse_query_string(request: Request) -> QueryParameters:
    """Build ``QueryParameters`` from the request's query string.

    Raises:
        RequestValidationError: When a value has the wrong type or range.
    """
    qp = request.query_params
    raw: dict[str, Any] = {}
    for key in _SINGLE_VALUED:
        if key in qp:
            raw[key] = qp[key]
    for key in _MULTI_VALUED:
        values = qp.getlist(key)
        if values:
            raw[key] = values

    try:
        return QueryParameters.model_validate(raw)
    except ValidationError as e:
        raise RequestValidationError(e.errors()) from e
