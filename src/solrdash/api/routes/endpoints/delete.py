"""Delete endpoint — remove one document by id or all documents with a hash value."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from solrdash.api.deps import get_service
from solrdash.api.errors import ErrorResponse
from solrdash.core.service import DashboardService
from solrdash.models.delete import DeleteRequest, DeleteResult

router = APIRouter()


@router.post(
    "/delete",
    response_model=DeleteResult,
    response_model_exclude_none=True,
    summary="Delete Documents",
    description=(
        "Body: exactly one of `id` or `hash`.\n\n"
        "The target is looked up first; if nothing matches the endpoint answers 404 "
        "and nothing is deleted.  For `hash`, `deletedCount` is the number of matches "
        "seen just before the delete."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Neither or both of id/hash, or not a string"},
        404: {"model": ErrorResponse, "description": "No matching documents"},
        500: {"model": ErrorResponse, "description": "Solr unreachable or returned an error"},
    },
)
async def delete_documents(
    request: DeleteRequest,
    service: DashboardService = Depends(get_service),
) -> DeleteResult:
    return await service.delete_documents(request)
