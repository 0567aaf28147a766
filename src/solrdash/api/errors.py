"""Exception handlers — Map dashboard and backend errors to JSON error bodies.

Every error response has the shape ``{"error": <code>, "detail": <message>}``:

| Exception | Status | ``error`` |
|-----------|--------|-----------|
| ``RequestValidationError`` | 400 | ``invalid_input`` |
| ``InvalidInputError`` / ``InvalidActionError`` | 400 | ``invalid_input`` / ``invalid_action`` |
| ``NotFoundError`` | 404 | ``not_found`` |
| ``BackendUnavailableError`` | 500 | ``backend_unavailable`` |
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from solrdash.adapters.base.exceptions import AdapterError
from solrdash.core.exceptions import DashboardError, InvalidInputError

logger = logging.getLogger(__name__)


class ErrorResponse(BaseModel):
    """Error body returned by every failing endpoint."""

    error: str = Field(description="Machine-readable error code")
    detail: str = Field(description="Human-readable explanation")


def _error(status_code: int, code: str, detail: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=code, detail=detail).model_dump())


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        msg = err.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request"


async def _validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    detail = _format_validation_errors(exc)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, detail)
    return _error(400, InvalidInputError.code, detail)


async def _dashboard_handler(request: Request, exc: DashboardError) -> JSONResponse:
    logger.info("%s %s failed: %s", request.method, request.url.path, exc)
    return _error(exc.status_code, exc.code, str(exc))


async def _adapter_handler(request: Request, exc: AdapterError) -> JSONResponse:
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return _error(500, exc.code, str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on ``app``."""
    app.add_exception_handler(RequestValidationError, _validation_handler)  # type: ignore[arg-type]
    app.add_exception_handler(DashboardError, _dashboard_handler)  # type: ignore[arg-type]
    app.add_exception_handler(AdapterError, _adapter_handler)  # type: ignore[arg-type]
