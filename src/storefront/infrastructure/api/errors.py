"""Maps domain exceptions to HTTP responses.

Each error kind gets its own status so clients can tell bad input from a
missing entity from a sick or unreachable product directory.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storefront.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    StorageError,
    UnavailableError,
    UpstreamError,
    ValidationError,
)
from storefront.infrastructure.logging import get_logger

logger = get_logger(__name__)

STATUS_BY_ERROR: dict[type[DomainException], int] = {
    ValidationError: 400,
    EntityNotFoundError: 404,
    UpstreamError: 502,
    UnavailableError: 503,
    StorageError: 500,
}


def status_for(exc: DomainException) -> int:
    for cls in type(exc).__mro__:
        if cls in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[cls]
    return 500


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    status_code = status_for(exc)
    log = logger.error if status_code >= 500 else logger.info
    log(
        "request_failed",
        method=request.method,
        path=request.url.path,
        status_code=status_code,
        error=type(exc).__name__,
        detail=str(exc),
    )
    return JSONResponse(
        status_code=status_code,
        content={"error": type(exc).__name__, "detail": str(exc)},
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": "ValidationError", "detail": jsonable_encoder(exc.errors())},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
