"""HTTP middleware shared by every storefront app."""

from __future__ import annotations

import time
import uuid

from fastapi import FastAPI, Request

from storefront.infrastructure.logging import add_context, clear_context, get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def install_request_logging(app: FastAPI, service: str) -> None:
    """Bind a request id to the log context and log one line per request."""

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        clear_context()
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        add_context(service=service, request_id=request_id)

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("request_crashed", method=request.method, path=request.url.path)
            raise
        finally:
            elapsed_ms = round((time.perf_counter() - started) * 1000, 2)

        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=elapsed_ms,
        )
        return response
