"""Routing edge: forwards public paths to the service that owns them.

No business logic lives here. A route table maps a path prefix to an
upstream base URL and the first matching prefix wins.

Usage:
    uvicorn storefront.infrastructure.api.gateway:create_gateway_app --factory --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Mapping

import httpx
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from storefront.infrastructure.api.middleware import install_request_logging
from storefront.infrastructure.api.schemas import HealthResponse
from storefront.infrastructure.config import Settings
from storefront.infrastructure.logging import get_logger

logger = get_logger(__name__)

PROXY_TIMEOUT = 30.0
PROXY_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]

# Hop-by-hop headers (RFC 7230 section 6.1) plus the ones httpx recomputes.
EXCLUDED_HEADERS = frozenset(
    {
        "connection",
        "keep-alive",
        "proxy-authenticate",
        "proxy-authorization",
        "te",
        "trailer",
        "trailers",
        "transfer-encoding",
        "upgrade",
        "host",
        "content-length",
        "content-encoding",
    }
)


def resolve_upstream(routes: Mapping[str, str], path: str) -> str | None:
    """Return the upstream base URL for ``path``, or None."""
    for prefix, upstream in routes.items():
        if path == prefix or path.startswith(prefix.rstrip("/") + "/"):
            return upstream
    return None


def _forwardable(items) -> list[tuple[str, str]]:
    """Drop excluded headers, keeping repeated ones such as Set-Cookie."""
    return [(k, v) for k, v in items if k.lower() not in EXCLUDED_HEADERS]


def create_gateway_app(
    routes: Mapping[str, str] | None = None,
    client: httpx.AsyncClient | None = None,
) -> FastAPI:
    owns_client = client is None

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        if owns_client:
            await app.state.http_client.aclose()

    app = FastAPI(
        title="Storefront Gateway",
        description="Routing edge for the product and order services",
        lifespan=lifespan,
    )
    app.state.routes = dict(routes if routes is not None else Settings.from_env().gateway_routes)
    app.state.http_client = client or httpx.AsyncClient(timeout=PROXY_TIMEOUT)
    install_request_logging(app, "gateway")

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(service="gateway")

    @app.api_route("/{path:path}", methods=PROXY_METHODS)
    async def proxy(request: Request, path: str) -> Response:
        upstream = resolve_upstream(request.app.state.routes, request.url.path)
        if upstream is None:
            return JSONResponse(
                status_code=404,
                content={"error": "NotFound", "detail": f"No route for '{request.url.path}'"},
            )

        url = upstream.rstrip("/") + request.url.path
        if request.url.query:
            url = f"{url}?{request.url.query}"

        try:
            upstream_response = await request.app.state.http_client.request(
                request.method,
                url,
                headers=_forwardable(request.headers.items()),
                content=await request.body(),
            )
        except httpx.RequestError as exc:
            logger.error("upstream_unreachable", upstream=upstream, path=request.url.path, error=str(exc))
            return JSONResponse(
                status_code=503,
                content={"error": "UnavailableError", "detail": f"Upstream '{upstream}' is unavailable"},
            )

        response = Response(
            content=upstream_response.content,
            status_code=upstream_response.status_code,
        )
        for key, value in _forwardable(upstream_response.headers.multi_items()):
            response.headers.append(key, value)
        return response

    return app
