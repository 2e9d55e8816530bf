"""FastAPI application factories for the product and order services.

Usage:
    uvicorn storefront.infrastructure.api.app:create_product_app --factory --port 8081
    uvicorn storefront.infrastructure.api.app:create_order_app --factory --port 8082
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.product_lookup import ProductLookup
from storefront.infrastructure import bootstrap
from storefront.infrastructure.api.errors import register_exception_handlers
from storefront.infrastructure.api.middleware import install_request_logging
from storefront.infrastructure.api.order_routes import order_router
from storefront.infrastructure.api.product_routes import product_router
from storefront.infrastructure.api.schemas import HealthResponse


def _base_app(title: str, description: str, service: str) -> FastAPI:
    app = FastAPI(title=title, description=description)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_request_logging(app, service)
    register_exception_handlers(app)

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(service=service)

    return app


def create_product_app(product_repo: ProductRepository | None = None) -> FastAPI:
    app = _base_app(
        title="Storefront Product Service",
        description="Product directory: catalogue CRUD and name search",
        service="product-service",
    )
    app.state.product_repository = (
        product_repo if product_repo is not None else bootstrap.product_repository()
    )
    app.include_router(product_router)
    return app


def create_order_app(
    order_repo: OrderRepository | None = None,
    product_lookup: ProductLookup | None = None,
) -> FastAPI:
    """Order ledger app.

    When no lookup is given, products are resolved over HTTP against
    ``PRODUCT_SERVICE_URL``.
    """
    app = _base_app(
        title="Storefront Order Service",
        description="Order ledger: order assembly against the product directory",
        service="order-service",
    )
    app.state.order_repository = (
        order_repo if order_repo is not None else bootstrap.order_repository()
    )
    app.state.product_lookup = (
        product_lookup if product_lookup is not None else bootstrap.product_lookup()
    )
    app.include_router(order_router)
    return app
