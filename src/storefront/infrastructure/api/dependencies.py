"""Request-scoped access to the collaborators an app was built with."""

from __future__ import annotations

from fastapi import Request

from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.product_lookup import ProductLookup


def get_product_repository(request: Request) -> ProductRepository:
    return request.app.state.product_repository


def get_order_repository(request: Request) -> OrderRepository:
    return request.app.state.order_repository


def get_product_lookup(request: Request) -> ProductLookup:
    return request.app.state.product_lookup
