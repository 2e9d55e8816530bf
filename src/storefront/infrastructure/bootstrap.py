"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.infrastructure.config import Settings
from storefront.infrastructure.http.product_client import HttpProductLookup
from storefront.infrastructure.persistence.database import Database
from storefront.infrastructure.persistence.records import OrderBase, ProductBase
from storefront.infrastructure.persistence.sql_order_repository import SqlOrderRepository
from storefront.infrastructure.persistence.sql_product_repository import (
    SqlProductRepository,
)


def product_database(settings: Settings | None = None) -> Database:
    settings = settings or Settings.from_env()
    database = Database(settings.product_database_url, ProductBase.metadata)
    database.create_all()
    return database


def order_database(settings: Settings | None = None) -> Database:
    settings = settings or Settings.from_env()
    database = Database(settings.order_database_url, OrderBase.metadata)
    database.create_all()
    return database


def product_repository(settings: Settings | None = None) -> SqlProductRepository:
    return SqlProductRepository(product_database(settings))


def order_repository(settings: Settings | None = None) -> SqlOrderRepository:
    return SqlOrderRepository(order_database(settings))


def product_lookup(settings: Settings | None = None) -> HttpProductLookup:
    settings = settings or Settings.from_env()
    return HttpProductLookup(
        settings.product_service_url,
        timeout=settings.product_lookup_timeout,
    )
