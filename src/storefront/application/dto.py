"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the HTTP/CLI adapters and the application layer
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from storefront.domain.model.order import Order
from storefront.domain.model.product import Product


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for (product ID + quantity)."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class OrderItemDTO:
    id: str
    product_id: str
    quantity: int
    price: float  # major units, e.g. 14.99
    price_minor: int


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order with its price-locked items."""

    id: str
    delivery_address: str
    created_at: datetime
    items: list[OrderItemDTO]
    total_minor: int


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    description: str | None
    price: float
    price_minor: int
    categories: list[str]
    created_at: datetime | None


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        delivery_address=order.delivery_address,
        created_at=order.created_at,  # type: ignore[arg-type]
        items=[
            OrderItemDTO(
                id=item.id,  # type: ignore[arg-type]
                product_id=item.product_id,
                quantity=item.quantity.value,
                price=item.price_major,
                price_minor=item.price,
            )
            for item in order.order_items
        ],
        total_minor=order.total,
    )


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,  # type: ignore[arg-type]
        name=product.name,
        description=product.description,
        price=product.price_major,
        price_minor=product.price,
        categories=list(product.categories),
        created_at=product.created_at,
    )
