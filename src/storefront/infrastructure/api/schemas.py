"""Pydantic request/response schemas for the product and order APIs.

Field names travel camelCase on the wire (``deliveryAddress``,
``productId``, ``priceMinor``) and are snake_case in Python. ``price`` on
the wire is the float major-unit value; ``priceMinor`` is the exact
integer amount that is actually stored.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

from storefront.application.dto import OrderDTO, ProductDTO

CategoryName = Annotated[str, StringConstraints(strip_whitespace=False, min_length=1, max_length=100)]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Product schemas ---


class ProductRequest(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "name": "ASUS Laptop",
                    "description": "Powerful gaming laptop.",
                    "price": 1499.99,
                    "categories": ["Electronics", "Computers"],
                }
            ]
        },
    )

    name: str = Field(..., min_length=3, max_length=255)
    description: str | None = Field(None, max_length=1000)
    price: float = Field(..., gt=0, le=100_000_000)
    categories: list[CategoryName] = Field(..., min_length=1)


class ProductUpdateRequest(CamelModel):
    name: str | None = Field(None, min_length=3, max_length=255)
    description: str | None = Field(None, max_length=1000)
    price: float | None = Field(None, gt=0, le=100_000_000)
    categories: list[CategoryName] | None = Field(None, min_length=1)


class ProductResponse(CamelModel):
    id: str
    name: str
    description: str | None
    price: float
    price_minor: int
    categories: list[str]
    created_at: datetime | None

    @classmethod
    def from_dto(cls, dto: ProductDTO) -> ProductResponse:
        return cls(
            id=dto.id,
            name=dto.name,
            description=dto.description,
            price=dto.price,
            price_minor=dto.price_minor,
            categories=dto.categories,
            created_at=dto.created_at,
        )


# --- Order schemas ---


class OrderItemRequest(CamelModel):
    product_id: str = Field(..., min_length=1)
    quantity: int = Field(..., gt=0)


class OrderRequest(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "deliveryAddress": "10 Main Street, Springfield",
                    "products": [
                        {"productId": "123e4567-e89b-12d3-a456-426614174001", "quantity": 2}
                    ],
                }
            ]
        },
    )

    delivery_address: str = Field(..., min_length=5, max_length=255)
    products: list[OrderItemRequest] = Field(..., min_length=1)


class UpdateOrderRequest(CamelModel):
    delivery_address: str = Field(..., min_length=5, max_length=255)


class OrderItemResponse(CamelModel):
    id: str
    product_id: str
    quantity: int
    price: float
    price_minor: int


class OrderResponse(CamelModel):
    id: str
    delivery_address: str
    created_at: datetime
    order_items: list[OrderItemResponse]

    @classmethod
    def from_dto(cls, dto: OrderDTO) -> OrderResponse:
        return cls(
            id=dto.id,
            delivery_address=dto.delivery_address,
            created_at=dto.created_at,
            order_items=[
                OrderItemResponse(
                    id=item.id,
                    product_id=item.product_id,
                    quantity=item.quantity,
                    price=item.price,
                    price_minor=item.price_minor,
                )
                for item in dto.items
            ],
        )


# --- Shared ---


class HealthResponse(BaseModel):
    status: str = "ok"
    service: str
