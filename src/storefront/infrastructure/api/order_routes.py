"""FastAPI endpoints for the order ledger."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response

from storefront.application.create_order import CreateOrderHandler
from storefront.application.delete_order import DeleteOrderHandler
from storefront.application.dto import OrderItemSpec
from storefront.application.search_orders import SearchOrdersByProductHandler
from storefront.application.show_order import ListOrdersHandler, ShowOrderHandler
from storefront.application.update_order import UpdateDeliveryAddressHandler
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.product_lookup import ProductLookup
from storefront.infrastructure.api.dependencies import (
    get_order_repository,
    get_product_lookup,
)
from storefront.infrastructure.api.schemas import (
    OrderRequest,
    OrderResponse,
    UpdateOrderRequest,
)

order_router = APIRouter(prefix="/api/orders", tags=["orders"])


@order_router.get("", response_model=list[OrderResponse])
def list_orders(
    repo: OrderRepository = Depends(get_order_repository),
) -> list[OrderResponse]:
    return [OrderResponse.from_dto(dto) for dto in ListOrdersHandler(repo).handle()]


# Plain ``def`` so the blocking product lookups run in the threadpool.
@order_router.post("", status_code=201, response_model=OrderResponse)
def create_order(
    body: OrderRequest,
    repo: OrderRepository = Depends(get_order_repository),
    lookup: ProductLookup = Depends(get_product_lookup),
) -> OrderResponse:
    specs = [
        OrderItemSpec(product_id=item.product_id, quantity=item.quantity)
        for item in body.products
    ]
    dto = CreateOrderHandler(order_repo=repo, product_lookup=lookup).handle(
        delivery_address=body.delivery_address,
        item_specs=specs,
    )
    return OrderResponse.from_dto(dto)


@order_router.get("/search", response_model=list[OrderResponse])
def search_orders(
    product_id: str = Query("", alias="productId"),
    repo: OrderRepository = Depends(get_order_repository),
) -> list[OrderResponse]:
    """Orders containing at least one item of the given product."""
    orders = SearchOrdersByProductHandler(repo).handle(product_id)
    if not orders:
        raise EntityNotFoundError(f"No orders found for product '{product_id}'")
    return [OrderResponse.from_dto(dto) for dto in orders]


@order_router.get("/{order_id}", response_model=OrderResponse)
def show_order(
    order_id: str,
    repo: OrderRepository = Depends(get_order_repository),
) -> OrderResponse:
    return OrderResponse.from_dto(ShowOrderHandler(repo).handle(order_id))


@order_router.put("/{order_id}", response_model=OrderResponse)
def update_order(
    order_id: str,
    body: UpdateOrderRequest,
    repo: OrderRepository = Depends(get_order_repository),
) -> OrderResponse:
    dto = UpdateDeliveryAddressHandler(repo).handle(order_id, body.delivery_address)
    return OrderResponse.from_dto(dto)


@order_router.delete("/{order_id}", status_code=204, response_class=Response)
def delete_order(
    order_id: str,
    repo: OrderRepository = Depends(get_order_repository),
) -> Response:
    DeleteOrderHandler(repo).handle(order_id)
    return Response(status_code=204)
