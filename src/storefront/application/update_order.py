"""Application service: Update Delivery Address use case.

The delivery address is the only part of an order that may change after
creation. Items and their locked prices are left untouched.
"""

from __future__ import annotations

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.value_objects import DeliveryAddress, parse_identifier
from storefront.domain.repository.order_repository import OrderRepository


class UpdateDeliveryAddressHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str, delivery_address: str) -> OrderDTO:
        order_id = parse_identifier(order_id, "order ID")
        # Reject a bad address before touching storage.
        address = DeliveryAddress(delivery_address)

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order '{order_id}' not found")

        order.change_delivery_address(address.value)
        return order_to_dto(self._order_repo.save(order))
