"""Application service: Create Order use case.

This is the only workflow that crosses a service boundary. Every requested
item is resolved against the product directory, one after another, and
priced from the directory's answer. The order is persisted only when every
item resolved; the first lookup failure aborts the whole operation and
nothing is written.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import OrderDTO, OrderItemSpec, order_to_dto
from storefront.domain.exceptions import DomainException, ValidationError
from storefront.domain.model.order import Order, OrderItem
from storefront.domain.model.value_objects import Quantity, parse_identifier
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.product_lookup import ProductLookup

logger = structlog.get_logger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_lookup: ProductLookup,
    ) -> None:
        self._order_repo = order_repo
        self._product_lookup = product_lookup

    def handle(self, delivery_address: str, item_specs: list[OrderItemSpec]) -> OrderDTO:
        """Create a new order.

        Steps:
        1. Validate the address and every item spec (no remote calls yet).
        2. Look up each product in request order and snapshot its price.
           Duplicated product IDs give duplicated items.
        3. Persist the assembled aggregate in one unit of work.
        """
        order = Order.create(delivery_address)
        requested = self._validate_items(item_specs)

        for product_id, quantity in requested:
            try:
                snapshot = self._product_lookup.fetch_product(product_id)
            except DomainException as exc:
                logger.warning(
                    "order_assembly_aborted",
                    product_id=product_id,
                    error=type(exc).__name__,
                    resolved_items=len(order.order_items),
                )
                raise

            order.add_order_item(
                OrderItem(
                    product_id=product_id,
                    quantity=quantity,
                    price=snapshot.price,  # <-- price snapshot, never client-supplied
                )
            )

        saved = self._order_repo.save(order)
        logger.info("order_created", order_id=saved.id, items=len(saved.order_items))
        return order_to_dto(saved)

    @staticmethod
    def _validate_items(item_specs: list[OrderItemSpec]) -> list[tuple[str, Quantity]]:
        if not item_specs:
            raise ValidationError("Order must contain at least one item")
        return [
            (parse_identifier(spec.product_id, "product ID"), Quantity(spec.quantity))
            for spec in item_specs
        ]
