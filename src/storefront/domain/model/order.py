"""Order aggregate, the core of the domain.

The Order is an aggregate root that exclusively owns its items. Items are
created together with the order in one assembly run; afterwards only the
delivery address may change. Deleting an order deletes all its items.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from storefront.domain.model.value_objects import (
    DeliveryAddress,
    Quantity,
    to_major_units,
    validate_price,
)


@dataclass
class OrderItem:
    """Captures the price snapshot of a product at order-creation time.

    ``product_id`` is a plain identifier into the product directory, which
    lives in another service; nothing enforces that the product still
    exists. ``price`` (minor units) never changes after creation.
    """

    product_id: str
    quantity: Quantity
    price: int  # locked at order-creation time
    id: str | None = None
    order: Order | None = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        validate_price(self.price)

    @property
    def price_major(self) -> float:
        return to_major_units(self.price)

    @property
    def line_total(self) -> int:
        return self.price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders. The ``__init__`` is
    kept simple so the repository can reconstitute persisted
    orders without re-validating. ``id`` and ``created_at`` stay ``None``
    until the repository first saves the order.
    """

    id: str | None
    delivery_address: str
    order_items: list[OrderItem] = field(default_factory=list)
    created_at: datetime | None = None

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(delivery_address: str) -> Order:
        """Start an empty order for a validated delivery address."""
        return Order(id=None, delivery_address=DeliveryAddress(delivery_address).value)

    # --- Mutations ------------------------------------------------------------

    def add_order_item(self, item: OrderItem) -> None:
        """Attach an item and point its back-reference at this order."""
        self.order_items.append(item)
        item.order = self

    def change_delivery_address(self, delivery_address: str) -> None:
        self.delivery_address = DeliveryAddress(delivery_address).value

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> int:
        return sum(item.line_total for item in self.order_items)

    def contains_product(self, product_id: str) -> bool:
        return any(item.product_id == product_id for item in self.order_items)
