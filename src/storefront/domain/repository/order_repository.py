"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order."""

    @abstractmethod
    def find_by_product_id(self, product_id: str) -> list[Order]:
        """Return every order owning at least one item for the product."""

    @abstractmethod
    def save(self, order: Order) -> Order:
        """Persist a new or updated order together with all its items.

        Assigns ``id``, ``created_at`` and item IDs on first insert. Either
        the whole aggregate is written or none of it is.
        """

    @abstractmethod
    def delete(self, order: Order) -> None:
        """Remove an order and every item it owns."""
