"""Application service: Search Orders by Product use case (query).

Answers from the stored price snapshots only; the product directory is
never consulted, so orders for since-deleted products are still found.
"""

from __future__ import annotations

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.model.value_objects import parse_identifier
from storefront.domain.repository.order_repository import OrderRepository


class SearchOrdersByProductHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, product_id: str) -> list[OrderDTO]:
        product_id = parse_identifier(product_id, "product ID")
        return [
            order_to_dto(order)
            for order in self._order_repo.find_by_product_id(product_id)
        ]
