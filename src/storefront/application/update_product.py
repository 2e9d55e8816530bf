"""Application service: Update Product use case."""

from __future__ import annotations

from storefront.application.dto import ProductDTO, product_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.value_objects import parse_identifier
from storefront.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        name: str | None = None,
        description: str | None = None,
        price: float | None = None,
        categories: list[str] | None = None,
    ) -> ProductDTO:
        """Update the supplied fields of a product.

        This does NOT affect any existing orders; they captured a
        price snapshot at creation time.
        """
        product_id = parse_identifier(product_id, "product ID")
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        product.update(
            name=name,
            description=description,
            price=price,
            categories=categories,
        )
        return product_to_dto(self._product_repo.save(product))
