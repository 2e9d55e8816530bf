"""Application service: Add Product use case."""

from __future__ import annotations

from storefront.application.dto import ProductDTO, product_to_dto
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price: float,
        categories: list[str],
        description: str | None = None,
    ) -> ProductDTO:
        """Add a new product to the catalog.

        ``price`` is in major units and is truncated to whole minor units.
        """
        product = Product.create(
            name=name,
            price=price,
            categories=categories,
            description=description,
        )
        return product_to_dto(self._product_repo.save(product))
