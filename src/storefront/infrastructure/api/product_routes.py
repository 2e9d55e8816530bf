"""FastAPI endpoints for the product directory."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response

from storefront.application.add_product import AddProductHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.show_product import (
    ListProductsHandler,
    SearchProductsHandler,
    ShowProductHandler,
)
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.api.dependencies import get_product_repository
from storefront.infrastructure.api.schemas import (
    ProductRequest,
    ProductResponse,
    ProductUpdateRequest,
)

product_router = APIRouter(prefix="/api/products", tags=["products"])


@product_router.get("", response_model=list[ProductResponse])
def list_products(
    repo: ProductRepository = Depends(get_product_repository),
) -> list[ProductResponse]:
    return [ProductResponse.from_dto(dto) for dto in ListProductsHandler(repo).handle()]


@product_router.get("/search", response_model=list[ProductResponse])
def search_products(
    name: str = Query(""),
    repo: ProductRepository = Depends(get_product_repository),
) -> list[ProductResponse]:
    """Case-insensitive name search, sorted by name."""
    return [ProductResponse.from_dto(dto) for dto in SearchProductsHandler(repo).handle(name)]


@product_router.get("/{product_id}", response_model=ProductResponse)
def show_product(
    product_id: str,
    repo: ProductRepository = Depends(get_product_repository),
) -> ProductResponse:
    return ProductResponse.from_dto(ShowProductHandler(repo).handle(product_id))


@product_router.post("", status_code=201, response_model=ProductResponse)
def create_product(
    body: ProductRequest,
    repo: ProductRepository = Depends(get_product_repository),
) -> ProductResponse:
    dto = AddProductHandler(repo).handle(
        name=body.name,
        price=body.price,
        categories=body.categories,
        description=body.description,
    )
    return ProductResponse.from_dto(dto)


@product_router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: str,
    body: ProductUpdateRequest,
    repo: ProductRepository = Depends(get_product_repository),
) -> ProductResponse:
    dto = UpdateProductHandler(repo).handle(
        product_id,
        name=body.name,
        description=body.description,
        price=body.price,
        categories=body.categories,
    )
    return ProductResponse.from_dto(dto)


@product_router.delete("/{product_id}", status_code=204, response_class=Response)
def delete_product(
    product_id: str,
    repo: ProductRepository = Depends(get_product_repository),
) -> Response:
    DeleteProductHandler(repo).handle(product_id)
    return Response(status_code=204)
