"""CLI commands for the product directory."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.dto import ProductDTO
from storefront.application.show_product import ListProductsHandler, SearchProductsHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import product_repository


def _parse_categories(raw: str) -> list[str]:
    """Parse 'Electronics,Computers' into a category list."""
    return [part.strip() for part in raw.split(",") if part.strip()]


def _display_products(products: list[ProductDTO]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<36}  {'Name':<24} {'Price':>12}  Categories")
    click.echo("-" * 90)
    for p in products:
        click.echo(
            f"{p.id:<36}  {p.name:<24} {p.price:>12.2f}  {', '.join(p.categories)}"
        )


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, type=float, help="Price in major units (e.g. 14.99).")
@click.option("--categories", required=True, help="Comma-separated categories.")
@click.option("--description", default=None, help="Optional description.")
def product_add(name: str, price: float, categories: str, description: str | None) -> None:
    """Add a new product to the catalogue."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            name=name,
            price=price,
            categories=_parse_categories(categories),
            description=description,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' added at {product.price:.2f}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalogue."""
    handler = ListProductsHandler(product_repo=product_repository())

    try:
        products = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_products(products)


@click.command("search")
@click.argument("name")
def product_search(name: str) -> None:
    """Search products by (part of) their name."""
    handler = SearchProductsHandler(product_repo=product_repository())

    try:
        products = handler.handle(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_products(products)
