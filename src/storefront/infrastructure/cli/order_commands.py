"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.create_order import CreateOrderHandler
from storefront.application.delete_order import DeleteOrderHandler
from storefront.application.dto import OrderDTO, OrderItemSpec
from storefront.application.search_orders import SearchOrdersByProductHandler
from storefront.application.show_order import ListOrdersHandler, ShowOrderHandler
from storefront.application.update_order import UpdateDeliveryAddressHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.value_objects import to_major_units
from storefront.infrastructure.bootstrap import order_repository, product_lookup


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse '<product-id>:3,<product-id>:5' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductID:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(OrderItemSpec(product_id=product_id.strip(), quantity=qty))
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}")
    click.echo(f"Deliver to: {dto.delivery_address}")
    click.echo(f"Created:    {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<36} {'Qty':>5} {'Price':>10} {'Total':>12}")
    click.echo(f"  {'-'*66}")
    for item in dto.items:
        line_total = to_major_units(item.price_minor * item.quantity)
        click.echo(
            f"  {item.product_id:<36} {item.quantity:>5} {item.price:>10.2f} {line_total:>12.2f}"
        )
    click.echo(f"  {'-'*66}")
    click.echo(f"  {'Order Total':<53} {to_major_units(dto.total_minor):>12.2f}")


def _display_orders(orders: list[OrderDTO]) -> None:
    if not orders:
        click.echo("No orders found.")
        return
    for index, dto in enumerate(orders):
        if index:
            click.echo()
        _display_order(dto)


@click.command("create")
@click.option("--address", required=True, help="Delivery address.")
@click.option("--items", required=True, help="Items as 'ProductID:Qty,ProductID:Qty'.")
def order_create(address: str, items: str) -> None:
    """Create an order, pricing every item from the product service."""
    specs = _parse_items(items)

    handler = CreateOrderHandler(
        order_repo=order_repository(),
        product_lookup=product_lookup(),
    )

    try:
        dto = handler.handle(delivery_address=address, item_specs=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Order created.")
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(order_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
def order_list() -> None:
    """List all orders."""
    handler = ListOrdersHandler(order_repo=order_repository())

    try:
        orders = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_orders(orders)


@click.command("search")
@click.option("--product-id", required=True, help="Product ID the orders must contain.")
def order_search(product_id: str) -> None:
    """List orders containing a given product."""
    handler = SearchOrdersByProductHandler(order_repo=order_repository())

    try:
        orders = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_orders(orders)


@click.command("update-address")
@click.option("--id", "order_id", required=True, help="Order ID to update.")
@click.option("--address", required=True, help="New delivery address.")
def order_update_address(order_id: str, address: str) -> None:
    """Change the delivery address of an order."""
    handler = UpdateDeliveryAddressHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id, address)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.id} will be delivered to: {dto.delivery_address}")


@click.command("delete")
@click.option("--id", "order_id", required=True, help="Order ID to delete.")
def order_delete(order_id: str) -> None:
    """Delete an order and all of its items."""
    handler = DeleteOrderHandler(order_repo=order_repository())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} deleted.")
