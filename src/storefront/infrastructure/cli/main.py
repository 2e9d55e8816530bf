import click

from storefront.infrastructure.cli.order_commands import (
    order_create,
    order_delete,
    order_list,
    order_search,
    order_show,
    order_update_address,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_search,
)
from storefront.infrastructure.cli.serve_commands import serve


@click.group()
def cli() -> None:
    """Storefront: product directory, order ledger and routing edge"""


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
cli.add_command(serve)
order.add_command(order_create)
order.add_command(order_delete)
order.add_command(order_list)
order.add_command(order_search)
order.add_command(order_show)
order.add_command(order_update_address)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_search)
