"""CLI command that runs one of the HTTP services under uvicorn."""

from __future__ import annotations

import click
import uvicorn

from storefront.infrastructure.logging import configure_logging

_APP_FACTORIES = {
    "product": ("storefront.infrastructure.api.app:create_product_app", 8081),
    "order": ("storefront.infrastructure.api.app:create_order_app", 8082),
    "gateway": ("storefront.infrastructure.api.gateway:create_gateway_app", 8080),
}


@click.command("serve")
@click.argument("service", type=click.Choice(sorted(_APP_FACTORIES)))
@click.option("--host", default="127.0.0.1", show_default=True, help="Bind address.")
@click.option("--port", type=int, default=None, help="Bind port (defaults per service).")
@click.option("--reload", is_flag=True, default=False, help="Reload on code changes.")
def serve(service: str, host: str, port: int | None, reload: bool) -> None:
    """Run the product service, the order service or the gateway."""
    configure_logging(log_file_prefix=service)
    factory, default_port = _APP_FACTORIES[service]
    uvicorn.run(
        factory,
        factory=True,
        host=host,
        port=port or default_port,
        reload=reload,
        log_config=None,
    )
