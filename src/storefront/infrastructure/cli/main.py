from __future__ import annotations

import click
import uvicorn

from storefront.infrastructure.cli.order_commands import (
    order_cancel,
    order_list,
    order_place,
)
from storefront.infrastructure.cli.product_commands import product_list
from storefront.infrastructure.config import Settings
from storefront.infrastructure.logging import configure_logging


@click.group()
def cli() -> None:
    """Storefront order service."""
    settings = Settings()
    configure_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)


@cli.command()
@click.option("--host", default=None, help="Bind address (defaults to HOST).")
@click.option("--port", default=None, type=int, help="Port (defaults to PORT).")
@click.option("--reload", is_flag=True, default=False, help="Reload on code changes.")
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Run the HTTP API."""
    settings = Settings()
    uvicorn.run(
        "storefront.infrastructure.api.app:create_app",
        factory=True,
        host=host or settings.HOST,
        port=port or settings.PORT,
        reload=reload,
        log_config=None,
    )


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Browse products."""


# Register subcommands
order.add_command(order_cancel)
order.add_command(order_list)
order.add_command(order_place)
product.add_command(product_list)
