"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from storefront.application.list_products import ListProductsHandler
from storefront.infrastructure.bootstrap import build_context


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    context = build_context()
    products = ListProductsHandler(product_repo=context.product_repo).handle()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<34} {'Name':<20} {'Price':>10}")
    click.echo("-" * 66)
    for p in products:
        click.echo(f"{p.id:<34} {p.name:<20} {p.price:>10.2f}")
