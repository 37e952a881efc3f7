"""CLI commands for orders.

Operator access to the same use cases the HTTP API serves, acting on
behalf of the user given with ``--user``.
"""

from __future__ import annotations

import click

from storefront.application.cancel_order import CancelOrderHandler
from storefront.application.dto import OrderDTO
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import build_context


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}  (status={dto.status})")
    click.echo(f"Created: {dto.created_at.strftime('%Y-%m-%d %H:%M UTC')}")
    click.echo()
    click.echo(f"  {'Product':<34} {'Qty':>5}")
    click.echo(f"  {'-'*40}")
    for line in dto.products:
        label = line.product.name if line.product else line.product_id
        click.echo(f"  {label:<34} {line.quantity:>5}")
    click.echo(f"  {'-'*40}")
    click.echo(f"  {'Order Total':<28} ${dto.total_amount:>10.2f}")


@click.command("place")
@click.option("--user", "user_id", required=True, help="User ID whose cart to check out.")
def order_place(user_id: str) -> None:
    """Place an order from a user's cart."""
    context = build_context()
    handler = PlaceOrderHandler(
        user_repo=context.user_repo,
        product_repo=context.product_repo,
        order_repo=context.order_repo,
        missing_product_policy=context.settings.MISSING_PRODUCT_POLICY,
    )

    try:
        dto = handler.handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Order placed successfully")
    _display_order(dto)


@click.command("list")
@click.option("--user", "user_id", required=True, help="User ID.")
def order_list(user_id: str) -> None:
    """List a user's orders."""
    context = build_context()
    handler = ListOrdersHandler(
        order_repo=context.order_repo,
        product_repo=context.product_repo,
    )
    orders = handler.handle(user_id)

    if not orders:
        click.echo("No orders found.")
        return

    for i, dto in enumerate(orders):
        if i:
            click.echo()
        _display_order(dto)


@click.command("cancel")
@click.option("--user", "user_id", required=True, help="User ID owning the order.")
@click.option("--id", "order_id", required=True, help="Order ID to cancel.")
def order_cancel(user_id: str, order_id: str) -> None:
    """Cancel a pending order."""
    context = build_context()
    handler = CancelOrderHandler(order_repo=context.order_repo)

    try:
        handler.handle(user_id=user_id, order_id=order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} canceled.")
