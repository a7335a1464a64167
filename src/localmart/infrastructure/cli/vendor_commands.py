"""CLI commands for vendors fulfilling orders."""

from __future__ import annotations

import click

from localmart.application.list_vendor_orders import ListVendorOrdersHandler
from localmart.application.update_order_status import UpdateOrderStatusHandler
from localmart.application.vendor_stats import VendorStatsHandler
from localmart.domain.model.order import OrderStatus
from localmart.infrastructure.bootstrap import (
    notification_outbox,
    order_repository,
    product_repository,
)
from localmart.infrastructure.cli.common import (
    HANDLED_ERRORS,
    caller_option,
    current_caller,
    display_order,
)

_STATUS_CHOICES = click.Choice([s.value for s in OrderStatus], case_sensitive=False)


@click.command("orders")
@caller_option
@click.option("--status", type=_STATUS_CHOICES, default=None, help="Only orders in this status.")
@click.option("--page", type=int, default=1, show_default=True, help="Page number.")
@click.option("--limit", type=int, default=10, show_default=True, help="Orders per page.")
def vendor_orders(email: str, status: str | None, page: int, limit: int) -> None:
    """List orders containing your products (your lines only)."""
    caller = current_caller(email)
    handler = ListVendorOrdersHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
    )

    try:
        orders = handler.handle(caller, status=status, page=page, limit=limit)
    except HANDLED_ERRORS as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return
    for dto in orders:
        click.echo(
            f"#{dto.id:<5} {dto.created_at:<22} {dto.status:<12} "
            f"{dto.customer_name:<20} {dto.total:>16}"
        )


@click.command("update-status")
@caller_option
@click.option("--id", "order_id", required=True, type=int, help="Order ID to update.")
@click.option("--status", required=True, help="New status, e.g. 'packaging' or 'in transit'.")
def vendor_update_status(email: str, order_id: int, status: str) -> None:
    """Move an order along the fulfilment pipeline."""
    caller = current_caller(email)
    handler = UpdateOrderStatusHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
        publisher=notification_outbox(),
    )

    try:
        dto = handler.handle(order_id, status, caller)
    except HANDLED_ERRORS as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} is now '{dto.status}'.")
    display_order(dto)


@click.command("stats")
@caller_option
def vendor_stats(email: str) -> None:
    """Show dashboard figures for your store."""
    caller = current_caller(email)
    handler = VendorStatsHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
    )

    try:
        stats = handler.handle(caller)
    except HANDLED_ERRORS as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Active products: {stats.total_products}")
    click.echo(f"Orders:          {stats.total_orders}")
    click.echo(f"Pending orders:  {stats.pending_orders}")
    click.echo(f"Revenue:         {stats.total_revenue}")

    if stats.recent_orders:
        click.echo("\nRecent orders:")
        for order in stats.recent_orders:
            click.echo(f"  #{order.id}  {order.status:<11} {order.total}  {order.customer_name}")

    if stats.low_stock_products:
        click.echo("\nLow stock:")
        for product in stats.low_stock_products:
            click.echo(f"  [{product.id}] {product.name}: {product.stock} left")
