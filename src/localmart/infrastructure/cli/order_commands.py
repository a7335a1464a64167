"""CLI commands for customers' orders."""

from __future__ import annotations

import click

from localmart.application.create_order import CreateOrderHandler
from localmart.application.dto import AddressSpec, OrderItemSpec
from localmart.application.list_customer_orders import ListCustomerOrdersHandler
from localmart.application.show_order import ShowOrderHandler
from localmart.infrastructure.bootstrap import (
    notification_outbox,
    order_repository,
    product_repository,
    user_repository,
)
from localmart.infrastructure.cli.common import (
    HANDLED_ERRORS,
    caller_option,
    current_caller,
    display_order,
)


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse '1:3,4:1' (product ID : quantity) into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
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


@click.command("create")
@caller_option
@click.option("--items", required=True, help="Items as 'ProductID:Qty,ProductID:Qty'.")
@click.option("--street", required=True, help="Delivery street address.")
@click.option("--city", required=True, help="Delivery city.")
@click.option("--phone", required=True, help="Contact phone for delivery.")
@click.option("--total", default=None, help="Total shown to the customer, checked against ours.")
def order_create(
    email: str, items: str, street: str, city: str, phone: str, total: str | None
) -> None:
    """Place a new order."""
    caller = current_caller(email)
    specs = _parse_items(items)

    handler = CreateOrderHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
        user_repo=user_repository(),
        publisher=notification_outbox(),
    )

    try:
        dto = handler.handle(
            caller,
            specs,
            AddressSpec(street=street, city=city, phone=phone),
            expected_total=total,
        )
    except HANDLED_ERRORS as exc:
        raise click.ClickException(str(exc))

    click.echo("Order placed.")
    display_order(dto)


@click.command("list")
@caller_option
def order_list(email: str) -> None:
    """List your orders, newest first."""
    caller = current_caller(email)
    handler = ListCustomerOrdersHandler(order_repo=order_repository())

    try:
        orders = handler.handle(caller)
    except HANDLED_ERRORS as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders yet.")
        return
    for dto in orders:
        click.echo(
            f"#{dto.id:<5} {dto.created_at:<22} {dto.status:<12} "
            f"{len(dto.items):>3} item(s) {dto.total:>16}"
        )


@click.command("show")
@caller_option
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(email: str, order_id: int) -> None:
    """Show details of an existing order."""
    caller = current_caller(email)
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id, caller)
    except HANDLED_ERRORS as exc:
        raise click.ClickException(str(exc))

    display_order(dto)
    click.echo()
    click.echo("History:")
    for change in dto.status_history:
        click.echo(f"  {change.timestamp:<22} {change.status}")
