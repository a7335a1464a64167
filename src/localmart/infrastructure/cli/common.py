"""Helpers shared by the CLI command modules."""

from __future__ import annotations

import click

from localmart.application.authenticate import AuthenticateHandler
from localmart.application.dto import OrderDTO
from localmart.domain.exceptions import DomainException
from localmart.domain.model.user import Caller
from localmart.infrastructure.bootstrap import user_repository
from localmart.infrastructure.persistence.json_store import StorageError

# Errors a command reports as a clean message instead of a traceback.
HANDLED_ERRORS = (DomainException, StorageError)

caller_option = click.option(
    "--as", "email", required=True, metavar="EMAIL", help="Account to act as."
)


def current_caller(email: str) -> Caller:
    try:
        return AuthenticateHandler(user_repository()).handle(email)
    except HANDLED_ERRORS as exc:
        raise click.ClickException(str(exc))


def display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Deliver:  {dto.delivery_address}")
    click.echo(f"Created:  {dto.created_at}")
    if dto.delivered_at:
        click.echo(f"Delivered: {dto.delivered_at}")
    click.echo()

    click.echo(f"  {'Product':<22} {'Vendor':<20} {'Qty':>5} {'Price':>14} {'Total':>14}")
    click.echo(f"  {'-'*79}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<22} {item.vendor_name:<20} {item.quantity:>5} "
            f"{item.unit_price:>14} {item.line_total:>14}"
        )
    click.echo(f"  {'-'*79}")
    click.echo(f"  {'Order Total':<50} {dto.total:>29}")
