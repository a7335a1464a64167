"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from localmart.application.list_products import ListProductsHandler
from localmart.infrastructure.bootstrap import product_repository
from localmart.infrastructure.cli.common import HANDLED_ERRORS


@click.command("list")
@click.option("--category", default=None, help="Only products in this category.")
@click.option("--vendor", "vendor_id", default=None, help="Only products from this vendor ID.")
def product_list(category: str | None, vendor_id: str | None) -> None:
    """List products available to order."""
    handler = ListProductsHandler(product_repository())

    try:
        products = handler.handle(category=category, vendor_id=vendor_id)
    except HANDLED_ERRORS as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"  {'ID':<5} {'Name':<22} {'Category':<12} {'Price':>14} {'Stock':>6} {'Vendor':>7}")
    click.echo(f"  {'-'*71}")
    for p in products:
        click.echo(
            f"  {p.id:<5} {p.name:<22} {p.category:<12} {p.price:>14} {p.stock:>6} {p.vendor_id:>7}"
        )
