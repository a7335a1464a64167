import click

from localmart.infrastructure.bootstrap import (
    product_repository,
    settings,
    user_repository,
)
from localmart.infrastructure.cli.common import HANDLED_ERRORS
from localmart.infrastructure.cli.notification_commands import notifications
from localmart.infrastructure.cli.order_commands import order_create, order_list, order_show
from localmart.infrastructure.cli.product_commands import product_list
from localmart.infrastructure.cli.vendor_commands import (
    vendor_orders,
    vendor_stats,
    vendor_update_status,
)
from localmart.infrastructure.logging import configure_logging
from localmart.infrastructure.persistence.seed import seed_demo_data


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """LocalMart: neighbourhood marketplace orders"""
    config = settings()
    configure_logging(
        level="DEBUG" if verbose else config.log_level,
        fmt=config.log_format,
    )


@cli.group()
def order() -> None:
    """Place and track orders."""


@cli.group()
def vendor() -> None:
    """Fulfil orders as a vendor."""


@cli.group()
def product() -> None:
    """Browse the catalog."""


@cli.command("seed")
def seed() -> None:
    """Load the demo accounts and catalog."""
    try:
        users, products = seed_demo_data(user_repository(), product_repository())
    except HANDLED_ERRORS as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Seeded {users} users and {products} products into {settings().data_dir}")


# Register subcommands
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_show)
vendor.add_command(vendor_orders)
vendor.add_command(vendor_update_status)
vendor.add_command(vendor_stats)
product.add_command(product_list)
cli.add_command(notifications)
