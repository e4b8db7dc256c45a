from pathlib import Path

import click

from reconciler.infrastructure.bootstrap import DATA_DIR_ENV
from reconciler.infrastructure.cli.customer_commands import customer_add, customer_list
from reconciler.infrastructure.cli.order_commands import order_create, order_show
from reconciler.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_restock,
)
from reconciler.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=DATA_DIR_ENV,
    default=None,
    help="Directory holding the JSON stores.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log at DEBUG level.")
@click.option("--log-json", is_flag=True, default=False, help="Emit logs as JSON lines.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, verbose: bool, log_json: bool) -> None:
    """Order Reconciler: validate orders against catalog stock."""
    configure_logging("DEBUG" if verbose else "WARNING", json=log_json)
    ctx.obj = data_dir


@cli.group()
def order() -> None:
    """Create and inspect orders."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def customer() -> None:
    """Manage customers."""


# Register subcommands
order.add_command(order_create)
order.add_command(order_show)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_restock)
customer.add_command(customer_add)
customer.add_command(customer_list)
