"""CLI commands for the Product aggregate."""

from __future__ import annotations

from pathlib import Path

import click

from reconciler.application.add_product import AddProductHandler
from reconciler.application.restock_product import RestockProductHandler
from reconciler.domain.exceptions import DomainException
from reconciler.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--quantity", default=0, type=int, help="Initial stock.")
@click.pass_obj
def product_add(data_dir: Path | None, name: str, price: str, quantity: int) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository(data_dir))

    try:
        product = handler.handle(name=name, price=price, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' added at {product.price} "
        f"({product.quantity} in stock)"
    )


@click.command("list")
@click.pass_obj
def product_list(data_dir: Path | None) -> None:
    """List all products in the catalog."""
    products = product_repository(data_dir).list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Stock':>8}")
    click.echo("-" * 47)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {str(p.price):>10} {p.quantity:>8}")


@click.command("restock")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New stock level.")
@click.pass_obj
def product_restock(data_dir: Path | None, product_id: str, quantity: int) -> None:
    """Set the stock level of a product."""
    handler = RestockProductHandler(product_repo=product_repository(data_dir))

    try:
        product = handler.handle(product_id=product_id, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock for '{product.name}' set to {product.quantity}")
