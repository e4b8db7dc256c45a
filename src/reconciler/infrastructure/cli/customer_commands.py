"""CLI commands for customers."""

from __future__ import annotations

from pathlib import Path

import click

from reconciler.application.register_customer import RegisterCustomerHandler
from reconciler.domain.exceptions import DomainException
from reconciler.infrastructure.bootstrap import customer_repository


@click.command("add")
@click.option("--name", required=True, help="Customer name.")
@click.pass_obj
def customer_add(data_dir: Path | None, name: str) -> None:
    """Register a new customer."""
    handler = RegisterCustomerHandler(customer_repo=customer_repository(data_dir))

    try:
        customer = handler.handle(name=name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer #{customer.id} '{customer.name}' registered")


@click.command("list")
@click.pass_obj
def customer_list(data_dir: Path | None) -> None:
    """List all customers."""
    customers = customer_repository(data_dir).list_all()

    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20}")
    click.echo("-" * 27)
    for c in customers:
        click.echo(f"{c.id:<6} {c.name:<20}")
