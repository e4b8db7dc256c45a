"""CLI commands for orders."""

from __future__ import annotations

from pathlib import Path

import click
from returns.pipeline import is_successful

from reconciler.application.dto import OrderDTO, order_to_dto
from reconciler.application.show_order import ShowOrderHandler
from reconciler.domain.exceptions import DomainException
from reconciler.domain.model.order import OrderLineRequest
from reconciler.infrastructure.bootstrap import order_reconciler, order_repository


def _parse_items(raw: str) -> list[OrderLineRequest]:
    """Parse 'P1:3,P2:5' into OrderLineRequest list."""
    lines: list[OrderLineRequest] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        if qty <= 0:
            raise click.BadParameter(
                f"Quantity for product '{product_id.strip()}' must be positive, got {qty}."
            )
        lines.append(OrderLineRequest(product_id=product_id.strip(), quantity=qty))
    return lines


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Customer: {dto.customer_id}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for line in dto.lines:
        click.echo(
            f"  {line.product_id:<20} {line.quantity:>5} {line.unit_price:>10} {line.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")


@click.command("create")
@click.option("--customer", "customer_id", required=True, help="Customer ID.")
@click.option("--items", default="", help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.pass_obj
def order_create(data_dir: Path | None, customer_id: str, items: str) -> None:
    """Create an order and take its lines out of stock."""
    lines = _parse_items(items)

    result = order_reconciler(data_dir).execute(customer_id, lines)
    if not is_successful(result):
        raise click.ClickException(result.failure().message)

    try:
        dto = order_to_dto(result.unwrap())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} created")
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(data_dir: Path | None, order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository(data_dir))

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id}")
    _display_order(dto)
