"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from reconciler.domain.model.order import Order


@dataclass(frozen=True)
class OrderLineDTO:
    """Output: a single order line as displayed to the user."""

    product_id: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    customer_id: str
    lines: list[OrderLineDTO]
    total: str
    created_at: str


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        customer_id=order.customer_id,
        lines=[
            OrderLineDTO(
                product_id=line.product_id,
                quantity=line.quantity,
                unit_price=str(line.unit_price),
                line_total=str(line.line_total),
            )
            for line in order.lines
        ],
        total=str(order.total),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
