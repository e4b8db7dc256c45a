"""Order aggregate.

An Order is written once by the order store and never changes
afterwards, so both the order and its lines are frozen.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal

from reconciler.domain.model.value_objects import Money


@dataclass(frozen=True)
class OrderLineRequest:
    """Input: what the customer asked for (product id + quantity)."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class OrderLineRecord:
    """A validated line with the unit price captured at order time."""

    product_id: str
    quantity: int
    unit_price: Money  # snapshot, not a live reference

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class Order:
    """A persisted customer order.

    ``id`` and ``created_at`` are assigned by the ``OrderRepository``.
    """

    id: int
    customer_id: str
    lines: tuple[OrderLineRecord, ...]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def total(self) -> Money:
        if not self.lines:
            return Money(Decimal("0.00"))
        result = Money(Decimal("0.00"), self.lines[0].unit_price.currency)
        for line in self.lines:
            result = result + line.line_total
        return result
