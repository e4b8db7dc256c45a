"""Domain service: Order Line Reconciliation.

Matches the requested lines of an order against a catalog snapshot and
classifies every line in a single pass.  This is pure computation over
already-fetched data: no repository is touched here, so the caller can
finish validating every line before anything is written.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from reconciler.domain.model.order import OrderLineRecord, OrderLineRequest
from reconciler.domain.model.product import Product, StockUpdate


@dataclass
class OffendingLines:
    """First offending product id plus the total number of offending lines."""

    first_id: str | None = None
    count: int = 0

    def record(self, product_id: str) -> None:
        if self.first_id is None:
            self.first_id = product_id
        self.count += 1

    def __bool__(self) -> bool:
        return self.count > 0


@dataclass
class Reconciliation:
    missing: OffendingLines = field(default_factory=OffendingLines)
    insufficient: OffendingLines = field(default_factory=OffendingLines)
    sanitized_lines: list[OrderLineRecord] = field(default_factory=list)
    stock_updates: dict[str, StockUpdate] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.missing and not self.insufficient


def reconcile_lines(
    requested: Sequence[OrderLineRequest],
    catalog: Iterable[Product],
) -> Reconciliation:
    """Partition *requested* into accepted and rejected lines.

    A line missing from the catalog is never quantity-checked.  Stock
    updates are computed from the catalog quantity as fetched, so two
    lines for the same product do not add up: the later one overwrites
    the earlier update.
    """
    by_id = {product.id: product for product in catalog}
    result = Reconciliation()

    for line in requested:
        product = by_id.get(line.product_id)
        if product is None:
            result.missing.record(line.product_id)
            continue

        if line.quantity > product.quantity:
            result.insufficient.record(line.product_id)
            continue

        result.sanitized_lines.append(
            OrderLineRecord(
                product_id=product.id,
                quantity=line.quantity,
                unit_price=product.price,  # <-- price snapshot
            )
        )
        result.stock_updates[product.id] = product.decremented_by(line.quantity)

    return result
