"""Product aggregate.

Products live independently of orders.  Their stock level is the only
field order creation mutates; prices change through catalog
maintenance and never reach existing orders.
"""

from __future__ import annotations

from dataclasses import dataclass

from reconciler.domain.exceptions import ValidationError
from reconciler.domain.model.value_objects import Money


@dataclass(frozen=True)
class StockUpdate:
    """New absolute stock level for one product."""

    product_id: str
    quantity: int


@dataclass
class Product:
    """A product in the catalog with its available stock."""

    id: str
    name: str
    price: Money
    quantity: int = 0

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValidationError(
                f"Stock for {self.name} cannot be negative, got {self.quantity}"
            )

    def restock(self, quantity: int) -> None:
        """Set the available stock to an absolute level."""
        if quantity < 0:
            raise ValidationError("Stock quantity cannot be negative")
        self.quantity = quantity

    def decremented_by(self, requested: int) -> StockUpdate:
        """Stock level left after taking *requested* units from this entry."""
        return StockUpdate(product_id=self.id, quantity=self.quantity - requested)
