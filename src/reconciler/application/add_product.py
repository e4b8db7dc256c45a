"""Application service: Add Product use case."""

from __future__ import annotations

from reconciler.domain.exceptions import ValidationError
from reconciler.domain.model.product import Product
from reconciler.domain.model.value_objects import Money
from reconciler.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str, price: str, quantity: int = 0) -> Product:
        """Add a new product to the catalog with an initial stock level."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        existing = self._product_repo.get_by_name(name.strip())
        if existing is not None:
            raise ValidationError(f"Product '{name}' already exists")

        if quantity < 0:
            raise ValidationError("Stock quantity cannot be negative")

        # Auto-assign ID based on existing products
        numeric_ids = [int(p.id) for p in self._product_repo.list_all() if p.id.isdigit()]
        next_id = str(max(numeric_ids, default=0) + 1)

        product = Product(
            id=next_id,
            name=name.strip(),
            price=Money.of(price),
            quantity=quantity,
        )
        self._product_repo.save(product)
        return product
