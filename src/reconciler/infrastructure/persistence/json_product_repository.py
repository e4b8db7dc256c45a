"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from collections.abc import Iterable, Sequence
from decimal import Decimal
from pathlib import Path

from reconciler.domain.exceptions import EntityNotFoundError
from reconciler.domain.model.product import Product, StockUpdate
from reconciler.domain.model.value_objects import Money
from reconciler.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def find_all_by_id(self, product_ids: Iterable[str]) -> list[Product]:
        products = self._load()
        wanted = dict.fromkeys(product_ids)
        return [products[pid] for pid in wanted if pid in products]

    def update_quantities(self, updates: Sequence[StockUpdate]) -> None:
        products = self._load()
        for update in updates:
            product = products.get(update.product_id)
            if product is None:
                raise EntityNotFoundError(
                    f"Product not found: '{update.product_id}'"
                )
            product.restock(update.quantity)
        self._persist(products)

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for product in self._load().values():
            if product.name.lower() == name.lower():
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        products = self._load()
        products[product.id] = product
        self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {
            item["id"]: Product(
                id=item["id"],
                name=item["name"],
                price=Money(Decimal(item["price"]), item.get("currency", "USD")),
                quantity=item.get("quantity", 0),
            )
            for item in raw
        }

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [
            {
                "id": p.id,
                "name": p.name,
                "price": str(p.price.amount),
                "currency": p.price.currency,
                "quantity": p.quantity,
            }
            for p in products.values()
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
