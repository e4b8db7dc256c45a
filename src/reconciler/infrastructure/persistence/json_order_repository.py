"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

import json
from collections.abc import Sequence
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path

from reconciler.domain.model.customer import Customer
from reconciler.domain.model.order import Order, OrderLineRecord
from reconciler.domain.model.value_objects import Money
from reconciler.domain.repository.order_repository import OrderRepository


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def create(self, customer: Customer, lines: Sequence[OrderLineRecord]) -> Order:
        orders = self._load_raw()
        next_id = max((o["id"] for o in orders), default=0) + 1

        order = Order(
            id=next_id,
            customer_id=customer.id,
            lines=tuple(lines),
            created_at=datetime.now(timezone.utc),
        )
        orders.append(self._to_raw(order))
        self._persist_raw(orders)
        return order

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customer_id": order.customer_id,
            "created_at": order.created_at.isoformat(),
            "lines": [
                {
                    "product_id": line.product_id,
                    "quantity": line.quantity,
                    "unit_price": str(line.unit_price.amount),
                    "currency": line.unit_price.currency,
                }
                for line in order.lines
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        lines = tuple(
            OrderLineRecord(
                product_id=i["product_id"],
                quantity=i["quantity"],
                unit_price=Money(Decimal(i["unit_price"]), i.get("currency", "USD")),
            )
            for i in raw["lines"]
        )
        return Order(
            id=raw["id"],
            customer_id=raw["customer_id"],
            lines=lines,
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
