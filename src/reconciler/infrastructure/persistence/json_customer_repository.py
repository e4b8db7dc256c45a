"""JSON-file-backed implementation of CustomerRepository."""

from __future__ import annotations

import json
from pathlib import Path

from reconciler.domain.model.customer import Customer
from reconciler.domain.repository.customer_repository import CustomerRepository


class JsonCustomerRepository(CustomerRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def find_by_id(self, customer_id: str) -> Customer | None:
        for raw in self._load_raw():
            if raw["id"] == customer_id:
                return Customer(id=raw["id"], name=raw.get("name", ""))
        return None

    def list_all(self) -> list[Customer]:
        return [Customer(id=raw["id"], name=raw.get("name", "")) for raw in self._load_raw()]

    def save(self, customer: Customer) -> None:
        records = [raw for raw in self._load_raw() if raw["id"] != customer.id]
        records.append({"id": customer.id, "name": customer.name})
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
