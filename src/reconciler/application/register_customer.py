"""Application service: Register Customer use case."""

from __future__ import annotations

from reconciler.domain.exceptions import ValidationError
from reconciler.domain.model.customer import Customer
from reconciler.domain.repository.customer_repository import CustomerRepository


class RegisterCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, name: str) -> Customer:
        if not name or not name.strip():
            raise ValidationError("Customer name is required")

        # Ids that are not plain numbers were assigned elsewhere
        numeric_ids = [int(c.id) for c in self._customer_repo.list_all() if c.id.isdigit()]
        next_id = str(max(numeric_ids, default=0) + 1)

        customer = Customer(id=next_id, name=name.strip())
        self._customer_repo.save(customer)
        return customer
