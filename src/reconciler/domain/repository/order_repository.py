"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from reconciler.domain.model.customer import Customer
from reconciler.domain.model.order import Order, OrderLineRecord


class OrderRepository(ABC):

    @abstractmethod
    def create(self, customer: Customer, lines: Sequence[OrderLineRecord]) -> Order:
        """Persist a new order, assigning its ID and creation time."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""
