"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

from reconciler.domain.model.product import Product, StockUpdate


class ProductRepository(ABC):

    @abstractmethod
    def find_all_by_id(self, product_ids: Iterable[str]) -> list[Product]:
        """Return the products whose IDs are given, skipping unknown IDs.

        One call per order, however many lines it has.
        """

    @abstractmethod
    def update_quantities(self, updates: Sequence[StockUpdate]) -> None:
        """Overwrite the stock level of each product, in the given order.

        No compare-and-set is performed: the new levels were computed
        from an earlier read.
        """

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by name (case-insensitive), or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""
