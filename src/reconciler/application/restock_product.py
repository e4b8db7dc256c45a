"""Application service: Restock Product use case."""

from __future__ import annotations

from reconciler.domain.exceptions import EntityNotFoundError
from reconciler.domain.model.product import Product
from reconciler.domain.repository.product_repository import ProductRepository


class RestockProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, quantity: int) -> Product:
        """Set the available stock of a product to *quantity*."""
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{product_id}'")

        product.restock(quantity)
        self._product_repo.save(product)
        return product
