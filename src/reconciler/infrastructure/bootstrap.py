"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from reconciler.application.create_order import OrderReconciler
from reconciler.infrastructure.persistence.json_customer_repository import (
    JsonCustomerRepository,
)
from reconciler.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from reconciler.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

DATA_DIR_ENV = "RECONCILER_DATA_DIR"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir(base: Path | None = None) -> Path:
    if base is not None:
        return base
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else _DEFAULT_DATA_DIR


def customer_repository(base: Path | None = None) -> JsonCustomerRepository:
    return JsonCustomerRepository(data_dir(base) / "customers.json")


def product_repository(base: Path | None = None) -> JsonProductRepository:
    return JsonProductRepository(data_dir(base) / "products.json")


def order_repository(base: Path | None = None) -> JsonOrderRepository:
    return JsonOrderRepository(data_dir(base) / "orders.json")


def order_reconciler(base: Path | None = None) -> OrderReconciler:
    return OrderReconciler(
        customer_repo=customer_repository(base),
        product_repo=product_repository(base),
        order_repo=order_repository(base),
    )
