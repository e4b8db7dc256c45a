"""Application service: Create Order use case.

Orchestrates the customer lookup, the catalog batch-fetch, line
reconciliation and the two writes (order record, then stock levels).
Every line is classified before anything is written, so a rejected
order leaves no trace in any store.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog
from returns.result import Failure, Result, Success

from reconciler.domain.errors import (
    CustomerNotFound,
    EmptyOrder,
    InsufficientStock,
    OrderError,
    ProductNotFound,
)
from reconciler.domain.model.order import Order, OrderLineRequest
from reconciler.domain.repository.customer_repository import CustomerRepository
from reconciler.domain.repository.order_repository import OrderRepository
from reconciler.domain.repository.product_repository import ProductRepository
from reconciler.domain.service.order_reconciliation import reconcile_lines

logger = structlog.get_logger(__name__)


class OrderReconciler:

    def __init__(
        self,
        customer_repo: CustomerRepository,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._customer_repo = customer_repo
        self._product_repo = product_repo
        self._order_repo = order_repo

    def execute(
        self,
        customer_id: str,
        requested_lines: Sequence[OrderLineRequest],
    ) -> Result[Order, OrderError]:
        """Validate and record an order.

        Steps:
        1. Resolve the customer (fail if unknown).
        2. Reject an order with no lines.
        3. Fetch every requested product in one catalog call.
        4. Classify all lines; report missing products before
           insufficient stock.
        5. Persist the order, then apply the new stock levels.

        Repository errors are not caught here and propagate unchanged.
        """
        log = logger.bind(customer_id=customer_id)
        log.info("order.creation_started", lines=len(requested_lines))

        customer = self._customer_repo.find_by_id(customer_id)
        if customer is None:
            return self._reject(log, CustomerNotFound(customer_id=customer_id))

        if not requested_lines:
            return self._reject(log, EmptyOrder())

        catalog = self._product_repo.find_all_by_id(
            [line.product_id for line in requested_lines]
        )
        reconciliation = reconcile_lines(requested_lines, catalog)

        if reconciliation.missing:
            return self._reject(
                log,
                ProductNotFound(
                    first_id=reconciliation.missing.first_id,  # type: ignore[arg-type]
                    count=reconciliation.missing.count,
                ),
            )
        if reconciliation.insufficient:
            return self._reject(
                log,
                InsufficientStock(
                    first_id=reconciliation.insufficient.first_id,  # type: ignore[arg-type]
                    count=reconciliation.insufficient.count,
                ),
            )

        order = self._order_repo.create(customer, reconciliation.sanitized_lines)

        updates = list(reconciliation.stock_updates.values())
        self._product_repo.update_quantities(updates)
        for update in updates:
            log.debug(
                "order.stock_updated",
                product_id=update.product_id,
                remaining=update.quantity,
            )

        log.info("order.created", order_id=order.id, lines=len(order.lines))
        return Success(order)

    @staticmethod
    def _reject(
        log: structlog.stdlib.BoundLogger, error: OrderError
    ) -> Result[Order, OrderError]:
        scope = {}
        if isinstance(error, (ProductNotFound, InsufficientStock)):
            scope = {"first_id": error.first_id, "count": error.count}
        log.info("order.rejected", reason=error.reason, **scope)
        return Failure(error)
