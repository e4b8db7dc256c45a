"""Order rejection kinds.

Returned inside ``returns.result.Failure`` by the OrderReconciler so
callers branch on the outcome instead of relying on exception
unwinding.  Every kind is terminal for the call: nothing has been
persisted when one of these comes back.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderError:
    """Base class for every reason an order can be rejected."""

    @property
    def reason(self) -> str:
        return type(self).__name__

    @property
    def message(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class CustomerNotFound(OrderError):
    customer_id: str

    @property
    def message(self) -> str:
        return "Customer not found."


@dataclass(frozen=True)
class EmptyOrder(OrderError):

    @property
    def message(self) -> str:
        return "Less than one product to create an order."


@dataclass(frozen=True)
class ProductNotFound(OrderError):
    """One or more requested product ids are not in the catalog.

    ``count`` is the total number of offending lines, ``first_id`` the
    product id of the first one in request order.
    """

    first_id: str
    count: int

    @property
    def message(self) -> str:
        if self.count > 1:
            return (
                f"Could not find product_id '{self.first_id}' "
                f"and others ({self.count - 1}) products."
            )
        return f"Could not find product_id '{self.first_id}'."


@dataclass(frozen=True)
class InsufficientStock(OrderError):
    """One or more requested quantities exceed the available stock."""

    first_id: str
    count: int

    @property
    def message(self) -> str:
        msg = f"The given quantity for the product '{self.first_id}' is not available."
        if self.count > 1:
            msg += (
                f" Another ({self.count - 1}) products also exceed "
                f"the quantity available."
            )
        return msg
