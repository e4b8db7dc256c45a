"""Unit tests for order rejection messages."""

from reconciler.domain.errors import (
    CustomerNotFound,
    EmptyOrder,
    InsufficientStock,
    ProductNotFound,
)


class TestMessages:

    def test_customer_not_found(self):
        assert CustomerNotFound(customer_id="C9").message == "Customer not found."

    def test_empty_order(self):
        assert str(EmptyOrder()) == "Less than one product to create an order."

    def test_single_missing_product(self):
        error = ProductNotFound(first_id="P9", count=1)
        assert error.message == "Could not find product_id 'P9'."

    def test_several_missing_products(self):
        error = ProductNotFound(first_id="P9", count=4)
        assert error.message == "Could not find product_id 'P9' and others (3) products."

    def test_single_insufficient_stock(self):
        error = InsufficientStock(first_id="P2", count=1)
        assert error.message == "The given quantity for the product 'P2' is not available."

    def test_several_insufficient_stock(self):
        error = InsufficientStock(first_id="P2", count=3)
        assert error.message == (
            "The given quantity for the product 'P2' is not available. "
            "Another (2) products also exceed the quantity available."
        )


class TestReason:

    def test_reason_is_kind_name(self):
        assert ProductNotFound(first_id="P1", count=1).reason == "ProductNotFound"
        assert EmptyOrder().reason == "EmptyOrder"
