"""Tests for the JSON-file repositories against a temporary directory."""

import json
from decimal import Decimal

import pytest

from reconciler.domain.exceptions import EntityNotFoundError
from reconciler.domain.model.customer import Customer
from reconciler.domain.model.order import OrderLineRecord
from reconciler.domain.model.product import Product, StockUpdate
from reconciler.domain.model.value_objects import Money
from reconciler.infrastructure.persistence.json_customer_repository import (
    JsonCustomerRepository,
)
from reconciler.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from reconciler.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


@pytest.fixture
def products(tmp_path):
    repo = JsonProductRepository(tmp_path / "products.json")
    repo.save(Product(id="P1", name="Widget", price=Money.of("10.00"), quantity=5))
    repo.save(Product(id="P2", name="Gadget", price=Money.of("3.00"), quantity=2))
    return repo


class TestJsonProductRepository:

    def test_creates_empty_file(self, tmp_path):
        JsonProductRepository(tmp_path / "nested" / "products.json")
        assert json.loads((tmp_path / "nested" / "products.json").read_text()) == []

    def test_find_all_by_id_skips_unknown(self, products):
        found = products.find_all_by_id(["P2", "P9", "P1", "P2"])
        assert [p.id for p in found] == ["P2", "P1"]

    def test_round_trips_price_and_quantity(self, products):
        widget = products.get_by_id("P1")
        assert widget.price.amount == Decimal("10.00")
        assert widget.quantity == 5

    def test_update_quantities_applies_in_order(self, products):
        products.update_quantities(
            [StockUpdate("P1", 4), StockUpdate("P2", 0), StockUpdate("P1", 1)]
        )
        assert products.get_by_id("P1").quantity == 1
        assert products.get_by_id("P2").quantity == 0

    def test_update_unknown_product_writes_nothing(self, products):
        with pytest.raises(EntityNotFoundError):
            products.update_quantities([StockUpdate("P1", 0), StockUpdate("P9", 1)])
        assert products.get_by_id("P1").quantity == 5

    def test_get_by_name_is_case_insensitive(self, products):
        assert products.get_by_name("gadget").id == "P2"


class TestJsonOrderRepository:

    def test_create_assigns_ids_and_persists(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        lines = [OrderLineRecord("P1", 3, Money.of("10.00"))]

        first = repo.create(Customer(id="C1"), lines)
        second = repo.create(Customer(id="C2"), lines)

        assert (first.id, second.id) == (1, 2)
        reloaded = JsonOrderRepository(tmp_path / "orders.json").get_by_id(1)
        assert reloaded == first

    def test_unknown_order_is_none(self, tmp_path):
        assert JsonOrderRepository(tmp_path / "orders.json").get_by_id(5) is None


class TestJsonCustomerRepository:

    def test_save_and_find(self, tmp_path):
        repo = JsonCustomerRepository(tmp_path / "customers.json")
        repo.save(Customer(id="C1", name="Alice"))
        repo.save(Customer(id="C1", name="Alice B."))

        assert repo.find_by_id("C1") == Customer(id="C1", name="Alice B.")
        assert repo.find_by_id("C2") is None
        assert len(repo.list_all()) == 1
