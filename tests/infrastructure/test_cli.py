"""End-to-end tests for the click CLI over a temporary data directory."""

import json

import pytest
from click.testing import CliRunner

from reconciler.infrastructure.cli.main import cli


@pytest.fixture
def data_dir(tmp_path):
    (tmp_path / "customers.json").write_text(
        json.dumps([{"id": "C1", "name": "Alice"}]), encoding="utf-8"
    )
    (tmp_path / "products.json").write_text(
        json.dumps([
            {"id": "P1", "name": "Widget", "price": "10.0", "quantity": 5},
            {"id": "P2", "name": "Gadget", "price": "3.0", "quantity": 2},
        ]),
        encoding="utf-8",
    )
    return tmp_path


def _invoke(data_dir, *args):
    return CliRunner().invoke(cli, ["--data-dir", str(data_dir), *args])


def _stock(data_dir):
    raw = json.loads((data_dir / "products.json").read_text(encoding="utf-8"))
    return {p["id"]: p["quantity"] for p in raw}


class TestOrderCreate:

    def test_accepted_order(self, data_dir):
        result = _invoke(data_dir, "order", "create", "--customer", "C1", "--items", "P1:3,P2:2")

        assert result.exit_code == 0, result.output
        assert "Order #1 created" in result.output
        assert "$36.00" in result.output
        assert _stock(data_dir) == {"P1": 2, "P2": 0}

    def test_insufficient_stock(self, data_dir):
        result = _invoke(data_dir, "order", "create", "--customer", "C1", "--items", "P1:3,P2:5")

        assert result.exit_code == 1
        assert "The given quantity for the product 'P2' is not available." in result.output
        assert _stock(data_dir) == {"P1": 5, "P2": 2}

    def test_unknown_product(self, data_dir):
        result = _invoke(data_dir, "order", "create", "--customer", "C1", "--items", "P9:1,P1:1")

        assert result.exit_code == 1
        assert "Could not find product_id 'P9'." in result.output

    def test_unknown_customer(self, data_dir):
        result = _invoke(data_dir, "order", "create", "--customer", "C9", "--items", "P1:1")

        assert result.exit_code == 1
        assert "Customer not found." in result.output

    def test_no_items(self, data_dir):
        result = _invoke(data_dir, "order", "create", "--customer", "C1")

        assert result.exit_code == 1
        assert "Less than one product to create an order." in result.output

    def test_malformed_items(self, data_dir):
        result = _invoke(data_dir, "order", "create", "--customer", "C1", "--items", "P1=3")

        assert result.exit_code == 2
        assert "Invalid item format" in result.output

    @pytest.mark.parametrize("qty", ["-3", "0"])
    def test_non_positive_quantity_rejected_before_any_write(self, data_dir, qty):
        result = _invoke(data_dir, "order", "create", "--customer", "C1", "--items", f"P1:{qty}")

        assert result.exit_code == 2
        assert "must be positive" in result.output
        assert _stock(data_dir) == {"P1": 5, "P2": 2}
        assert not (data_dir / "orders.json").exists()

    def test_show_created_order(self, data_dir):
        _invoke(data_dir, "order", "create", "--customer", "C1", "--items", "P1:1")
        result = _invoke(data_dir, "order", "show", "--id", "1")

        assert result.exit_code == 0, result.output
        assert "Customer: C1" in result.output
        assert "$10.00" in result.output


class TestCatalogCommands:

    def test_add_and_list_product(self, tmp_path):
        result = _invoke(tmp_path, "product", "add", "--name", "Widget", "--price", "15", "--quantity", "4")
        assert result.exit_code == 0, result.output
        assert "Product #1 'Widget' added at $15.00 (4 in stock)" in result.output

        listing = _invoke(tmp_path, "product", "list")
        assert "Widget" in listing.output

    def test_add_product_next_to_lettered_ids(self, data_dir):
        result = _invoke(data_dir, "product", "add", "--name", "Gizmo", "--price", "2.50")

        assert result.exit_code == 0, result.output
        assert "Product #1 'Gizmo' added" in result.output
        assert set(_stock(data_dir)) == {"P1", "P2", "1"}

    def test_add_customer_next_to_lettered_ids(self, data_dir):
        result = _invoke(data_dir, "customer", "add", "--name", "Bob")

        assert result.exit_code == 0, result.output
        assert "Customer #1 'Bob' registered" in result.output

    def test_restock(self, data_dir):
        result = _invoke(data_dir, "product", "restock", "--id", "P2", "--quantity", "9")

        assert result.exit_code == 0, result.output
        assert _stock(data_dir)["P2"] == 9

    def test_customer_add_and_list(self, tmp_path):
        _invoke(tmp_path, "customer", "add", "--name", "Alice")
        result = _invoke(tmp_path, "customer", "list")

        assert result.exit_code == 0, result.output
        assert "Alice" in result.output

    def test_data_dir_from_environment(self, data_dir):
        result = CliRunner().invoke(
            cli, ["product", "list"], env={"RECONCILER_DATA_DIR": str(data_dir)}
        )
        assert result.exit_code == 0, result.output
        assert "Gadget" in result.output
