# tests/test_cli.py
import httpx
import pytest
from fastapi.testclient import TestClient

import cli
from styleshop.main import app

CART = [
    {"id": "x", "productId": "1", "name": "Classic Cotton T-Shirt", "price": 29.99, "quantity": 2},
    {"id": "y", "productId": "5", "name": "Canvas Backpack", "price": 59.99, "quantity": 1},
]


def test_cart_count_sums_quantities():
    assert cli.cart_count(CART) == 3
    assert cli.cart_count([]) == 0


def test_cart_total():
    assert cli.cart_total(CART) == pytest.approx(119.97)
    assert cli.format_price(cli.cart_total(CART)) == "$119.97"


def test_resolve_product_id_by_name(monkeypatch):
    monkeypatch.setattr(cli, "product_cache", [{"id": "4", "name": "Leather Boots"}])
    assert cli.resolve_product_id("leather boots") == "4"
    assert cli.resolve_product_id("4") == "4"


def test_error_message_uses_api_message():
    r = TestClient(app).get("/api/products/nope")
    with pytest.raises(httpx.HTTPStatusError) as exc:
        r.raise_for_status()
    assert cli.error_message(exc.value) == "Product not found"
    assert cli.error_message(RuntimeError("boom")) == "boom"


def test_category_choices_follow_the_catalog():
    products = [{"category": "shoes"}, {"category": "bags"}, {"category": "shoes"}, {"category": "hats"}]
    assert cli.category_choices(products) == ["all", "bags", "hats", "shoes"]
    assert cli.category_choices([]) == ["all"]
