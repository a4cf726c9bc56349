# tests/test_orders.py
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from styleshop.main import app

client = TestClient(app)

CUSTOMER = {"name": "Alice", "email": "alice@example.com", "address": "1 Main St"}


def test_order_on_empty_cart_is_rejected():
    r = client.post("/api/orders", json={"customerInfo": CUSTOMER})
    assert r.status_code == 400
    assert r.json() == {"message": "Cart is empty"}
    assert client.get("/api/orders").json() == []


def test_place_order_snapshots_and_clears_cart():
    client.post("/api/cart", json={"productId": "1", "quantity": 2})
    client.post("/api/cart", json={"productId": "3"})
    cart = client.get("/api/cart").json()

    r = client.post("/api/orders", json={"customerInfo": CUSTOMER})
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Order placed successfully"

    order = body["order"]
    assert order["items"] == cart
    assert order["total"] == pytest.approx(sum(it["price"] * it["quantity"] for it in cart))
    assert order["total"] == pytest.approx(2 * 29.99 + 129.99)
    assert order["customerInfo"] == CUSTOMER
    assert order["status"] == "pending"
    datetime.fromisoformat(order["createdAt"].replace("Z", "+00:00"))

    assert client.get("/api/cart").json() == []
    assert client.get("/api/orders").json() == [order]


def test_orders_listed_in_insertion_order():
    ids = []
    for pid in ("5", "6"):
        client.post("/api/cart", json={"productId": pid})
        ids.append(client.post("/api/orders", json={"customerInfo": CUSTOMER}).json()["order"]["id"])
    assert [o["id"] for o in client.get("/api/orders").json()] == ids
    assert len(set(ids)) == 2


def test_order_without_customer_info():
    client.post("/api/cart", json={"productId": "8"})
    r = client.post("/api/orders", json={})
    assert r.status_code == 200
    assert r.json()["order"]["customerInfo"] is None


def test_order_is_unaffected_by_later_cart_changes():
    client.post("/api/cart", json={"productId": "2"})
    order = client.post("/api/orders", json={"customerInfo": CUSTOMER}).json()["order"]
    client.post("/api/cart", json={"productId": "2", "quantity": 4})
    assert client.get("/api/orders").json()[0]["items"] == order["items"]


def test_order_without_body_on_empty_cart():
    r = client.post("/api/orders")
    assert r.status_code == 400
    assert r.json() == {"message": "Cart is empty"}


def test_order_without_body_places_order():
    client.post("/api/cart", json={"productId": "1"})
    r = client.post("/api/orders")
    assert r.status_code == 200
    order = r.json()["order"]
    assert order["customerInfo"] is None
    assert order["total"] == 29.99
    assert client.get("/api/cart").json() == []
    assert client.get("/api/orders").json() == [order]
