"""Integration tests for order history and status tracking endpoints."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from ordering.api.routes import cart_router, order_router
from protean.integrations.fastapi import register_exception_handlers

SHIPPING = {"street": "500 Howard St", "city": "San Francisco", "state": "CA", "postal_code": "94105", "country": "US"}


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(cart_router)
    app.include_router(order_router)
    register_exception_handlers(app)
    return TestClient(app)


def _place_order(client, customer_id="cust-100"):
    cart_id = client.post("/carts", json={"customer_id": customer_id}).json()["cart_id"]
    client.post(f"/carts/{cart_id}/items", json={"product_id": "coat", "unit_price": 240.0, "quantity": 1})
    response = client.post(
        f"/carts/{cart_id}/checkout",
        json={"first_name": "Ada", "last_name": "Lovelace", "email": "ada@example.com", "shipping": SHIPPING},
    )
    assert response.json()["status"] == "Placed"
    return response.json()["order_id"]


@pytest.fixture()
def order_id(client):
    return _place_order(client)


class TestOrderHistory:
    def test_lists_customer_orders(self, client):
        first = _place_order(client)
        second = _place_order(client)
        _place_order(client, customer_id="cust-200")

        response = client.get("/orders", params={"customer_id": "cust-100"})
        assert response.status_code == 200
        data = response.json()
        assert {o["order_id"] for o in data} == {first, second}
        assert all(o["customer_id"] == "cust-100" for o in data)
        assert all(o["placed_at"] for o in data)

    def test_customer_without_orders(self, client):
        assert client.get("/orders", params={"customer_id": "cust-empty"}).json() == []

    def test_customer_id_required(self, client):
        assert client.get("/orders").status_code == 422


class TestOrderStatusEndpoint:
    def test_advances_status(self, client, order_id):
        response = client.put(f"/orders/{order_id}/status", json={"status": "Processing"})
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "Processing"
        assert data["updated_at"] is not None
        assert client.get(f"/orders/{order_id}").json()["status"] == "Processing"

    def test_full_lifecycle(self, client, order_id):
        for status in ("processing", "shipped", "delivered"):
            assert client.put(f"/orders/{order_id}/status", json={"status": status}).status_code == 200
        assert client.get(f"/orders/{order_id}").json()["status"] == "Delivered"

    def test_invalid_transition(self, client, order_id):
        response = client.put(f"/orders/{order_id}/status", json={"status": "Delivered"})
        assert response.status_code == 400
        assert client.get(f"/orders/{order_id}").json()["status"] == "Pending"

    def test_unknown_status(self, client, order_id):
        assert client.put(f"/orders/{order_id}/status", json={"status": "Lost"}).status_code == 400

    def test_missing_status(self, client, order_id):
        assert client.put(f"/orders/{order_id}/status", json={}).status_code == 422

    def test_unknown_order(self, client):
        assert client.put("/orders/missing/status", json={"status": "Processing"}).status_code == 404
