"""Integration tests for Product API endpoints via TestClient."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from fulfilment.api.routes import product_router
from protean.integrations.fastapi import register_exception_handlers


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(product_router)
    register_exception_handlers(app)
    return TestClient(app)


def _create_product(client, **overrides):
    payload = {"name": "KALLAX", "description": "Shelving unit", "price": 49.99, "stock": 5}
    payload.update(overrides)
    response = client.post("/product", json=payload)
    assert response.status_code == 201
    return response.json()


class TestProductEndpoints:
    def test_create(self, client):
        body = _create_product(client)
        assert body["name"] == "KALLAX"
        assert body["price"] == 49.99
        assert body["stock"] == 5

    def test_create_with_id(self, client):
        response = client.post("/product", json={"id": "abc", "name": "KALLAX"})
        assert response.status_code == 422

    def test_create_without_name(self, client):
        response = client.post("/product", json={"price": 1.0})
        assert response.status_code == 422
        assert "Product Name was not set on request." in response.text

    def test_negative_stock_is_unprocessable(self, client):
        response = client.post("/product", json={"name": "KALLAX", "stock": -1})
        assert response.status_code == 422

    def test_list_sorted_by_name(self, client):
        _create_product(client, name="TONSTAD")
        _create_product(client, name="BESTA")
        assert [p["name"] for p in client.get("/product").json()] == ["BESTA", "TONSTAD"]

    def test_get_unknown(self, client):
        response = client.get("/product/missing")
        assert response.status_code == 404
        assert "Product with id of missing does not exist." in response.text

    def test_update(self, client):
        product = _create_product(client)
        response = client.put(f"/product/{product['id']}", json={"name": "BESTA", "stock": 2})
        assert response.status_code == 200
        assert response.json()["name"] == "BESTA"
        assert response.json()["stock"] == 2

    def test_update_without_name(self, client):
        product = _create_product(client)
        response = client.put(f"/product/{product['id']}", json={"stock": 2})
        assert response.status_code == 422

    def test_update_unknown(self, client):
        response = client.put("/product/missing", json={"name": "BESTA"})
        assert response.status_code == 404

    def test_delete(self, client):
        product = _create_product(client)
        assert client.delete(f"/product/{product['id']}").status_code == 204
        assert client.delete(f"/product/{product['id']}").status_code == 404
