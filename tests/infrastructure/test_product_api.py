"""HTTP tests for the product service app."""

import pytest
from fastapi.testclient import TestClient

from storefront.infrastructure.api.app import create_product_app

UNKNOWN = "00000000-0000-4000-8000-000000000000"

LAPTOP = {
    "name": "ASUS Laptop",
    "description": "Powerful gaming laptop.",
    "price": 14.99,
    "categories": ["Electronics", "Computers"],
}


@pytest.fixture
def client(product_repo):
    return TestClient(create_product_app(product_repo=product_repo))


def _create(client, **overrides) -> dict:
    response = client.post("/api/products", json={**LAPTOP, **overrides})
    assert response.status_code == 201, response.text
    return response.json()


class TestCreate:

    def test_create_returns_201_with_camel_case_body(self, client):
        body = _create(client)
        assert body["name"] == "ASUS Laptop"
        assert body["price"] == 14.99
        assert body["priceMinor"] == 1499
        assert body["categories"] == ["Electronics", "Computers"]
        assert body["id"]
        assert body["createdAt"]

    def test_price_truncated(self, client):
        assert _create(client, price=14.999)["priceMinor"] == 1499

    def test_short_name_is_400(self, client):
        response = client.post("/api/products", json={**LAPTOP, "name": "ab"})
        assert response.status_code == 400
        assert response.json()["error"] == "ValidationError"

    def test_empty_categories_is_400(self, client):
        response = client.post("/api/products", json={**LAPTOP, "categories": []})
        assert response.status_code == 400

    def test_price_that_truncates_to_zero_is_400(self, client):
        response = client.post("/api/products", json={**LAPTOP, "price": 0.001})
        assert response.status_code == 400
        assert "positive" in response.json()["detail"]


class TestRead:

    def test_show(self, client):
        created = _create(client)
        response = client.get(f"/api/products/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_show_missing_is_404(self, client):
        response = client.get(f"/api/products/{UNKNOWN}")
        assert response.status_code == 404
        assert UNKNOWN in response.json()["detail"]

    def test_show_malformed_id_is_400(self, client):
        assert client.get("/api/products/not-a-uuid").status_code == 400

    def test_list(self, client):
        _create(client, name="First product")
        _create(client, name="Second product")
        assert len(client.get("/api/products").json()) == 2

    def test_search(self, client):
        _create(client, name="Zebra Laptop")
        _create(client, name="ASUS laptop")
        _create(client, name="Desk Lamp")
        response = client.get("/api/products/search", params={"name": "LAPTOP"})
        assert response.status_code == 200
        assert [p["name"] for p in response.json()] == ["ASUS laptop", "Zebra Laptop"]

    def test_search_without_name_is_400(self, client):
        assert client.get("/api/products/search").status_code == 400


class TestUpdate:

    def test_partial_update(self, client):
        created = _create(client)
        response = client.put(f"/api/products/{created['id']}", json={"price": 20})
        assert response.status_code == 200
        body = response.json()
        assert body["priceMinor"] == 2000
        assert body["name"] == "ASUS Laptop"
        assert body["categories"] == ["Electronics", "Computers"]

    def test_update_missing_is_404(self, client):
        response = client.put(f"/api/products/{UNKNOWN}", json={"name": "Whatever"})
        assert response.status_code == 404


class TestDelete:

    def test_delete(self, client):
        created = _create(client)
        response = client.delete(f"/api/products/{created['id']}")
        assert response.status_code == 204
        assert client.get(f"/api/products/{created['id']}").status_code == 404

    def test_delete_missing_is_404(self, client):
        assert client.delete(f"/api/products/{UNKNOWN}").status_code == 404


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "product-service"}
