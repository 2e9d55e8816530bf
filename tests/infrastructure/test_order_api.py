"""HTTP tests for the order service app."""

import httpx
import pytest
from fastapi.testclient import TestClient

from storefront.domain.exceptions import UnavailableError, UpstreamError
from storefront.domain.model.product import ProductSnapshot
from storefront.infrastructure.api.app import create_order_app, create_product_app
from storefront.infrastructure.http.product_client import HttpProductLookup
from tests.fakes import FakeProductLookup

LAPTOP = "123e4567-e89b-12d3-a456-426614174001"
MOUSE = "123e4567-e89b-12d3-a456-426614174002"
BROKEN = "123e4567-e89b-12d3-a456-4266141740aa"
OFFLINE = "123e4567-e89b-12d3-a456-4266141740bb"
MISSING = "123e4567-e89b-12d3-a456-4266141740ff"
UNKNOWN_ORDER = "00000000-0000-4000-8000-000000000000"

ADDRESS = "10 Main Street, Springfield"


@pytest.fixture
def lookup():
    return FakeProductLookup(
        products=[
            ProductSnapshot(id=LAPTOP, name="ASUS Laptop", description=None, price=149999),
            ProductSnapshot(id=MOUSE, name="Wireless Mouse", description=None, price=1499),
        ],
        errors={
            BROKEN: UpstreamError("Product service returned 500"),
            OFFLINE: UnavailableError("Product service is unavailable"),
        },
    )


@pytest.fixture
def client(order_repo, lookup):
    return TestClient(create_order_app(order_repo=order_repo, product_lookup=lookup))


def _order_body(*items: tuple[str, int], address: str = ADDRESS) -> dict:
    return {
        "deliveryAddress": address,
        "products": [{"productId": pid, "quantity": qty} for pid, qty in items],
    }


def _create(client, *items: tuple[str, int]) -> dict:
    response = client.post("/api/orders", json=_order_body(*items))
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateOrder:

    def test_created(self, client):
        body = _create(client, (LAPTOP, 1), (MOUSE, 2))
        assert body["deliveryAddress"] == ADDRESS
        assert body["id"]
        assert body["createdAt"]
        assert [
            (i["productId"], i["quantity"], i["price"], i["priceMinor"])
            for i in body["orderItems"]
        ] == [(LAPTOP, 1, 1499.99, 149999), (MOUSE, 2, 14.99, 1499)]

    def test_client_supplied_price_is_ignored(self, client):
        body = _order_body((MOUSE, 1))
        body["products"][0]["price"] = 0.01
        response = client.post("/api/orders", json=body)
        assert response.status_code == 201
        assert response.json()["orderItems"][0]["priceMinor"] == 1499

    def test_unknown_product_is_404_and_nothing_saved(self, client, order_repo):
        response = client.post("/api/orders", json=_order_body((LAPTOP, 1), (MISSING, 1)))
        assert response.status_code == 404
        assert response.json()["error"] == "ProductNotFoundError"
        assert MISSING in response.json()["detail"]
        assert order_repo.list_all() == []

    def test_upstream_failure_is_502(self, client, order_repo):
        response = client.post("/api/orders", json=_order_body((BROKEN, 1)))
        assert response.status_code == 502
        assert order_repo.list_all() == []

    def test_unavailable_directory_is_503(self, client, order_repo):
        response = client.post("/api/orders", json=_order_body((LAPTOP, 1), (OFFLINE, 1)))
        assert response.status_code == 503
        assert order_repo.list_all() == []

    def test_empty_products_is_400(self, client, lookup):
        response = client.post("/api/orders", json=_order_body())
        assert response.status_code == 400
        assert lookup.calls == []

    def test_short_address_is_400(self, client):
        response = client.post("/api/orders", json=_order_body((LAPTOP, 1), address="abc"))
        assert response.status_code == 400

    def test_zero_quantity_is_400(self, client, lookup):
        response = client.post("/api/orders", json=_order_body((LAPTOP, 0)))
        assert response.status_code == 400
        assert lookup.calls == []

    def test_malformed_product_id_is_400(self, client, lookup):
        response = client.post("/api/orders", json=_order_body(("not-a-uuid", 1)))
        assert response.status_code == 400
        assert lookup.calls == []


class TestReadOrders:

    def test_show(self, client):
        created = _create(client, (LAPTOP, 1))
        response = client.get(f"/api/orders/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_show_missing_is_404(self, client):
        assert client.get(f"/api/orders/{UNKNOWN_ORDER}").status_code == 404

    def test_list(self, client):
        _create(client, (LAPTOP, 1))
        _create(client, (MOUSE, 1))
        assert len(client.get("/api/orders").json()) == 2

    def test_search_by_product(self, client):
        with_laptop = _create(client, (LAPTOP, 1), (MOUSE, 1))
        _create(client, (MOUSE, 3))
        response = client.get("/api/orders/search", params={"productId": LAPTOP})
        assert response.status_code == 200
        assert [o["id"] for o in response.json()] == [with_laptop["id"]]

    def test_search_without_match_is_404(self, client):
        _create(client, (MOUSE, 1))
        response = client.get("/api/orders/search", params={"productId": LAPTOP})
        assert response.status_code == 404

    def test_search_malformed_id_is_400(self, client):
        assert client.get("/api/orders/search", params={"productId": "x"}).status_code == 400


class TestUpdateAndDelete:

    def test_update_delivery_address(self, client):
        created = _create(client, (LAPTOP, 1))
        response = client.put(
            f"/api/orders/{created['id']}", json={"deliveryAddress": "22 Side Road"}
        )
        assert response.status_code == 200
        body = response.json()
        assert body["deliveryAddress"] == "22 Side Road"
        assert body["orderItems"] == created["orderItems"]

    def test_update_invalid_address_is_400(self, client):
        created = _create(client, (LAPTOP, 1))
        response = client.put(f"/api/orders/{created['id']}", json={"deliveryAddress": "x"})
        assert response.status_code == 400

    def test_update_missing_is_404(self, client):
        response = client.put(
            f"/api/orders/{UNKNOWN_ORDER}", json={"deliveryAddress": "22 Side Road"}
        )
        assert response.status_code == 404

    def test_delete(self, client):
        created = _create(client, (LAPTOP, 1))
        assert client.delete(f"/api/orders/{created['id']}").status_code == 204
        assert client.get(f"/api/orders/{created['id']}").status_code == 404

    def test_delete_missing_is_404(self, client):
        assert client.delete(f"/api/orders/{UNKNOWN_ORDER}").status_code == 404


def test_health(client):
    assert client.get("/health").json() == {"status": "ok", "service": "order-service"}


class TestAgainstLiveProductService:
    """Order service resolving products over HTTP against the real product app."""

    @pytest.fixture
    def product_client(self, product_repo):
        return TestClient(create_product_app(product_repo=product_repo))

    @pytest.fixture
    def order_client(self, order_repo, product_client):
        lookup = HttpProductLookup("http://testserver", client=product_client)
        return TestClient(create_order_app(order_repo=order_repo, product_lookup=lookup))

    def _add_product(self, product_client, price: float) -> str:
        response = product_client.post(
            "/api/products",
            json={"name": "ASUS Laptop", "price": price, "categories": ["Electronics"]},
        )
        return response.json()["id"]

    def test_price_is_snapshotted_from_directory(self, product_client, order_client):
        product_id = self._add_product(product_client, 14.99)

        order = order_client.post("/api/orders", json=_order_body((product_id, 2))).json()
        product_client.put(f"/api/products/{product_id}", json={"price": 99.0})

        reloaded = order_client.get(f"/api/orders/{order['id']}").json()
        assert reloaded["orderItems"][0]["priceMinor"] == 1499

    def test_unknown_product_is_404(self, order_client, order_repo):
        response = order_client.post("/api/orders", json=_order_body((MISSING, 1)))
        assert response.status_code == 404
        assert order_repo.list_all() == []


def test_invalid_price_from_directory_is_502(order_repo):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={"id": LAPTOP, "name": "ASUS Laptop", "price": 0.0, "priceMinor": 0},
        )

    lookup = HttpProductLookup(
        "http://products.test",
        client=httpx.Client(base_url="http://products.test", transport=httpx.MockTransport(handler)),
    )
    client = TestClient(create_order_app(order_repo=order_repo, product_lookup=lookup))

    response = client.post("/api/orders", json=_order_body((LAPTOP, 1)))

    assert response.status_code == 502
    assert response.json()["error"] == "UpstreamError"
    assert order_repo.list_all() == []
