from storefront.infrastructure.config import Settings


def test_defaults(monkeypatch):
    for name in (
        "PRODUCT_DATABASE_URL",
        "ORDER_DATABASE_URL",
        "PRODUCT_SERVICE_URL",
        "ORDER_SERVICE_URL",
        "PRODUCT_LOOKUP_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()

    assert settings.product_database_url == "sqlite:///data/products.db"
    assert settings.order_database_url == "sqlite:///data/orders.db"
    assert settings.product_service_url == "http://localhost:8081"
    assert settings.product_lookup_timeout == 5.0
    assert settings.gateway_routes == {
        "/api/products": "http://localhost:8081",
        "/api/orders": "http://localhost:8082",
    }


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PRODUCT_SERVICE_URL", "http://product-service:8081")
    monkeypatch.setenv("PRODUCT_LOOKUP_TIMEOUT", "1.5")

    settings = Settings.from_env()

    assert settings.product_service_url == "http://product-service:8081"
    assert settings.product_lookup_timeout == 1.5
    assert settings.gateway_routes["/api/products"] == "http://product-service:8081"
