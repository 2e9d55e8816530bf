"""Runtime settings, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    product_database_url: str
    order_database_url: str
    product_service_url: str
    order_service_url: str
    product_lookup_timeout: float

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            product_database_url=os.getenv(
                "PRODUCT_DATABASE_URL", "sqlite:///data/products.db"
            ),
            order_database_url=os.getenv(
                "ORDER_DATABASE_URL", "sqlite:///data/orders.db"
            ),
            product_service_url=os.getenv(
                "PRODUCT_SERVICE_URL", "http://localhost:8081"
            ),
            order_service_url=os.getenv("ORDER_SERVICE_URL", "http://localhost:8082"),
            product_lookup_timeout=float(os.getenv("PRODUCT_LOOKUP_TIMEOUT", "5.0")),
        )

    @property
    def gateway_routes(self) -> dict[str, str]:
        """Public path prefix -> upstream base URL for the routing edge."""
        return {
            "/api/products": self.product_service_url,
            "/api/orders": self.order_service_url,
        }
