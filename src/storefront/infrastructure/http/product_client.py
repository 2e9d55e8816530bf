"""HTTP implementation of the ProductLookup port.

Calls ``GET {base_url}/api/products/{id}`` on the product service and sorts
every outcome into one of three buckets:

    404                        -> ProductNotFoundError
    any other non-2xx, bad body -> UpstreamError
    transport failure/timeout  -> UnavailableError

Nothing is retried here.
"""

from __future__ import annotations

import httpx

from storefront.domain.exceptions import (
    ProductNotFoundError,
    UnavailableError,
    UpstreamError,
    ValidationError,
)
from storefront.domain.model.product import ProductSnapshot
from storefront.domain.model.value_objects import validate_price
from storefront.domain.service.product_lookup import ProductLookup
from storefront.infrastructure.logging import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 5.0


class HttpProductLookup(ProductLookup):

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.Client | None = None,
    ) -> None:
        self._client = client or httpx.Client(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
        )

    def close(self) -> None:
        self._client.close()

    def fetch_product(self, product_id: str) -> ProductSnapshot:
        path = f"/api/products/{product_id}"
        try:
            response = self._client.get(path)
        except httpx.RequestError as exc:
            logger.error(
                "product_lookup_unreachable",
                product_id=product_id,
                error=f"{type(exc).__name__}: {exc}",
            )
            raise UnavailableError(
                f"Product service is unavailable (product '{product_id}'): {exc}"
            ) from exc

        if response.status_code == httpx.codes.NOT_FOUND:
            logger.info("product_lookup_not_found", product_id=product_id)
            raise ProductNotFoundError(product_id)

        if response.is_error:
            logger.error(
                "product_lookup_failed",
                product_id=product_id,
                status_code=response.status_code,
                body=response.text[:200],
            )
            raise UpstreamError(
                f"Product service returned {response.status_code} "
                f"for product '{product_id}'"
            )

        return self._to_snapshot(product_id, response)

    @staticmethod
    def _to_snapshot(product_id: str, response: httpx.Response) -> ProductSnapshot:
        try:
            payload = response.json()
            return ProductSnapshot(
                id=str(payload["id"]),
                name=payload["name"],
                description=payload.get("description"),
                price=validate_price(payload["priceMinor"]),
            )
        except ValidationError as exc:
            logger.error("product_lookup_bad_price", product_id=product_id, error=str(exc))
            raise UpstreamError(
                f"Product service sent an invalid price for product '{product_id}': {exc}"
            ) from exc
        except (ValueError, KeyError, TypeError) as exc:
            logger.error("product_lookup_bad_payload", product_id=product_id, error=str(exc))
            raise UpstreamError(
                f"Product service sent an unreadable response for product '{product_id}'"
            ) from exc
