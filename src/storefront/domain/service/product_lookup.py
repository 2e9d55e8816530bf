"""Port: the order side's only view of the product directory.

Implementations fetch one product by ID from wherever the directory lives
and translate every failure into one of three domain errors, so callers
can tell a missing product from a failing or unreachable directory:

- ``ProductNotFoundError``: the directory has no such product.
- ``UpstreamError``: the directory answered with an error status or an
  unreadable body.
- ``UnavailableError``: the directory could not be reached (connection
  refused, DNS failure, timeout).

Lookups are read-only and never retried here; retry policy belongs to
the caller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import ProductSnapshot


class ProductLookup(ABC):

    @abstractmethod
    def fetch_product(self, product_id: str) -> ProductSnapshot:
        """Return the current snapshot of a product or raise a lookup error."""
