"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, products are added and removed from the catalog. Orders
only ever see a ProductSnapshot taken at order time.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import (
    to_major_units,
    to_minor_units,
    validate_price,
)

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 1000
CATEGORY_MAX_LENGTH = 100


@dataclass(frozen=True)
class ProductSnapshot:
    """What the order side knows about a product at lookup time."""

    id: str
    name: str
    description: str | None
    price: int  # minor units


@dataclass
class Product:
    """A product in the catalog.

    ``price`` is held in integer minor units. ``categories`` is a genuine
    ordered list of strings; its JSON encoding is the storage adapter's
    concern. ``id`` and ``created_at`` are assigned by the repository.
    """

    id: str | None
    name: str
    price: int
    categories: list[str]
    description: str | None = None
    created_at: datetime | None = None

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        name: str,
        price: float,
        categories: list[str],
        description: str | None = None,
    ) -> Product:
        """Create a new product from a major-unit price, enforcing all invariants."""
        product = Product(
            id=None,
            name=_validate_name(name),
            price=0,
            categories=_validate_categories(categories),
            description=_validate_description(description),
        )
        product.set_price(price)
        return product

    # --- Mutations ------------------------------------------------------------

    def set_price(self, major: float) -> None:
        """Set the price from major units, truncating to whole minor units.

        This does NOT affect any existing orders because orders
        capture a price snapshot at creation time.
        """
        self.price = validate_price(to_minor_units(major))

    @property
    def price_major(self) -> float:
        return to_major_units(self.price)

    def update(
        self,
        name: str | None = None,
        description: str | None = None,
        price: float | None = None,
        categories: list[str] | None = None,
    ) -> None:
        """Apply a partial update; ``None`` leaves a field unchanged."""
        if name is not None:
            self.name = _validate_name(name)
        if description is not None:
            self.description = _validate_description(description)
        if price is not None:
            self.set_price(price)
        if categories is not None:
            self.categories = _validate_categories(categories)


def _validate_name(name: str) -> str:
    if not name or not name.strip():
        raise ValidationError("Product name is required")
    if not NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH:
        raise ValidationError(
            f"Product name must be between {NAME_MIN_LENGTH} "
            f"and {NAME_MAX_LENGTH} characters"
        )
    return name


def _validate_description(description: str | None) -> str | None:
    if description is not None and len(description) > DESCRIPTION_MAX_LENGTH:
        raise ValidationError(
            f"Description cannot be longer than {DESCRIPTION_MAX_LENGTH} characters"
        )
    return description


def _validate_categories(categories: list[str]) -> list[str]:
    if not categories:
        raise ValidationError("At least one category is required")
    for category in categories:
        if not isinstance(category, str) or not category.strip():
            raise ValidationError("Category names cannot be blank")
        if len(category) > CATEGORY_MAX_LENGTH:
            raise ValidationError(
                f"Category cannot be longer than {CATEGORY_MAX_LENGTH} characters"
            )
    return list(categories)
