"""Value Objects and conversions shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError

MAX_PRICE = 100_000_000


def to_minor_units(major: float) -> int:
    """Convert a major-unit amount (e.g. 14.99) to integer minor units.

    Multiplies by 100 and truncates toward zero, so 14.999 becomes 1499
    and binary float error can drop a cent (0.29 becomes 28). Existing
    stored prices depend on this exact rule.
    """
    return int(major * 100)


def to_major_units(minor: int) -> float:
    return minor / 100


def validate_price(price: int) -> int:
    if isinstance(price, bool) or not isinstance(price, int):
        raise ValidationError(
            f"Price must be an integer amount of minor units, got {type(price).__name__}"
        )
    if price <= 0:
        raise ValidationError("Price must be positive")
    if price > MAX_PRICE:
        raise ValidationError(f"Price cannot exceed {MAX_PRICE}")
    return price


def parse_identifier(value: object, field_name: str = "id") -> str:
    """Return the canonical string form of a UUID, or raise ValidationError."""
    if isinstance(value, uuid.UUID):
        return str(value)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    try:
        return str(uuid.UUID(value.strip()))
    except ValueError as exc:
        raise ValidationError(f"Malformed {field_name}: '{value}'") from exc


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class DeliveryAddress:
    """Where an order ships to; 5 to 255 characters after trimming."""

    value: str

    MIN_LENGTH = 5
    MAX_LENGTH = 255

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError("Delivery address is required")
        length = len(self.value.strip())
        if length < self.MIN_LENGTH or length > self.MAX_LENGTH:
            raise ValidationError(
                f"Delivery address must be between {self.MIN_LENGTH} "
                f"and {self.MAX_LENGTH} characters"
            )
        object.__setattr__(self, "value", self.value.strip())

    def __str__(self) -> str:
        return self.value
