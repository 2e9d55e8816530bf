"""Domain-level exceptions.

All business rule violations and collaborator failures are expressed as
subclasses of DomainException so the HTTP and CLI layers can catch them
uniformly and map each kind to a distinct user-visible outcome.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


NotFoundError = EntityNotFoundError


class ProductNotFoundError(EntityNotFoundError):
    """The product directory has no product with the given ID."""

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product not found: '{product_id}'")
        self.product_id = product_id


class UpstreamError(DomainException):
    """The product directory was reachable but failed to answer properly."""


class UnavailableError(DomainException):
    """The product directory could not be reached at all."""


class StorageError(DomainException):
    """Local persistence failed; nothing was written."""
