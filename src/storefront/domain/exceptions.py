"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Three kinds are distinguished:

- ``EntityNotFoundError`` — a referenced id does not exist in storage.
- ``ValidationError`` — a business rule was violated by the request.
- ``IllegalStateError`` — an aggregate was asked to do something its
  current state does not allow.
"""

from __future__ import annotations

from typing import Any


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class IllegalStateError(DomainException):
    """An aggregate cannot perform the operation in its current state."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    def __init__(self, entity: str, entity_id: Any) -> None:
        super().__init__(f"{entity} not found: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class CurrencyMismatchError(ValidationError):
    """Two Money values with different currencies were combined."""


class DuplicateOrderItemError(ValidationError):
    """The order already holds an item for this product."""


class ProductUnavailableError(ValidationError):
    """The product is inactive or out of stock."""


class EmptyOrderError(ValidationError):
    """An order without items cannot be confirmed."""


class InvalidStatusTransitionError(ValidationError):
    """The transition table does not allow moving from current to requested."""

    def __init__(self, current: Any, requested: Any) -> None:
        super().__init__(
            f"Cannot transition from {current.value} to {requested.value}"
        )
        self.current = current
        self.requested = requested


class InsufficientStockError(IllegalStateError):
    """More units were requested than the product has in stock."""


class OrderNotModifiableError(IllegalStateError):
    """Items and address can only change while the order is PENDING."""
