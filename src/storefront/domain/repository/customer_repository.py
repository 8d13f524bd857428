"""Abstract repository for Customer entity."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.customer import Customer
from storefront.domain.model.value_objects import Email


class CustomerRepository(ABC):

    @abstractmethod
    def get_by_id(self, customer_id: str) -> Customer | None:
        """Return a customer by its ID, or None if not found."""

    @abstractmethod
    def exists_by_email(self, email: Email) -> bool:
        """True if a customer is already registered with *email*."""

    @abstractmethod
    def save(self, customer: Customer) -> None:
        """Persist a new or updated customer."""
