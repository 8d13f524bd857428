"""JSON-document-backed implementation of CustomerRepository."""

from __future__ import annotations

from datetime import datetime

from storefront.domain.model.customer import Customer
from storefront.domain.model.value_objects import Email
from storefront.domain.repository.customer_repository import CustomerRepository
from storefront.infrastructure.persistence.json_store import (
    JsonSection,
    address_from_raw,
    address_to_raw,
)


class JsonCustomerRepository(JsonSection[Customer], CustomerRepository):

    section = "customers"

    # --- CustomerRepository interface -----------------------------------------

    def get_by_id(self, customer_id: str) -> Customer | None:
        return self._get(customer_id)

    def exists_by_email(self, email: Email) -> bool:
        return any(c.email == email for c in self._all())

    def save(self, customer: Customer) -> None:
        self._stage(customer.id, customer)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(customer: Customer) -> dict:
        return {
            "id": customer.id,
            "first_name": customer.first_name,
            "last_name": customer.last_name,
            "email": customer.email.value,
            "phone": customer.phone,
            "address": address_to_raw(customer.address),
            "active": customer.active,
            "created_at": customer.created_at.isoformat(),
            "updated_at": customer.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Customer:
        return Customer(
            id=raw["id"],
            first_name=raw["first_name"],
            last_name=raw["last_name"],
            email=Email(raw["email"]),
            phone=raw.get("phone"),
            address=address_from_raw(raw.get("address")),
            active=raw.get("active", True),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
