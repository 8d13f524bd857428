"""Customer entity.

Customers are only read by the order lifecycle (to check they may place
orders); registration and profile edits are plain catalog-style CRUD.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Address, Email


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Customer:

    id: str
    first_name: str
    last_name: str
    email: Email
    phone: str | None = None
    address: Address | None = None
    active: bool = True
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    @staticmethod
    def create(
        first_name: str,
        last_name: str,
        email: Email,
        phone: str | None = None,
        address: Address | None = None,
    ) -> Customer:
        customer = Customer(
            id=str(uuid4()),
            first_name="",
            last_name="",
            email=email,
        )
        customer.update_customer_info(first_name, last_name, email, phone, address)
        customer.created_at = customer.updated_at
        return customer

    def update_customer_info(
        self,
        first_name: str,
        last_name: str,
        email: Email,
        phone: str | None,
        address: Address | None,
    ) -> None:
        if not first_name or not first_name.strip():
            raise ValidationError("First name cannot be null or empty")
        if not last_name or not last_name.strip():
            raise ValidationError("Last name cannot be null or empty")
        if email is None:
            raise ValidationError("Email cannot be null")
        if phone is not None and not phone.strip():
            raise ValidationError("Phone cannot be empty (but can be omitted)")

        self.first_name = first_name.strip()
        self.last_name = last_name.strip()
        self.email = email
        self.phone = phone.strip() if phone is not None else None
        self.address = address
        self.updated_at = _now()

    def activate(self) -> None:
        self.active = True
        self.updated_at = _now()

    def deactivate(self) -> None:
        self.active = False
        self.updated_at = _now()

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def can_place_orders(self) -> bool:
        return self.active
