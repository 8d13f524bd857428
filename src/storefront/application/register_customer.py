"""Application service: Register Customer use case."""

from __future__ import annotations

import logging

from storefront.application.dto import CustomerDTO, customer_to_dto
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.customer import Customer
from storefront.domain.model.value_objects import Address, Email
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory

logger = logging.getLogger(__name__)


class RegisterCustomerHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(
        self,
        first_name: str,
        last_name: str,
        email: str,
        phone: str | None = None,
        address: Address | None = None,
    ) -> CustomerDTO:
        """Register a new customer; e-mail addresses must be unique."""
        parsed = Email(email)
        with self._uow_factory() as uow:
            if uow.customers.exists_by_email(parsed):
                raise ValidationError(f"Email already registered: {parsed}")

            customer = Customer.create(first_name, last_name, parsed, phone, address)
            uow.customers.save(customer)
            uow.commit()

        logger.info("Customer %s registered (%s)", customer.id, parsed)
        return customer_to_dto(customer)

    def show(self, customer_id: str) -> CustomerDTO:
        with self._uow_factory() as uow:
            customer = uow.customers.get_by_id(customer_id)
            if customer is None:
                raise EntityNotFoundError("Customer", customer_id)
            return customer_to_dto(customer)

    def set_active(self, customer_id: str, active: bool) -> CustomerDTO:
        """Allow or stop a customer from placing new orders."""
        with self._uow_factory() as uow:
            customer = uow.customers.get_by_id(customer_id)
            if customer is None:
                raise EntityNotFoundError("Customer", customer_id)
            if active:
                customer.activate()
            else:
                customer.deactivate()
            uow.customers.save(customer)
            uow.commit()
        return customer_to_dto(customer)
