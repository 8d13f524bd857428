"""Application service: Create Order use case.

Checks the customer may place orders and opens an empty PENDING order
in the store's currency.  Items are added one by one afterwards with
AddItemToOrder.
"""

from __future__ import annotations

import logging

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.order import DEFAULT_CURRENCY, Order
from storefront.domain.model.value_objects import Address
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._uow_factory = uow_factory
        self._currency = currency

    def handle(self, customer_id: str, delivery_address: Address) -> OrderDTO:
        with self._uow_factory() as uow:
            customer = uow.customers.get_by_id(customer_id)
            if customer is None:
                raise EntityNotFoundError("Customer", customer_id)
            if not customer.can_place_orders():
                raise ValidationError("Customer is inactive and cannot place orders")

            order = Order.create(customer_id, delivery_address, self._currency)
            uow.orders.save(order)
            uow.commit()

        logger.info("Order %s created for customer %s", order.id, customer_id)
        return order_to_dto(order)
