"""Application service: Confirm Order use case.

PENDING -> CONFIRMED.  Stock was already taken when the items were
added, so confirming touches the Order aggregate only.
"""

from __future__ import annotations

import logging

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.exceptions import (
    EmptyOrderError,
    EntityNotFoundError,
    ValidationError,
)
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory

logger = logging.getLogger(__name__)


class ConfirmOrderHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, order_id: str) -> OrderDTO:
        with self._uow_factory() as uow:
            uow.lock_order(order_id)
            order = uow.orders.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError("Order", order_id)

            if order.is_empty():
                raise EmptyOrderError("Cannot confirm an empty order")
            if order.is_completed():
                raise ValidationError(f"Order is already completed: {order.status.value}")

            order.confirm()
            uow.orders.save(order)
            uow.commit()

        logger.info("Order %s confirmed", order.id)
        return order_to_dto(order)
