"""Application service: Advance Order use case.

Moves a confirmed order through fulfilment:
CONFIRMED -> PREPARING -> SHIPPED -> DELIVERED.
"""

from __future__ import annotations

import logging

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.order_status import OrderStatus
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory

logger = logging.getLogger(__name__)

_STEPS = {
    OrderStatus.PREPARING: "start_preparing",
    OrderStatus.SHIPPED: "ship",
    OrderStatus.DELIVERED: "deliver",
}


class AdvanceOrderHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, order_id: str, target: OrderStatus) -> OrderDTO:
        step = _STEPS.get(target)
        if step is None:
            raise ValidationError(
                f"Cannot advance an order to {target.value}; "
                f"use confirm or cancel instead"
            )

        with self._uow_factory() as uow:
            uow.lock_order(order_id)
            order = uow.orders.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError("Order", order_id)

            previous = order.status
            getattr(order, step)()
            uow.orders.save(order)
            uow.commit()

        logger.info("Order %s moved %s -> %s", order.id, previous.value, order.status.value)
        return order_to_dto(order)
