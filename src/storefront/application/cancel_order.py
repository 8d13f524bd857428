"""Application service: Cancel Order use case.

Every item's quantity is returned to its product's stock before the
order moves to CANCELLED.  The products and the order are committed
together, so a failure half-way (e.g. a product that no longer exists)
leaves all stock levels and the order exactly as they were.

SHIPPED orders cannot be cancelled even though they are not terminal:
shipped goods are not recalled through this path.
"""

from __future__ import annotations

import logging

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.exceptions import (
    EntityNotFoundError,
    IllegalStateError,
    ValidationError,
)
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory

logger = logging.getLogger(__name__)


class CancelOrderHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, order_id: str) -> OrderDTO:
        with self._uow_factory() as uow:
            uow.lock_order(order_id)
            order = uow.orders.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError("Order", order_id)

            if not order.status.can_be_cancelled():
                raise ValidationError(
                    f"Order cannot be cancelled in current status: {order.status.value}"
                )

            uow.lock_products(item.product_id for item in order.items)
            for item in order.items:
                product = uow.products.get_by_id(item.product_id)
                if product is None:
                    raise EntityNotFoundError("Product", item.product_id)
                product.add_stock(item.quantity)
                uow.products.save(product)

            try:
                order.cancel()
            except IllegalStateError as exc:
                raise ValidationError(str(exc)) from exc

            uow.orders.save(order)
            uow.commit()

        logger.info(
            "Order %s cancelled, %d item(s) returned to stock", order.id, order.total_items
        )
        return order_to_dto(order)
