"""Application service: Remove Item From Order use case.

The inverse of AddItemToOrder: the item leaves the order and its
quantity goes back into the product's stock, in one commit.
"""

from __future__ import annotations

import logging

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory

logger = logging.getLogger(__name__)


class RemoveItemFromOrderHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, order_id: str, item_id: str) -> OrderDTO:
        with self._uow_factory() as uow:
            uow.lock_order(order_id)
            order = uow.orders.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError("Order", order_id)

            item = order.find_item(item_id)
            if item is None:
                raise EntityNotFoundError("OrderItem", item_id)

            uow.lock_products([item.product_id])
            product = uow.products.get_by_id(item.product_id)
            if product is None:
                raise EntityNotFoundError("Product", item.product_id)

            order.remove_item(item_id)
            product.add_stock(item.quantity)

            uow.orders.save(order)
            uow.products.save(product)
            uow.commit()

        logger.info(
            "Removed %d x %s from order %s (total %s)",
            item.quantity, item.product_name, order.id, order.total_amount,
        )
        return order_to_dto(order)
