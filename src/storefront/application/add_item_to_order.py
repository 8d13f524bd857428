"""Application service: Add Item To Order use case.

Moves stock from a Product into a PENDING Order.  Both aggregates are
locked, mutated and committed in one unit of work, so the order never
holds an item whose units are still counted as product stock (or the
other way round).
"""

from __future__ import annotations

import logging

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.exceptions import (
    DuplicateOrderItemError,
    EntityNotFoundError,
    OrderNotModifiableError,
    ValidationError,
)
from storefront.domain.model.order import OrderItem
from storefront.domain.model.product import Product
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory

logger = logging.getLogger(__name__)


class AddItemToOrderHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, order_id: str, product_id: str, quantity: int) -> OrderDTO:
        """Add *quantity* units of a product to an order.

        Steps:
        1. Lock and load the order and the product (fail if missing).
        2. Check the product can be sold in that quantity.
        3. Snapshot the product into a new OrderItem and append it.
        4. Take the units out of the product's stock.
        5. Commit both aggregates together.
        """
        with self._uow_factory() as uow:
            uow.lock_order(order_id)
            uow.lock_products([product_id])

            order = uow.orders.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError("Order", order_id)
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError("Product", product_id)
            if not order.can_be_modified():
                raise OrderNotModifiableError(
                    f"Order cannot be modified in status: {order.status.value}"
                )

            self._validate_availability(product, quantity)
            if order.contains_product(product_id):
                raise DuplicateOrderItemError(
                    f"Product {product.name} already exists in this order. "
                    f"Remove it and add it again to change the quantity."
                )

            item = OrderItem.create_from_product(product, quantity)
            order.add_item(item)
            product.remove_stock(quantity)

            uow.orders.save(order)
            uow.products.save(product)
            uow.commit()

        logger.info(
            "Added %d x %s to order %s (total %s)",
            quantity, product.name, order.id, order.total_amount,
        )
        return order_to_dto(order)

    @staticmethod
    def _validate_availability(product: Product, quantity: int) -> None:
        if not product.active:
            raise ValidationError(f"Product is inactive: {product.name}")
        if not product.is_available():
            raise ValidationError(f"Product is not available: {product.name}")
        if not product.has_stock(quantity):
            raise ValidationError(
                f"Insufficient stock for {product.name} "
                f"(requested {quantity}, available {product.stock_quantity})"
            )
