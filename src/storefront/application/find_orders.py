"""Application service: Find Orders use case (queries)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order_status import OrderStatus
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory


class FindOrdersHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def by_id(self, order_id: str) -> OrderDTO:
        with self._uow_factory() as uow:
            order = uow.orders.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError("Order", order_id)
            return order_to_dto(order)

    def by_customer(self, customer_id: str, status: OrderStatus | None = None) -> list[OrderDTO]:
        """Orders of one customer, optionally narrowed to a status."""
        with self._uow_factory() as uow:
            if uow.customers.get_by_id(customer_id) is None:
                raise EntityNotFoundError("Customer", customer_id)
            if status is None:
                orders = uow.orders.list_by_customer(customer_id)
            else:
                orders = uow.orders.list_by_customer_and_status(customer_id, status)
            return [order_to_dto(o) for o in orders]

    def by_status(self, status: OrderStatus) -> list[OrderDTO]:
        with self._uow_factory() as uow:
            return [order_to_dto(o) for o in uow.orders.list_by_status(status)]
