"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order
from storefront.domain.model.order_status import OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_by_customer(self, customer_id: str) -> list[Order]:
        """Return every order placed by a customer."""

    @abstractmethod
    def list_by_status(self, status: OrderStatus) -> list[Order]:
        """Return every order currently in *status*."""

    def list_by_customer_and_status(
        self, customer_id: str, status: OrderStatus
    ) -> list[Order]:
        return [o for o in self.list_by_customer(customer_id) if o.status == status]

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order."""
