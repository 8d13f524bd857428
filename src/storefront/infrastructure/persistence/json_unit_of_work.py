"""Unit of Work over a JsonStore.

Repositories stage their saves; ``commit()`` hands every dirty record of
every section to ``JsonStore.apply`` in one atomic write, so an Order and
the Products it touched are persisted together or not at all.
"""

from __future__ import annotations

import logging

from storefront.domain.repository.unit_of_work import UnitOfWork
from storefront.infrastructure.persistence.json_customer_repository import (
    JsonCustomerRepository,
)
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_store import JsonStore

logger = logging.getLogger(__name__)


class JsonUnitOfWork(UnitOfWork):

    customers: JsonCustomerRepository
    products: JsonProductRepository
    orders: JsonOrderRepository

    def __init__(self, store: JsonStore) -> None:
        super().__init__()
        self._store = store

    def _begin(self) -> None:
        self.customers = JsonCustomerRepository(self._store)
        self.products = JsonProductRepository(self._store)
        self.orders = JsonOrderRepository(self._store)

    def _lock(self, kind: str, key: str):
        return self._store.locks.hold(kind, key)

    def commit(self) -> None:
        changes = {
            "customers": self.customers.pending(),
            "products": self.products.pending(),
            "orders": self.orders.pending(),
        }
        self._store.apply(changes)
        logger.debug(
            "Committed %s",
            {section: len(records) for section, records in changes.items()},
        )
        self._begin()

    def rollback(self) -> None:
        self._begin()
