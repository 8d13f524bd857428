"""Abstract Unit of Work.

Every lifecycle operation touches an Order and one or more Products.
Instead of saving each aggregate independently, handlers stage their
saves on the unit of work and call ``commit()`` once; implementations
must make that commit all-or-nothing.  Leaving the ``with`` block
without committing discards the staged changes.

The unit of work is also where callers take per-aggregate locks.  A
handler locks at most one order and always locks it before any product;
products are locked in sorted id order.

Usage::

    with uow_factory() as uow:
        uow.lock_order(order_id)
        order = uow.orders.get_by_id(order_id)
        ...
        uow.orders.save(order)
        uow.commit()
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from contextlib import ExitStack
from typing import Callable

from storefront.domain.repository.customer_repository import CustomerRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UnitOfWork(ABC):

    orders: OrderRepository
    products: ProductRepository
    customers: CustomerRepository

    def __init__(self) -> None:
        self._held = ExitStack()

    def __enter__(self) -> UnitOfWork:
        self._held = ExitStack()
        self._begin()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type is not None:
            logger.warning("Unit of work rolled back: %s", exc_val)
        try:
            self.rollback()
        finally:
            self._held.close()

    # --- Locking --------------------------------------------------------------

    def lock_order(self, order_id: str) -> None:
        self._held.enter_context(self._lock("order", order_id))

    def lock_products(self, product_ids: Iterable[str]) -> None:
        for product_id in sorted(set(product_ids)):
            self._held.enter_context(self._lock("product", product_id))

    # --- Transaction ----------------------------------------------------------

    @abstractmethod
    def commit(self) -> None:
        """Persist every staged change at once."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard staged changes. A no-op after a successful commit."""

    # --- Implementation hooks -------------------------------------------------

    @abstractmethod
    def _begin(self) -> None:
        """Prepare fresh repositories for a new unit of work."""

    @abstractmethod
    def _lock(self, kind: str, key: str):
        """Return a context manager holding the lock for (*kind*, *key*)."""


UnitOfWorkFactory = Callable[[], UnitOfWork]
