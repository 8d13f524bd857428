"""In-memory fake repositories and unit of work for testing.

These implement the same abstract interfaces as the JSON adapters but
keep everything in dicts. No file I/O, no side effects.

Objects are deep-copied on the way in and out, so a handler that fails
half-way cannot leak mutations into the "database". As with a real
store, only ``commit()`` makes changes visible.
"""

from __future__ import annotations

import copy

from storefront.domain.model.customer import Customer
from storefront.domain.model.order import Order
from storefront.domain.model.order_status import OrderStatus
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Email
from storefront.domain.repository.customer_repository import CustomerRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.unit_of_work import UnitOfWork
from storefront.infrastructure.locks import AggregateLocks


class FakeStore:
    """The shared "database" that fake units of work commit into."""

    def __init__(
        self,
        products: list[Product] | None = None,
        customers: list[Customer] | None = None,
        orders: list[Order] | None = None,
    ) -> None:
        self.products: dict[str, Product] = {p.id: copy.deepcopy(p) for p in products or []}
        self.customers: dict[str, Customer] = {c.id: copy.deepcopy(c) for c in customers or []}
        self.orders: dict[str, Order] = {o.id: copy.deepcopy(o) for o in orders or []}
        self.locks = AggregateLocks()
        self.commits = 0
        self.fail_on_commit = False

    def unit_of_work(self) -> FakeUnitOfWork:
        return FakeUnitOfWork(self)

    # --- Test helpers ---------------------------------------------------------

    def product(self, product_id: str) -> Product:
        return copy.deepcopy(self.products[product_id])

    def order(self, order_id: str) -> Order:
        return copy.deepcopy(self.orders[order_id])


class _FakeSection:

    def __init__(self, records: dict) -> None:
        self._records = records
        self.staged: dict = {}

    def _get(self, key: str):
        if key in self.staged:
            return self.staged[key]
        obj = self._records.get(key)
        if obj is None:
            return None
        obj = copy.deepcopy(obj)
        self.staged[key] = obj
        return obj

    def _all(self) -> list:
        keys = list(self._records) + [k for k in self.staged if k not in self._records]
        return [self._get(key) for key in keys]


class FakeOrderRepository(_FakeSection, OrderRepository):

    def __init__(self, records: dict[str, Order]) -> None:
        super().__init__(records)
        self.saved: set[str] = set()

    def get_by_id(self, order_id: str) -> Order | None:
        return self._get(order_id)

    def list_by_customer(self, customer_id: str) -> list[Order]:
        return [o for o in self._all() if o.customer_id == customer_id]

    def list_by_status(self, status: OrderStatus) -> list[Order]:
        return [o for o in self._all() if o.status == status]

    def save(self, order: Order) -> None:
        self.staged[order.id] = order
        self.saved.add(order.id)


class FakeProductRepository(_FakeSection, ProductRepository):

    def __init__(self, records: dict[str, Product]) -> None:
        super().__init__(records)
        self.saved: set[str] = set()

    def get_by_id(self, product_id: str) -> Product | None:
        return self._get(product_id)

    def list_all(self) -> list[Product]:
        return self._all()

    def save(self, product: Product) -> None:
        self.staged[product.id] = product
        self.saved.add(product.id)


class FakeCustomerRepository(_FakeSection, CustomerRepository):

    def __init__(self, records: dict[str, Customer]) -> None:
        super().__init__(records)
        self.saved: set[str] = set()

    def get_by_id(self, customer_id: str) -> Customer | None:
        return self._get(customer_id)

    def exists_by_email(self, email: Email) -> bool:
        return any(c.email == email for c in self._all())

    def save(self, customer: Customer) -> None:
        self.staged[customer.id] = customer
        self.saved.add(customer.id)


class FakeUnitOfWork(UnitOfWork):

    orders: FakeOrderRepository
    products: FakeProductRepository
    customers: FakeCustomerRepository

    def __init__(self, store: FakeStore) -> None:
        super().__init__()
        self._store = store

    def _begin(self) -> None:
        self.orders = FakeOrderRepository(self._store.orders)
        self.products = FakeProductRepository(self._store.products)
        self.customers = FakeCustomerRepository(self._store.customers)

    def _lock(self, kind: str, key: str):
        return self._store.locks.hold(kind, key)

    def commit(self) -> None:
        if self._store.fail_on_commit:
            raise OSError("simulated storage failure")
        for repo, records in (
            (self.orders, self._store.orders),
            (self.products, self._store.products),
            (self.customers, self._store.customers),
        ):
            for key in repo.saved:
                records[key] = copy.deepcopy(repo.staged[key])
        self._store.commits += 1
        self._begin()

    def rollback(self) -> None:
        self._begin()
