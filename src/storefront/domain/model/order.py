"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its items.  All item-collection
and status invariants are enforced here; the transition rules themselves
live in ``order_status``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from storefront.domain.exceptions import (
    CurrencyMismatchError,
    DuplicateOrderItemError,
    EmptyOrderError,
    EntityNotFoundError,
    IllegalStateError,
    InsufficientStockError,
    OrderNotModifiableError,
    ProductUnavailableError,
    ValidationError,
)
from storefront.domain.model.order_status import OrderStatus, ensure_transition
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Address, Money

DEFAULT_CURRENCY = "BRL"


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class OrderItem:
    """Captures the price snapshot of a product at the moment it was added.

    ``total_price`` is computed once by the factories and never again, so
    later catalog price changes cannot alter an existing order.
    """

    id: str
    product_id: str
    product_name: str
    unit_price: Money
    quantity: int
    total_price: Money

    @staticmethod
    def create(
        product_id: str,
        product_name: str,
        unit_price: Money,
        quantity: int,
    ) -> OrderItem:
        if not product_id:
            raise ValidationError("Product ID cannot be null")
        if not product_name or not product_name.strip():
            raise ValidationError("Product name cannot be null or empty")
        if unit_price is None or unit_price.is_negative():
            raise ValidationError("Unit price cannot be null or negative")
        if quantity is None or quantity <= 0:
            raise ValidationError("Quantity must be positive")

        return OrderItem(
            id=str(uuid4()),
            product_id=product_id,
            product_name=product_name.strip(),
            unit_price=unit_price,
            quantity=quantity,
            total_price=unit_price * quantity,
        )

    @staticmethod
    def create_from_product(product: Product, quantity: int) -> OrderItem:
        """Snapshot *product* as it is right now."""
        if product is None:
            raise ValidationError("Product cannot be null")
        if not product.is_available():
            raise ProductUnavailableError(f"Product is not available: {product.name}")
        if not product.has_stock(quantity):
            raise InsufficientStockError(
                f"Insufficient stock for product: {product.name} "
                f"(requested {quantity}, available {product.stock_quantity})"
            )
        return OrderItem.create(product.id, product.name, product.price, quantity)

    def is_for_product(self, product_id: str) -> bool:
        return self.product_id == product_id

    def calculate_subtotal(self) -> Money:
        return self.unit_price * self.quantity


@dataclass
class Order:
    """Aggregate root for customer orders.

    Invariants:
    - ``total_amount`` equals the sum of the items' ``total_price``
    - at most one item per product
    - items and delivery address only change while PENDING

    Use ``Order.create()`` for new orders.  The ``__init__`` is kept plain
    so the repository can reconstitute persisted orders without
    re-validating.
    """

    id: str
    customer_id: str
    delivery_address: Address
    items: list[OrderItem] = field(default_factory=list)
    status: OrderStatus = OrderStatus.PENDING
    total_amount: Money = field(default_factory=lambda: Money.zero(DEFAULT_CURRENCY))
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        customer_id: str,
        delivery_address: Address,
        currency: str = DEFAULT_CURRENCY,
    ) -> Order:
        if not customer_id:
            raise ValidationError("Customer ID cannot be null")
        if delivery_address is None:
            raise ValidationError("Delivery address cannot be null")
        now = _now()
        return Order(
            id=str(uuid4()),
            customer_id=customer_id,
            delivery_address=delivery_address,
            total_amount=Money.zero(currency),
            created_at=now,
            updated_at=now,
        )

    # --- Items ----------------------------------------------------------------

    def add_item(self, item: OrderItem) -> None:
        self._ensure_can_be_modified()
        if item is None:
            raise ValidationError("Order item cannot be null")
        if self.contains_product(item.product_id):
            raise DuplicateOrderItemError(
                f"Product {item.product_name} already exists in order. "
                f"Remove it and add it again to change the quantity."
            )
        if item.total_price.currency != self.currency:
            raise CurrencyMismatchError(
                f"Cannot add a {item.total_price.currency} item to a {self.currency} order"
            )
        self.items.append(item)
        self._items_changed()

    def remove_item(self, item_id: str) -> OrderItem:
        """Remove and return the item with *item_id*."""
        self._ensure_can_be_modified()
        item = self.find_item(item_id)
        if item is None:
            raise EntityNotFoundError("OrderItem", item_id)
        self.items.remove(item)
        self._items_changed()
        return item

    def clear_items(self) -> None:
        self._ensure_can_be_modified()
        self.items.clear()
        self._items_changed()

    def update_delivery_address(self, new_address: Address) -> None:
        self._ensure_can_be_modified()
        if new_address is None:
            raise ValidationError("Delivery address cannot be null")
        self.delivery_address = new_address
        self.updated_at = _now()

    # --- State transitions ----------------------------------------------------

    def confirm(self) -> None:
        """PENDING -> CONFIRMED; an empty order cannot be confirmed."""
        ensure_transition(self.status, OrderStatus.CONFIRMED)
        if self.is_empty():
            raise EmptyOrderError("Order must have at least one item")
        self._move_to(OrderStatus.CONFIRMED)

    def start_preparing(self) -> None:
        ensure_transition(self.status, OrderStatus.PREPARING)
        self._move_to(OrderStatus.PREPARING)

    def ship(self) -> None:
        ensure_transition(self.status, OrderStatus.SHIPPED)
        self._move_to(OrderStatus.SHIPPED)

    def deliver(self) -> None:
        ensure_transition(self.status, OrderStatus.DELIVERED)
        self._move_to(OrderStatus.DELIVERED)

    def cancel(self) -> None:
        """Cancel from PENDING, CONFIRMED or PREPARING only.

        Returning stock to the catalog is the caller's job and must
        happen *before* this call (see ``CancelOrderHandler``).
        """
        if not self.status.can_be_cancelled():
            raise IllegalStateError(
                f"Order cannot be cancelled in status: {self.status.value}"
            )
        self._move_to(OrderStatus.CANCELLED)

    # --- Queries --------------------------------------------------------------

    @property
    def currency(self) -> str:
        return self.total_amount.currency

    @property
    def total_items(self) -> int:
        return len(self.items)

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity for item in self.items)

    def is_empty(self) -> bool:
        return not self.items

    def contains_product(self, product_id: str) -> bool:
        return any(item.is_for_product(product_id) for item in self.items)

    def find_item(self, item_id: str) -> OrderItem | None:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def can_be_modified(self) -> bool:
        return self.status == OrderStatus.PENDING

    def is_completed(self) -> bool:
        return self.status.is_final()

    # --- Internal helpers -----------------------------------------------------

    def _ensure_can_be_modified(self) -> None:
        if not self.can_be_modified():
            raise OrderNotModifiableError(
                f"Order cannot be modified in status: {self.status.value}"
            )

    def _items_changed(self) -> None:
        total = Money.zero(self.currency)
        for item in self.items:
            total = total + item.total_price
        self.total_amount = total
        self.updated_at = _now()

    def _move_to(self, status: OrderStatus) -> None:
        self.status = status
        self.updated_at = _now()
