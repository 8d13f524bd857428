"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, stock comes and goes, products are switched on and off in
the catalog.  Orders only ever reference a product by id and keep their
own price snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from storefront.domain.exceptions import InsufficientStockError, ValidationError
from storefront.domain.model.value_objects import Money


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Product:
    """A product in the catalog.

    Invariants:
    - ``stock_quantity`` is never negative
    - name, description and category are never blank

    Use ``Product.create()`` for new products.  The ``__init__`` is kept
    plain so repositories can reconstitute persisted products as-is.
    """

    id: str
    name: str
    description: str
    price: Money
    stock_quantity: int
    category: str
    active: bool = True
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        name: str,
        description: str,
        price: Money,
        stock_quantity: int,
        category: str,
    ) -> Product:
        _validate(name, description, price, stock_quantity, category)
        now = _now()
        return Product(
            id=str(uuid4()),
            name=name.strip(),
            description=description.strip(),
            price=price,
            stock_quantity=stock_quantity,
            category=category.strip(),
            active=True,
            created_at=now,
            updated_at=now,
        )

    # --- Catalog maintenance --------------------------------------------------

    def update_product_info(
        self,
        name: str,
        description: str,
        price: Money,
        stock_quantity: int,
        category: str,
    ) -> None:
        """Overwrite every editable field; nothing changes if any is invalid."""
        _validate(name, description, price, stock_quantity, category)
        self.name = name.strip()
        self.description = description.strip()
        self.price = price
        self.stock_quantity = stock_quantity
        self.category = category.strip()
        self._touch()

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect any existing orders because order items
        capture a price snapshot when they are added.
        """
        if new_price is None or new_price.is_negative():
            raise ValidationError("Product price cannot be negative")
        self.price = new_price
        self._touch()

    def activate(self) -> None:
        self.active = True
        self._touch()

    def deactivate(self) -> None:
        self.active = False
        self._touch()

    # --- Stock ----------------------------------------------------------------

    def add_stock(self, quantity: int) -> None:
        if quantity <= 0:
            raise ValidationError("Quantity to add must be positive")
        self.stock_quantity += quantity
        self._touch()

    def remove_stock(self, quantity: int) -> None:
        if quantity <= 0:
            raise ValidationError("Quantity to remove must be positive")
        if quantity > self.stock_quantity:
            raise InsufficientStockError(
                f"Insufficient stock for {self.name} "
                f"(requested {quantity}, available {self.stock_quantity})"
            )
        self.stock_quantity -= quantity
        self._touch()

    def is_available(self) -> bool:
        return self.active and self.stock_quantity > 0

    def has_stock(self, quantity: int) -> bool:
        return self.stock_quantity >= quantity

    def calculate_total_price(self, quantity: int) -> Money:
        if quantity <= 0:
            raise ValidationError("Quantity must be positive")
        return self.price * quantity

    # --- Internal helpers -----------------------------------------------------

    def _touch(self) -> None:
        self.updated_at = _now()


def _validate(
    name: str,
    description: str,
    price: Money,
    stock_quantity: int,
    category: str,
) -> None:
    if not name or not name.strip():
        raise ValidationError("Product name cannot be null or empty")
    if not description or not description.strip():
        raise ValidationError("Product description cannot be null or empty")
    if price is None or price.is_negative():
        raise ValidationError("Product price cannot be null or negative")
    if stock_quantity is None or stock_quantity < 0:
        raise ValidationError("Stock quantity cannot be negative")
    if not category or not category.strip():
        raise ValidationError("Product category cannot be null or empty")
