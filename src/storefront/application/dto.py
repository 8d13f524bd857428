"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Money values are
rendered with their currency, e.g. ``"BRL 20.00"``.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.customer import Customer
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product

_TIMESTAMP = "%Y-%m-%d %H:%M UTC"


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: a single order item as displayed to the user."""

    id: str
    product_id: str
    product_name: str
    quantity: int
    unit_price: str
    total_price: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    customer_id: str
    status: str
    status_description: str
    delivery_address: str
    items: list[OrderItemDTO]
    total_amount: str
    total_quantity: int
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class ProductDTO:

    id: str
    name: str
    description: str
    price: str
    stock_quantity: int
    category: str
    active: bool
    available: bool


@dataclass(frozen=True)
class CustomerDTO:

    id: str
    full_name: str
    email: str
    phone: str | None
    address: str | None
    active: bool


# --- Mapping ------------------------------------------------------------------


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        customer_id=order.customer_id,
        status=order.status.value,
        status_description=order.status.description,
        delivery_address=order.delivery_address.full_address,
        items=[
            OrderItemDTO(
                id=item.id,
                product_id=item.product_id,
                product_name=item.product_name,
                quantity=item.quantity,
                unit_price=str(item.unit_price),
                total_price=str(item.total_price),
            )
            for item in order.items
        ],
        total_amount=str(order.total_amount),
        total_quantity=order.total_quantity,
        created_at=order.created_at.strftime(_TIMESTAMP),
        updated_at=order.updated_at.strftime(_TIMESTAMP),
    )


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        description=product.description,
        price=str(product.price),
        stock_quantity=product.stock_quantity,
        category=product.category,
        active=product.active,
        available=product.is_available(),
    )


def customer_to_dto(customer: Customer) -> CustomerDTO:
    return CustomerDTO(
        id=customer.id,
        full_name=customer.full_name,
        email=customer.email.value,
        phone=customer.phone,
        address=customer.address.full_address if customer.address else None,
        active=customer.active,
    )
