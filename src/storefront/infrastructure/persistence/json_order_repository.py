"""JSON-document-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime

from storefront.domain.model.order import Order, OrderItem
from storefront.domain.model.order_status import OrderStatus
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.json_store import (
    JsonSection,
    address_from_raw,
    address_to_raw,
    money_from_raw,
    money_to_raw,
)


class JsonOrderRepository(JsonSection[Order], OrderRepository):

    section = "orders"

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: str) -> Order | None:
        return self._get(order_id)

    def list_by_customer(self, customer_id: str) -> list[Order]:
        return [o for o in self._all() if o.customer_id == customer_id]

    def list_by_status(self, status: OrderStatus) -> list[Order]:
        return [o for o in self._all() if o.status == status]

    def save(self, order: Order) -> None:
        self._stage(order.id, order)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customer_id": order.customer_id,
            "status": order.status.value,
            "delivery_address": address_to_raw(order.delivery_address),
            "total_amount": money_to_raw(order.total_amount),
            "created_at": order.created_at.isoformat(),
            "updated_at": order.updated_at.isoformat(),
            "items": [
                {
                    "id": item.id,
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "unit_price": money_to_raw(item.unit_price),
                    "quantity": item.quantity,
                    "total_price": money_to_raw(item.total_price),
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderItem(
                id=i["id"],
                product_id=i["product_id"],
                product_name=i["product_name"],
                unit_price=money_from_raw(i["unit_price"]),
                quantity=i["quantity"],
                total_price=money_from_raw(i["total_price"]),
            )
            for i in raw["items"]
        ]
        return Order(
            id=raw["id"],
            customer_id=raw["customer_id"],
            delivery_address=address_from_raw(raw["delivery_address"]),
            items=items,
            status=OrderStatus(raw["status"]),
            total_amount=money_from_raw(raw["total_amount"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
