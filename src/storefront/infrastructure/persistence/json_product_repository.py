"""JSON-document-backed implementation of ProductRepository."""

from __future__ import annotations

from datetime import datetime

from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.json_store import (
    JsonSection,
    money_from_raw,
    money_to_raw,
)


class JsonProductRepository(JsonSection[Product], ProductRepository):

    section = "products"

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._get(product_id)

    def list_all(self) -> list[Product]:
        return self._all()

    def save(self, product: Product) -> None:
        self._stage(product.id, product)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "description": product.description,
            "price": money_to_raw(product.price),
            "stock_quantity": product.stock_quantity,
            "category": product.category,
            "active": product.active,
            "created_at": product.created_at.isoformat(),
            "updated_at": product.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            description=raw["description"],
            price=money_from_raw(raw["price"]),
            stock_quantity=raw["stock_quantity"],
            category=raw["category"],
            active=raw.get("active", True),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
