"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in the
infrastructure layer and in the test fakes.

Only ``get_by_id`` and ``save`` take part in the order lifecycle; the
other queries serve catalog maintenance.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    def get_by_name(self, name: str) -> Product | None:
        """Return a product by name (case-insensitive), or None."""
        for product in self.list_all():
            if product.name.lower() == name.strip().lower():
                return product
        return None

    def exists_by_name(self, name: str) -> bool:
        return self.get_by_name(name) is not None

    def list_active(self) -> list[Product]:
        return [p for p in self.list_all() if p.active]

    def list_available(self) -> list[Product]:
        return [p for p in self.list_all() if p.is_available()]

    def list_by_category(self, category: str) -> list[Product]:
        return [p for p in self.list_all() if p.category.lower() == category.lower()]

    def search_by_name(self, fragment: str) -> list[Product]:
        return [p for p in self.list_all() if fragment.lower() in p.name.lower()]

    def list_categories(self) -> list[str]:
        return sorted({p.category for p in self.list_all()})
