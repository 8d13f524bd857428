"""Application service: Find Products use case (catalog queries)."""

from __future__ import annotations

from storefront.application.dto import ProductDTO, product_to_dto
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory


class FindProductsHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def by_id(self, product_id: str) -> ProductDTO:
        with self._uow_factory() as uow:
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError("Product", product_id)
            return product_to_dto(product)

    def all_active(self) -> list[ProductDTO]:
        with self._uow_factory() as uow:
            return [product_to_dto(p) for p in uow.products.list_active()]

    def available(self) -> list[ProductDTO]:
        """Active products with at least one unit in stock."""
        with self._uow_factory() as uow:
            return [product_to_dto(p) for p in uow.products.list_available()]

    def by_category(self, category: str) -> list[ProductDTO]:
        if not category or not category.strip():
            raise ValidationError("Category cannot be null or empty")
        with self._uow_factory() as uow:
            return [product_to_dto(p) for p in uow.products.list_by_category(category.strip())]

    def by_name(self, fragment: str) -> list[ProductDTO]:
        if not fragment or not fragment.strip():
            raise ValidationError("Name cannot be null or empty")
        with self._uow_factory() as uow:
            return [product_to_dto(p) for p in uow.products.search_by_name(fragment.strip())]

    def categories(self) -> list[str]:
        with self._uow_factory() as uow:
            return uow.products.list_categories()
