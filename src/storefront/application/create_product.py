"""Application service: Create Product use case."""

from __future__ import annotations

import logging

from storefront.application.dto import ProductDTO, product_to_dto
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory

logger = logging.getLogger(__name__)


class CreateProductHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(
        self,
        name: str,
        description: str,
        price: str,
        currency: str,
        stock_quantity: int,
        category: str,
    ) -> ProductDTO:
        """Add a new product to the catalog; names must be unique."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        with self._uow_factory() as uow:
            if uow.products.exists_by_name(name):
                raise ValidationError(f"Product '{name.strip()}' already exists")

            product = Product.create(
                name=name,
                description=description,
                price=Money.of(price, currency),
                stock_quantity=stock_quantity,
                category=category,
            )
            uow.products.save(product)
            uow.commit()

        logger.info("Product %s '%s' created at %s", product.id, product.name, product.price)
        return product_to_dto(product)
