"""Application service: Update Product use case.

Rewrites a product's catalog information.  Existing orders are not
affected: their items captured a price snapshot when they were added.
"""

from __future__ import annotations

import logging

from storefront.application.dto import ProductDTO, product_to_dto
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(
        self,
        product_id: str,
        name: str,
        description: str,
        price: str,
        currency: str,
        stock_quantity: int,
        category: str,
    ) -> ProductDTO:
        with self._uow_factory() as uow:
            uow.lock_products([product_id])
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError("Product", product_id)

            clash = uow.products.get_by_name(name) if name else None
            if clash is not None and clash.id != product.id:
                raise ValidationError(f"Product '{name.strip()}' already exists")

            product.update_product_info(
                name=name,
                description=description,
                price=Money.of(price, currency),
                stock_quantity=stock_quantity,
                category=category,
            )
            uow.products.save(product)
            uow.commit()

        logger.info("Product %s updated", product.id)
        return product_to_dto(product)
