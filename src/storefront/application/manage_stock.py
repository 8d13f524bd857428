"""Application service: stock and activation changes on a single Product."""

from __future__ import annotations

import logging

from storefront.application.dto import ProductDTO, product_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory

logger = logging.getLogger(__name__)


class ManageStockHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def add(self, product_id: str, quantity: int) -> ProductDTO:
        return self._change(product_id, lambda p: p.add_stock(quantity))

    def remove(self, product_id: str, quantity: int) -> ProductDTO:
        return self._change(product_id, lambda p: p.remove_stock(quantity))

    def set_active(self, product_id: str, active: bool) -> ProductDTO:
        return self._change(
            product_id, lambda p: p.activate() if active else p.deactivate()
        )

    def _change(self, product_id: str, mutate) -> ProductDTO:
        with self._uow_factory() as uow:
            uow.lock_products([product_id])
            product: Product | None = uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError("Product", product_id)
            mutate(product)
            uow.products.save(product)
            uow.commit()

        logger.info(
            "Product %s now has %d in stock (active=%s)",
            product.id, product.stock_quantity, product.active,
        )
        return product_to_dto(product)
