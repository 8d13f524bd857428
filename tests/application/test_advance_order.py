"""Integration tests for the AdvanceOrder use case (fulfilment steps)."""

import pytest

from storefront.application.add_item_to_order import AddItemToOrderHandler
from storefront.application.advance_order import AdvanceOrderHandler
from storefront.application.confirm_order import ConfirmOrderHandler
from storefront.application.create_order import CreateOrderHandler
from storefront.domain.exceptions import (
    EntityNotFoundError,
    InvalidStatusTransitionError,
    ValidationError,
)
from storefront.domain.model.order_status import OrderStatus
from tests.builders import make_address, make_customer, make_product
from tests.fakes import FakeStore


def _confirmed_order():
    customer = make_customer()
    product = make_product()
    store = FakeStore(products=[product], customers=[customer])
    order_id = CreateOrderHandler(store.unit_of_work).handle(customer.id, make_address()).id
    AddItemToOrderHandler(store.unit_of_work).handle(order_id, product.id, 1)
    ConfirmOrderHandler(store.unit_of_work).handle(order_id)
    return store, order_id


class TestAdvanceOrder:

    def test_full_fulfilment_path(self):
        store, order_id = _confirmed_order()
        handler = AdvanceOrderHandler(store.unit_of_work)

        assert handler.handle(order_id, OrderStatus.PREPARING).status == "PREPARING"
        assert handler.handle(order_id, OrderStatus.SHIPPED).status == "SHIPPED"
        dto = handler.handle(order_id, OrderStatus.DELIVERED)

        assert dto.status == "DELIVERED"
        assert dto.status_description == "Entregue"
        assert store.order(order_id).is_completed()

    def test_steps_cannot_be_skipped(self):
        store, order_id = _confirmed_order()
        with pytest.raises(InvalidStatusTransitionError, match="CONFIRMED to SHIPPED"):
            AdvanceOrderHandler(store.unit_of_work).handle(order_id, OrderStatus.SHIPPED)
        assert store.order(order_id).status == OrderStatus.CONFIRMED

    @pytest.mark.parametrize("target", [OrderStatus.CONFIRMED, OrderStatus.CANCELLED, OrderStatus.PENDING])
    def test_non_fulfilment_targets_rejected(self, target):
        store, order_id = _confirmed_order()
        with pytest.raises(ValidationError, match="confirm or cancel"):
            AdvanceOrderHandler(store.unit_of_work).handle(order_id, target)

    def test_unknown_order(self):
        store, _ = _confirmed_order()
        with pytest.raises(EntityNotFoundError):
            AdvanceOrderHandler(store.unit_of_work).handle("missing", OrderStatus.PREPARING)
