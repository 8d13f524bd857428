"""Tests for catalog maintenance and query handlers.

Products, customers and order lookups: the operations around the order
lifecycle.
"""

import pytest

from storefront.application.add_item_to_order import AddItemToOrderHandler
from storefront.application.confirm_order import ConfirmOrderHandler
from storefront.application.create_order import CreateOrderHandler
from storefront.application.create_product import CreateProductHandler
from storefront.application.find_orders import FindOrdersHandler
from storefront.application.find_products import FindProductsHandler
from storefront.application.manage_stock import ManageStockHandler
from storefront.application.register_customer import RegisterCustomerHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from storefront.domain.model.order_status import OrderStatus
from tests.builders import make_address, make_customer, make_product
from tests.fakes import FakeStore


# --- Products -----------------------------------------------------------------


class TestCreateProduct:

    def test_creates_product(self):
        store = FakeStore()
        dto = CreateProductHandler(store.unit_of_work).handle(
            "Notebook", "15 inch", "3500.5", "brl", 10, "Electronics"
        )
        assert dto.price == "BRL 3500.50"
        assert dto.available is True
        assert store.product(dto.id).stock_quantity == 10

    def test_duplicate_name_rejected_case_insensitively(self):
        store = FakeStore(products=[make_product(name="Notebook")])
        with pytest.raises(ValidationError, match="already exists"):
            CreateProductHandler(store.unit_of_work).handle(
                "  notebook ", "desc", "1.00", "BRL", 1, "Electronics"
            )
        assert len(store.products) == 1

    def test_blank_name_rejected(self):
        store = FakeStore()
        with pytest.raises(ValidationError, match="name is required"):
            CreateProductHandler(store.unit_of_work).handle(" ", "desc", "1.00", "BRL", 1, "X")

    def test_negative_price_rejected(self):
        store = FakeStore()
        with pytest.raises(ValidationError):
            CreateProductHandler(store.unit_of_work).handle("Pen", "desc", "-1", "BRL", 1, "Office")
        assert store.products == {}


class TestUpdateProduct:

    def test_updates_every_field(self):
        product = make_product(name="Notebook")
        store = FakeStore(products=[product])
        dto = UpdateProductHandler(store.unit_of_work).handle(
            product.id, "Notebook Pro", "16 inch", "4000", "BRL", 3, "Computers"
        )
        assert dto.name == "Notebook Pro"
        assert dto.price == "BRL 4000.00"
        assert store.product(product.id).category == "Computers"

    def test_keeping_own_name_is_allowed(self):
        product = make_product(name="Notebook")
        store = FakeStore(products=[product])
        dto = UpdateProductHandler(store.unit_of_work).handle(
            product.id, "Notebook", "new", "1.00", "BRL", 1, "Electronics"
        )
        assert dto.description == "new"

    def test_name_of_another_product_rejected(self):
        notebook = make_product(name="Notebook")
        mouse = make_product(name="Mouse")
        store = FakeStore(products=[notebook, mouse])
        with pytest.raises(ValidationError, match="already exists"):
            UpdateProductHandler(store.unit_of_work).handle(
                mouse.id, "Notebook", "desc", "1.00", "BRL", 1, "Electronics"
            )
        assert store.product(mouse.id).name == "Mouse"

    def test_unknown_product(self):
        store = FakeStore()
        with pytest.raises(EntityNotFoundError):
            UpdateProductHandler(store.unit_of_work).handle(
                "missing", "X", "desc", "1.00", "BRL", 1, "Y"
            )


class TestManageStock:

    def test_add_and_remove(self):
        product = make_product(stock=5)
        store = FakeStore(products=[product])
        handler = ManageStockHandler(store.unit_of_work)
        handler.add(product.id, 3)
        dto = handler.remove(product.id, 8)
        assert dto.stock_quantity == 0
        assert dto.available is False

    def test_remove_more_than_available(self):
        product = make_product(stock=2)
        store = FakeStore(products=[product])
        with pytest.raises(InsufficientStockError):
            ManageStockHandler(store.unit_of_work).remove(product.id, 3)
        assert store.product(product.id).stock_quantity == 2

    def test_deactivate_and_activate(self):
        product = make_product()
        store = FakeStore(products=[product])
        handler = ManageStockHandler(store.unit_of_work)
        assert handler.set_active(product.id, False).active is False
        assert handler.set_active(product.id, True).active is True


class TestFindProducts:

    @pytest.fixture
    def store(self):
        return FakeStore(products=[
            make_product(name="Notebook", category="Electronics", stock=3),
            make_product(name="Notebook Stand", category="Office", stock=0),
            make_product(name="Mouse", category="Electronics", stock=7),
        ])

    def test_available_skips_out_of_stock(self, store):
        names = {p.name for p in FindProductsHandler(store.unit_of_work).available()}
        assert names == {"Notebook", "Mouse"}

    def test_by_category_ignores_case(self, store):
        names = {p.name for p in FindProductsHandler(store.unit_of_work).by_category("electronics")}
        assert names == {"Notebook", "Mouse"}

    def test_by_name_fragment(self, store):
        names = {p.name for p in FindProductsHandler(store.unit_of_work).by_name("note")}
        assert names == {"Notebook", "Notebook Stand"}

    def test_categories_are_sorted(self, store):
        assert FindProductsHandler(store.unit_of_work).categories() == ["Electronics", "Office"]

    def test_blank_filters_rejected(self, store):
        handler = FindProductsHandler(store.unit_of_work)
        with pytest.raises(ValidationError):
            handler.by_category(" ")
        with pytest.raises(ValidationError):
            handler.by_name("")

    def test_inactive_products_hidden_from_active_list(self, store):
        handler = FindProductsHandler(store.unit_of_work)
        mouse = next(p for p in handler.all_active() if p.name == "Mouse")
        ManageStockHandler(store.unit_of_work).set_active(mouse.id, False)
        assert "Mouse" not in {p.name for p in handler.all_active()}


# --- Customers ----------------------------------------------------------------


class TestRegisterCustomer:

    def test_registers_customer(self):
        store = FakeStore()
        dto = RegisterCustomerHandler(store.unit_of_work).handle(
            " Maria ", "Silva", "Maria@Example.com", address=make_address()
        )
        assert dto.full_name == "Maria Silva"
        assert dto.email == "maria@example.com"
        assert dto.active is True
        assert dto.id in store.customers

    def test_duplicate_email_rejected(self):
        store = FakeStore(customers=[make_customer(email="maria@example.com")])
        with pytest.raises(ValidationError, match="already registered"):
            RegisterCustomerHandler(store.unit_of_work).handle("Ana", "Souza", "MARIA@example.com")
        assert len(store.customers) == 1

    def test_invalid_email_rejected(self):
        store = FakeStore()
        with pytest.raises(ValidationError, match="Invalid email"):
            RegisterCustomerHandler(store.unit_of_work).handle("Ana", "Souza", "not-an-email")

    def test_deactivated_customer_cannot_order(self):
        customer = make_customer()
        store = FakeStore(customers=[customer])
        RegisterCustomerHandler(store.unit_of_work).set_active(customer.id, False)
        assert RegisterCustomerHandler(store.unit_of_work).show(customer.id).active is False
        with pytest.raises(ValidationError, match="inactive"):
            CreateOrderHandler(store.unit_of_work).handle(customer.id, make_address())

    def test_show_unknown_customer(self):
        store = FakeStore()
        with pytest.raises(EntityNotFoundError):
            RegisterCustomerHandler(store.unit_of_work).show("missing")


# --- Order queries ------------------------------------------------------------


class TestFindOrders:

    @pytest.fixture
    def store(self):
        customer = make_customer()
        product = make_product(stock=10)
        store = FakeStore(products=[product], customers=[customer])
        create = CreateOrderHandler(store.unit_of_work)
        first = create.handle(customer.id, make_address()).id
        create.handle(customer.id, make_address())
        AddItemToOrderHandler(store.unit_of_work).handle(first, product.id, 1)
        ConfirmOrderHandler(store.unit_of_work).handle(first)
        return store

    def test_by_customer(self, store):
        (customer_id,) = store.customers
        assert len(FindOrdersHandler(store.unit_of_work).by_customer(customer_id)) == 2

    def test_by_customer_and_status(self, store):
        (customer_id,) = store.customers
        orders = FindOrdersHandler(store.unit_of_work).by_customer(customer_id, OrderStatus.CONFIRMED)
        assert [o.status for o in orders] == ["CONFIRMED"]

    def test_by_status(self, store):
        pending = FindOrdersHandler(store.unit_of_work).by_status(OrderStatus.PENDING)
        assert len(pending) == 1
        assert pending[0].items == []

    def test_by_id(self, store):
        handler = FindOrdersHandler(store.unit_of_work)
        (confirmed,) = handler.by_status(OrderStatus.CONFIRMED)
        assert handler.by_id(confirmed.id).total_amount == "BRL 10.00"

    def test_unknown_customer(self, store):
        with pytest.raises(EntityNotFoundError, match="Customer"):
            FindOrdersHandler(store.unit_of_work).by_customer("missing")

    def test_unknown_order(self, store):
        with pytest.raises(EntityNotFoundError, match="Order"):
            FindOrdersHandler(store.unit_of_work).by_id("missing")
