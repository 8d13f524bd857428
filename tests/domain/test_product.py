"""Unit tests for the Product aggregate."""

import time

import pytest

from storefront.domain.exceptions import IllegalStateError, InsufficientStockError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from tests.builders import make_product


def _create(**overrides):
    fields = {
        "name": "Notebook",
        "description": "A notebook",
        "price": Money.of("10.00", "BRL"),
        "stock_quantity": 5,
        "category": "Electronics",
    }
    fields.update(overrides)
    return Product.create(**fields)


class TestProductCreation:

    def test_happy_path(self):
        product = _create(name="  Notebook  ")
        assert product.name == "Notebook"
        assert product.active is True
        assert product.stock_quantity == 5
        assert product.created_at == product.updated_at
        assert product.id

    @pytest.mark.parametrize("field", ["name", "description", "category"])
    def test_blank_text_fields_rejected(self, field):
        with pytest.raises(ValidationError, match="cannot be null or empty"):
            _create(**{field: "  "})

    def test_missing_price_rejected(self):
        with pytest.raises(ValidationError, match="price"):
            _create(price=None)

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="price"):
            _create(price=Money.of("-0.01", "BRL"))

    def test_free_product_allowed(self):
        assert _create(price=Money.zero("BRL")).price.is_zero()

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="Stock quantity cannot be negative"):
            _create(stock_quantity=-1)


class TestProductUpdate:

    def test_update_overwrites_all_fields(self):
        product = make_product()
        product.update_product_info("Tablet", "A tablet", Money.of("99.90", "BRL"), 2, "Mobile")
        assert (product.name, product.description, product.category) == ("Tablet", "A tablet", "Mobile")
        assert product.price == Money.of("99.90", "BRL")
        assert product.stock_quantity == 2

    def test_invalid_update_changes_nothing(self):
        product = make_product(name="Notebook", stock=5)
        with pytest.raises(ValidationError):
            product.update_product_info("Tablet", "A tablet", Money.of("1", "BRL"), -3, "Mobile")
        assert product.name == "Notebook"
        assert product.stock_quantity == 5

    def test_update_refreshes_timestamp(self):
        product = make_product()
        before = product.updated_at
        time.sleep(0.001)
        product.update_price(Money.of("12", "BRL"))
        assert product.updated_at > before


class TestProductStock:

    def test_add_stock(self):
        product = make_product(stock=5)
        product.add_stock(3)
        assert product.stock_quantity == 8

    @pytest.mark.parametrize("qty", [0, -1])
    def test_add_non_positive_rejected(self, qty):
        with pytest.raises(ValidationError, match="must be positive"):
            make_product().add_stock(qty)

    def test_remove_stock(self):
        product = make_product(stock=5)
        product.remove_stock(5)
        assert product.stock_quantity == 0

    def test_remove_more_than_available_rejected(self):
        product = make_product(stock=1)
        with pytest.raises(InsufficientStockError, match="available 1"):
            product.remove_stock(2)
        assert product.stock_quantity == 1

    def test_insufficient_stock_is_an_illegal_state(self):
        with pytest.raises(IllegalStateError):
            make_product(stock=0).remove_stock(1)

    @pytest.mark.parametrize("qty", [0, -2])
    def test_remove_non_positive_rejected(self, qty):
        with pytest.raises(ValidationError, match="must be positive"):
            make_product().remove_stock(qty)


class TestProductAvailability:

    def test_available_when_active_with_stock(self):
        assert make_product(stock=1).is_available()

    def test_unavailable_without_stock(self):
        assert not make_product(stock=0).is_available()

    def test_unavailable_when_deactivated(self):
        product = make_product(stock=3)
        product.deactivate()
        assert not product.is_available()
        product.activate()
        assert product.is_available()

    def test_has_stock(self):
        product = make_product(stock=1)
        assert product.has_stock(1)
        assert not product.has_stock(2)

    def test_calculate_total_price(self):
        assert make_product(price="2.50").calculate_total_price(4) == Money.of("10.00", "BRL")
