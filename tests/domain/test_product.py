"""Unit tests for the Product aggregate."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product, validate_stock
from storefront.domain.model.value_objects import Money


def _product(stock: int = 5) -> Product:
    return Product(id=1, name="Shirt", price=Money.of("10"), stock=stock)


class TestUpdateStock:

    def test_overwrites_stock(self):
        product = _product()
        product.update_stock(12)
        assert product.stock == 12

    def test_zero_allowed(self):
        product = _product()
        product.update_stock(0)
        assert product.stock == 0

    def test_numeric_string_coerced(self):
        product = _product()
        product.update_stock("7")
        assert product.stock == 7

    def test_negative_rejected(self):
        product = _product()
        with pytest.raises(ValidationError, match="cannot be negative"):
            product.update_stock(-1)
        assert product.stock == 5


class TestValidateStock:

    @pytest.mark.parametrize("raw", ["abc", "1.5", None, True])
    def test_garbage_rejected(self, raw):
        with pytest.raises(ValidationError, match="Invalid stock"):
            validate_stock(raw)
