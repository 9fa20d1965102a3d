"""Unit tests for request parsing into NewProduct / ProductPatch."""

import pytest

from catalog.application.dto import NewProduct, ProductPatch
from catalog.domain.exceptions import InvalidFieldError, ValidationError
from catalog.domain.model.value_objects import Price, ProductName, Stock


class TestNewProduct:

    def test_full_body(self):
        new = NewProduct.from_mapping({"name": "Widget", "price": 9.99, "stock": 5})
        assert new == NewProduct(ProductName("Widget"), Price(9.99), Stock(5))

    def test_stock_defaults_to_zero(self):
        new = NewProduct.from_mapping({"name": "Widget", "price": 1})
        assert new.stock == Stock(0)

    def test_name_is_trimmed(self):
        assert NewProduct.from_mapping({"name": "  Widget ", "price": 1}).name.value == "Widget"

    def test_missing_name_rejected(self):
        with pytest.raises(InvalidFieldError) as info:
            NewProduct.from_mapping({"price": 1})
        assert info.value.field == "name"

    def test_missing_price_rejected(self):
        with pytest.raises(InvalidFieldError) as info:
            NewProduct.from_mapping({"name": "Widget"})
        assert info.value.field == "price"

    def test_null_stock_rejected(self):
        with pytest.raises(InvalidFieldError) as info:
            NewProduct.from_mapping({"name": "Widget", "price": 1, "stock": None})
        assert info.value.field == "stock"

    def test_non_object_body_rejected(self):
        with pytest.raises(ValidationError, match="JSON object"):
            NewProduct.from_mapping(["Widget", 1])


class TestReExports:

    def test_patch_is_the_domain_type(self):
        from catalog.domain.model.product_patch import ProductPatch as DomainPatch

        assert ProductPatch is DomainPatch
