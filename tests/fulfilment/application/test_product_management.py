"""Application tests for product commands."""

import pytest
from fulfilment.products.management import CreateProduct, DeleteProduct, UpdateProduct
from fulfilment.products.product import Product
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError


def _create_product(**overrides):
    defaults = {"name": "KALLAX", "description": "Shelving unit", "price": 49.99, "stock": 5}
    defaults.update(overrides)
    return current_domain.process(CreateProduct(**defaults), asynchronous=False)


class TestProductManagement:
    def test_create_persists(self):
        product_id = _create_product()
        product = current_domain.repository_for(Product).get(product_id)
        assert product.name == "KALLAX"
        assert product.price == 49.99
        assert product.stock == 5

    def test_missing_stock_defaults_to_zero(self):
        product_id = _create_product(stock=None)
        assert current_domain.repository_for(Product).get(product_id).stock == 0

    def test_duplicate_name_rejected(self):
        _create_product()
        with pytest.raises(ValidationError):
            _create_product()

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            _create_product(price=-1.0)

    def test_update_replaces_fields(self):
        product_id = _create_product()
        current_domain.process(
            UpdateProduct(product_id=product_id, name="BESTA", price=10.0),
            asynchronous=False,
        )
        product = current_domain.repository_for(Product).get(product_id)
        assert product.name == "BESTA"
        assert product.description is None
        assert product.price == 10.0
        assert product.stock == 0

    def test_delete(self):
        product_id = _create_product()
        current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
        with pytest.raises(ObjectNotFoundError):
            current_domain.repository_for(Product).get(product_id)
