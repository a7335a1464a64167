"""Unit tests for the Product aggregate's stock rules."""

import pytest

from localmart.domain.exceptions import InsufficientStockError, ValidationError
from localmart.domain.model.product import Product
from localmart.domain.model.value_objects import Money


def _product(stock: int = 10) -> Product:
    return Product(id="p1", name="Bananas", price=Money.of("150"), stock=stock, vendor_id="v1")


class TestProductStock:

    def test_take_stock_reduces_stock(self):
        p = _product(10)
        p.take_stock(4)
        assert p.stock == 6

    def test_take_all_remaining(self):
        p = _product(3)
        p.take_stock(3)
        assert p.stock == 0

    def test_take_more_than_available_rejected(self):
        p = _product(3)
        with pytest.raises(InsufficientStockError, match="need 4, have 3"):
            p.take_stock(4)
        assert p.stock == 3

    def test_restock_adds_units(self):
        p = _product(0)
        p.restock(5)
        assert p.stock == 5

    @pytest.mark.parametrize("qty", [0, -2])
    def test_non_positive_adjustment_rejected(self, qty):
        p = _product()
        with pytest.raises(ValidationError, match="must be positive"):
            p.take_stock(qty)
        with pytest.raises(ValidationError, match="must be positive"):
            p.restock(qty)

    def test_negative_stock_rejected_on_construction(self):
        with pytest.raises(ValidationError, match="non-negative"):
            _product(-1)
