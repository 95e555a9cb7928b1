"""Tests for the stock check made before growing a cart line."""

import pytest
from storefront.cart.capacity import ensure_within_stock
from storefront.exceptions import CapacityExceeded


class TestEnsureWithinStock:
    def test_quantity_up_to_stock_is_allowed(self):
        ensure_within_stock("rice", 50, 50)

    def test_quantity_above_stock_is_rejected(self):
        with pytest.raises(CapacityExceeded) as exc:
            ensure_within_stock("rice", 5, 6)
        assert exc.value.message == "Not enough stock available"
        assert (exc.value.requested, exc.value.available) == (6, 5)

    def test_out_of_stock(self):
        with pytest.raises(CapacityExceeded):
            ensure_within_stock("rice", 0, 1)
