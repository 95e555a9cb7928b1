"""Tests for placing an order from the cart."""

import pytest
from protean.exceptions import ValidationError
from storefront.cart.manager import CartManager
from storefront.catalogue.product import ProductPatch
from storefront.ordering.checkout import place_order
from storefront.storage.documents import CART_KEY


@pytest.fixture()
def cart(store):
    return CartManager(store)


@pytest.fixture()
def stocked_cart(backend, cart):
    rice = backend.create_product(name="Organic Rice", price=450, stock=50)
    milk = backend.create_product(name="Fresh Milk", price=80, stock=100)
    cart.add(rice, 2)
    cart.add(milk, 3)
    return cart


class TestPlaceOrder:
    def test_order_copies_the_cart(self, backend, stocked_cart):
        order = place_order(backend, stocked_cart, "Asha Rahman", "01700000000", "Dhaka")

        assert order.total_amount == 1140.0
        assert [(i.product_name, i.price, i.quantity) for i in order.items] == [
            ("Organic Rice", 450.0, 2),
            ("Fresh Milk", 80.0, 3),
        ]
        assert backend.get_order(str(order.id)).status == "pending"

    def test_cart_is_cleared_after_success(self, backend, stocked_cart, store):
        place_order(backend, stocked_cart, "Asha Rahman", "01700000000", "Dhaka")
        assert stocked_cart.is_empty
        assert store.get(CART_KEY) is None

    def test_empty_cart_is_refused(self, backend, cart):
        with pytest.raises(ValidationError) as exc:
            place_order(backend, cart, "Asha Rahman", "01700000000", "Dhaka")
        assert exc.value.messages == {"cart": ["Your cart is empty"]}
        assert backend.list_orders() == []

    def test_failed_order_leaves_cart_intact(self, backend, stocked_cart):
        with pytest.raises(ValidationError):
            place_order(backend, stocked_cart, "Asha Rahman", "", "Dhaka")

        assert stocked_cart.item_count == 5
        assert backend.list_orders() == []

    def test_order_items_ignore_later_catalog_edits(self, backend, stocked_cart):
        rice_id = str(stocked_cart.lines[0].product.product_id)
        order = place_order(backend, stocked_cart, "Asha Rahman", "01700000000", "Dhaka")

        backend.update_product(rice_id, ProductPatch(name="Premium Rice", price=999))
        backend.delete_product(rice_id)

        item = backend.get_order(str(order.id)).items[0]
        assert (item.product_name, item.price) == ("Organic Rice", 450.0)
