"""Tests for the Cart aggregate."""

import pytest
from protean.exceptions import ValidationError
from storefront.cart.cart import Cart, ProductSnapshot
from storefront.cart.events import CartCleared, CartItemAdded, CartItemRemoved, CartQuantityUpdated
from storefront.catalogue.product import Product


@pytest.fixture()
def rice():
    return Product(id="rice", name="Organic Rice", price=450, stock=50)


@pytest.fixture()
def milk():
    return Product(id="milk", name="Fresh Milk", price=80, stock=100)


class TestCartTotals:
    def test_empty_cart(self):
        cart = Cart.empty()
        assert cart.total == 0
        assert cart.item_count == 0

    def test_total_and_item_count(self, rice, milk):
        cart = Cart.empty()
        cart.add(rice, 2)
        cart.add(milk, 3)
        assert cart.total == 1140
        assert cart.item_count == 5

    def test_totals_follow_every_mutation(self, rice, milk):
        cart = Cart.empty()
        cart.add(rice, 1)
        cart.add(milk, 4)
        cart.set_quantity("milk", 2)
        cart.remove("rice")
        cart.add(rice, 3)

        assert cart.item_count == sum(line.quantity for line in cart.lines) == 5
        assert cart.total == sum(line.product.price * line.quantity for line in cart.lines) == 1510


class TestAdd:
    def test_adding_twice_merges_into_one_line(self, rice):
        twice = Cart.empty()
        twice.add(rice, 2)
        twice.add(rice, 3)

        once = Cart.empty()
        once.add(rice, 5)

        assert len(twice.lines) == 1
        assert twice.to_document() == once.to_document()

    def test_line_keeps_a_snapshot(self, rice):
        cart = Cart.empty()
        cart.add(rice)

        rice.price = 999

        line = cart.line_for("rice")
        assert isinstance(line.product, ProductSnapshot)
        assert line.product.price == 450.0
        assert line.subtotal == 450.0

    @pytest.mark.parametrize("quantity", [0, -1, 1.5, True, "2"])
    def test_rejects_bad_quantities(self, rice, quantity):
        cart = Cart.empty()
        with pytest.raises(ValidationError) as exc:
            cart.add(rice, quantity)
        assert "quantity" in exc.value.messages
        assert not cart.lines

    def test_add_raises_event(self, rice):
        cart = Cart.empty()
        cart.add(rice, 2)
        cart.add(rice, 1)
        events = [e for e in cart._events if isinstance(e, CartItemAdded)]
        assert [e.line_quantity for e in events] == [2, 3]


class TestRemoveAndSetQuantity:
    def test_remove(self, rice, milk):
        cart = Cart.empty()
        cart.add(rice)
        cart.add(milk)
        cart.remove("rice")
        assert [line.product.name for line in cart.lines] == ["Fresh Milk"]
        assert any(isinstance(e, CartItemRemoved) for e in cart._events)

    def test_remove_unknown_is_a_no_op(self, rice):
        cart = Cart.empty()
        cart.add(rice)
        cart.remove("nothing")
        assert cart.item_count == 1

    def test_set_quantity_overwrites(self, rice):
        cart = Cart.empty()
        cart.add(rice, 2)
        cart.set_quantity("rice", 7)
        assert cart.item_count == 7
        event = next(e for e in cart._events if isinstance(e, CartQuantityUpdated))
        assert (event.previous_quantity, event.new_quantity) == (2, 7)

    def test_set_quantity_zero_is_remove(self, rice, milk):
        via_zero = Cart.empty()
        via_remove = Cart.empty()
        for cart in (via_zero, via_remove):
            cart.add(rice, 2)
            cart.add(milk, 1)

        via_zero.set_quantity("rice", 0)
        via_remove.remove("rice")

        assert via_zero.to_document() == via_remove.to_document()

    def test_set_quantity_unknown_is_a_no_op(self, rice):
        cart = Cart.empty()
        cart.add(rice, 2)
        cart.set_quantity("nothing", 5)
        assert cart.item_count == 2


class TestClear:
    def test_clear_zeroes_totals(self, rice, milk):
        cart = Cart.empty()
        cart.add(rice, 2)
        cart.add(milk, 3)

        cart.clear()

        assert cart.total == 0
        assert cart.item_count == 0
        event = next(e for e in cart._events if isinstance(e, CartCleared))
        assert event.items_removed == 2
