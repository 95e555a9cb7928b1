"""Tests for the persisted cart."""

import json

import pytest
from storefront.cart.manager import CartManager
from storefront.catalogue.product import Product
from storefront.storage.documents import CART_KEY


@pytest.fixture()
def rice():
    return Product(id="rice", name="Organic Rice", price=450, stock=50)


@pytest.fixture()
def milk():
    return Product(id="milk", name="Fresh Milk", price=80, stock=100)


class TestCartManager:
    def test_starts_empty(self, store):
        cart = CartManager(store)
        assert cart.is_empty
        assert cart.total == 0

    def test_every_mutation_is_persisted(self, store, rice, milk):
        cart = CartManager(store)
        cart.add(rice, 2)
        cart.add(milk, 3)

        stored = json.loads(store.get(CART_KEY))
        assert [(line["product"]["id"], line["quantity"]) for line in stored] == [("rice", 2), ("milk", 3)]

        cart.set_quantity("milk", 1)
        assert json.loads(store.get(CART_KEY))[1]["quantity"] == 1

        cart.remove("rice")
        assert len(json.loads(store.get(CART_KEY))) == 1

    def test_reloads_from_store(self, store, rice, milk):
        first = CartManager(store)
        first.add(rice, 2)
        first.add(milk, 3)

        second = CartManager(store)
        assert second.total == 1140
        assert second.item_count == 5
        assert second.quantity_of("rice") == 2
        assert second.lines[0].product.name == "Organic Rice"

    def test_clear_erases_the_key(self, store, rice):
        cart = CartManager(store)
        cart.add(rice)

        cart.clear()

        assert store.get(CART_KEY) is None
        assert cart.total == 0
        assert cart.item_count == 0

    def test_unreadable_lines_are_dropped(self, store, rice):
        cart = CartManager(store)
        cart.add(rice, 2)
        stored = json.loads(store.get(CART_KEY))
        stored.append({"quantity": 1})
        store.set(CART_KEY, json.dumps(stored))

        reloaded = CartManager(store)
        assert reloaded.item_count == 2

    def test_unreadable_document_gives_empty_cart(self, store):
        store.set(CART_KEY, "not json")
        assert CartManager(store).is_empty

    def test_quantity_of_missing_product(self, store):
        assert CartManager(store).quantity_of("nothing") == 0


class TestLongSession:
    def test_pending_changes_do_not_pile_up(self, store, rice, milk):
        cart = CartManager(store)
        cart.add(milk, 1)

        for _ in range(60):
            cart.add(rice, 1)
            cart.remove("rice")

        assert cart.cart._events == []
        assert all(not cart.cart._temp_cache["lines"][change] for change in ("added", "updated", "removed"))
        assert [line.product.product_id for line in cart.lines] == ["milk"]

    def test_clear_drops_pending_changes(self, store, rice):
        cart = CartManager(store)
        cart.add(rice, 2)
        cart.clear()
        assert cart.cart._events == []
