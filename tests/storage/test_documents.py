"""Tests for JSON documents under namespaced keys."""

from storefront.storage.documents import ORDERS_KEY, PRODUCTS_KEY, load_document, save_document


class TestDocuments:
    def test_keys_are_namespaced(self):
        assert PRODUCTS_KEY == "purefood_products"
        assert ORDERS_KEY == "purefood_orders"

    def test_missing_document_gives_default(self, store):
        assert load_document(store, ORDERS_KEY, []) == []

    def test_save_then_load(self, store):
        save_document(store, ORDERS_KEY, [{"id": "o1", "status": "pending"}])
        assert load_document(store, ORDERS_KEY) == [{"id": "o1", "status": "pending"}]

    def test_unreadable_document_gives_default(self, store):
        store.set(PRODUCTS_KEY, "{not json")
        assert load_document(store, PRODUCTS_KEY, []) == []
