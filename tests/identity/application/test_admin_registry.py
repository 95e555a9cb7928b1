"""Tests for the admin credential record."""

from storefront.identity.admin import DEFAULT_PASSWORD, DEFAULT_USERNAME, AdminRegistry
from storefront.storage.documents import ADMIN_KEY, save_document
from storefront.storage.fallback import FallbackStore
from storefront.storage.memory_adapter import MemoryStore
from storefront.storage.port import StoreUnavailable


class TestAdminRegistry:
    def test_fresh_store_is_seeded(self, store):
        registry = AdminRegistry(store)
        credential = registry.credential()
        assert (credential.username, credential.password) == (DEFAULT_USERNAME, DEFAULT_PASSWORD)

    def test_default_credentials_verify(self, store):
        assert AdminRegistry(store).verify("admin", "admin123") is True

    def test_wrong_password(self, store):
        assert AdminRegistry(store).verify("admin", "wrong") is False

    def test_match_is_exact(self, store):
        registry = AdminRegistry(store)
        assert registry.verify("Admin", "admin123") is False
        assert registry.verify("admin ", "admin123") is False

    def test_existing_record_is_not_overwritten(self, store):
        save_document(store, ADMIN_KEY, {"username": "owner", "password": "s3cret"})
        registry = AdminRegistry(store)
        assert registry.verify("owner", "s3cret") is True
        assert registry.verify("admin", "admin123") is False


class StoreThatBreaks(MemoryStore):
    """Healthy until ``broken`` is set, then rejects every call."""

    def __init__(self):
        super().__init__()
        self.broken = False

    def get(self, key):
        if self.broken:
            raise StoreUnavailable("read failed")
        return super().get(key)

    def set(self, key, value):
        if self.broken:
            raise StoreUnavailable("write failed")
        super().set(key, value)


class TestAdminRegistryAfterFallback:
    def test_default_credentials_survive_a_store_fallback(self):
        durable = StoreThatBreaks()
        store = FallbackStore(durable)
        registry = AdminRegistry(store)

        durable.broken = True

        assert registry.verify("admin", "admin123") is True
        assert not store.is_durable

    def test_missing_record_is_seeded_again(self, store):
        registry = AdminRegistry(store)
        store.remove(ADMIN_KEY)

        assert registry.credential().username == DEFAULT_USERNAME
        assert store.get(ADMIN_KEY) is not None
