"""Backend factory.

``build_backend()`` picks the variant named in the settings, once, at
startup:
- LocalBackend: repositories over the local key-value store
- RemoteBackend: the HTTP API at ``settings.api_url``
"""

from storefront.backends.local_adapter import LocalBackend
from storefront.backends.port import StorefrontBackend
from storefront.backends.remote_adapter import RemoteBackend
from storefront.config import BackendKind, Settings
from storefront.storage.port import KeyValueStore


def build_backend(settings: Settings, store: KeyValueStore, session=None) -> StorefrontBackend:
    """Return the backend selected by ``settings.backend``."""
    if settings.backend is BackendKind.REMOTE:
        return RemoteBackend(settings.api_url, store, session=session)
    return LocalBackend(store)


__all__ = ["LocalBackend", "RemoteBackend", "StorefrontBackend", "build_backend"]
