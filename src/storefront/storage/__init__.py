"""Store factory.

``open_store()`` is called once per process and the returned store is
injected into the repositories:
- SqlStore when the durable medium answers the probe
- MemoryStore otherwise (through FallbackStore)
"""

import structlog

from storefront.storage.fallback import FallbackStore
from storefront.storage.port import KeyValueStore, StoreUnavailable
from storefront.storage.sql_adapter import SqlStore

logger = structlog.get_logger(__name__)


def open_store(uri: str) -> FallbackStore:
    """Open the durable store at ``uri``, degrading to memory if it is unusable."""
    try:
        durable: KeyValueStore | None = SqlStore(uri)
    except StoreUnavailable as exc:
        logger.warning("Cannot open durable store", uri=uri, error=str(exc))
        durable = None

    store = FallbackStore(durable)
    logger.info("Store opened", uri=uri, durable=store.is_durable)
    return store


__all__ = ["FallbackStore", "KeyValueStore", "StoreUnavailable", "open_store"]
