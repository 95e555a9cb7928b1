"""Store that prefers the durable medium and degrades to memory.

The durable store is probed once (a write followed by a delete). If the
probe fails, or any later call fails, the adapter logs the failure and
serves every subsequent call from a ``MemoryStore`` with the same key
space. ``StoreUnavailable`` never escapes this class.
"""

import structlog

from storefront.storage.memory_adapter import MemoryStore
from storefront.storage.port import KeyValueStore, StoreUnavailable

logger = structlog.get_logger(__name__)

PROBE_KEY = "__probe__"


class FallbackStore(KeyValueStore):
    def __init__(self, durable: KeyValueStore | None) -> None:
        self._memory = MemoryStore()
        self._durable = durable if durable is not None and self._probe(durable) else None

    @property
    def is_durable(self) -> bool:
        return self._durable is not None

    @staticmethod
    def _probe(store: KeyValueStore) -> bool:
        try:
            store.set(PROBE_KEY, PROBE_KEY)
            store.remove(PROBE_KEY)
        except StoreUnavailable as exc:
            logger.warning("Durable store unavailable, using in-memory store", error=str(exc))
            return False
        return True

    def _degrade(self, operation: str, key: str, exc: StoreUnavailable) -> None:
        logger.error(
            "Durable store failed, switching to in-memory store",
            operation=operation,
            key=key,
            error=str(exc),
        )
        self._durable = None

    def get(self, key: str) -> str | None:
        if self._durable is not None:
            try:
                return self._durable.get(key)
            except StoreUnavailable as exc:
                self._degrade("get", key, exc)
        return self._memory.get(key)

    def set(self, key: str, value: str) -> None:
        if self._durable is not None:
            try:
                self._durable.set(key, value)
                return
            except StoreUnavailable as exc:
                self._degrade("set", key, exc)
        self._memory.set(key, value)

    def remove(self, key: str) -> None:
        if self._durable is not None:
            try:
                self._durable.remove(key)
                return
            except StoreUnavailable as exc:
                self._degrade("remove", key, exc)
        self._memory.remove(key)
