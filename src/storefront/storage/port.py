"""Key-value store port (abstract interface).

Values are serialized documents (strings). Adapters raise
``StoreUnavailable`` when their medium cannot be used; the fallback store
catches it so nothing above the storage layer has to.
"""

from abc import ABC, abstractmethod


class StoreUnavailable(Exception):
    """The durable medium rejected a read or a write."""


class KeyValueStore(ABC):
    """Abstract key-value store."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None."""
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete ``key``. Removing a missing key is not an error."""
        ...
