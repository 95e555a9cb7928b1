"""Admin credential: a single username/password record.

The record is stored and compared in plaintext, with no lockout or rate
limiting. It is seeded with ``admin`` / ``admin123`` when the store has no
record and is never rotated automatically.
"""

import structlog
from protean.fields import String

from storefront.domain import storefront
from storefront.storage.documents import ADMIN_KEY, load_document, save_document
from storefront.storage.port import KeyValueStore

logger = structlog.get_logger(__name__)

DEFAULT_USERNAME = "admin"
DEFAULT_PASSWORD = "admin123"


@storefront.value_object
class AdminCredential:
    username = String(required=True, max_length=100)
    password = String(required=True, max_length=255)

    def matches(self, username: str, password: str) -> bool:
        return self.username == username and self.password == password


class AdminRegistry:
    """Holds the admin credential in the store; seeds it whenever it is missing."""

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store
        self._seed()

    def _seed(self) -> None:
        if load_document(self._store, ADMIN_KEY) is not None:
            return
        save_document(self._store, ADMIN_KEY, {"username": DEFAULT_USERNAME, "password": DEFAULT_PASSWORD})
        logger.info("Seeded default admin credential", username=DEFAULT_USERNAME)

    def credential(self) -> AdminCredential | None:
        document = load_document(self._store, ADMIN_KEY)
        if not document:
            # The store may have fallen back to an empty in-memory medium
            self._seed()
            document = load_document(self._store, ADMIN_KEY)
        if not document:
            return None
        return AdminCredential(username=document["username"], password=document["password"])

    def verify(self, username: str, password: str) -> bool:
        credential = self.credential()
        return credential is not None and credential.matches(username, password)
