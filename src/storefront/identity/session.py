"""Admin session gate.

Admin views need two independent conditions: a bearer token kept in the
durable store (it survives restarts) and a ``logged_in`` flag that only
lives as long as this process. Neither one alone grants access.
"""

import structlog
from protean.exceptions import ValidationError

from storefront.exceptions import AuthFailure
from storefront.storage.documents import TOKEN_KEY
from storefront.storage.port import KeyValueStore

logger = structlog.get_logger(__name__)


class AdminSession:
    def __init__(self, backend, store: KeyValueStore) -> None:
        self._backend = backend
        self._store = store
        self.logged_in = False

    @property
    def token(self) -> str | None:
        return self._store.get(TOKEN_KEY)

    @property
    def is_active(self) -> bool:
        return bool(self.token) and self.logged_in

    def login(self, username: str, password: str) -> None:
        if not (username or "").strip() or not (password or "").strip():
            raise ValidationError({"credentials": ["Please enter both username and password"]})

        self._backend.login(username, password)
        self.logged_in = True
        logger.info("Admin logged in", username=username)

    def logout(self) -> None:
        self._backend.logout()
        self.logged_in = False
        logger.info("Admin logged out")

    def require_admin(self) -> None:
        if not self.is_active:
            raise AuthFailure("Admin login required")
