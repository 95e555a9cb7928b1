"""Runtime configuration, read once from the environment at startup."""

import os
from dataclasses import dataclass
from enum import Enum


class BackendKind(Enum):
    LOCAL = "local"
    REMOTE = "remote"


@dataclass(frozen=True)
class Settings:
    """Settings selected at build/deploy time.

    ``backend`` picks the Sync Facade variant; it is never re-read per call.
    """

    backend: BackendKind = BackendKind.LOCAL
    store_uri: str = "sqlite:///purefood.db"
    api_url: str = "http://localhost:5000/api"
    jwt_secret: str = "devsecret"


def load_settings() -> Settings:
    """Build Settings from ``STOREFRONT_*`` environment variables."""
    backend = os.getenv("STOREFRONT_BACKEND", BackendKind.LOCAL.value).lower()
    try:
        kind = BackendKind(backend)
    except ValueError:
        raise ValueError(f"STOREFRONT_BACKEND must be 'local' or 'remote', got {backend!r}") from None

    return Settings(
        backend=kind,
        store_uri=os.getenv("STOREFRONT_STORE_URI", Settings.store_uri),
        api_url=os.getenv("STOREFRONT_API_URL", Settings.api_url).rstrip("/"),
        jwt_secret=os.getenv("JWT_SECRET", Settings.jwt_secret),
    )
