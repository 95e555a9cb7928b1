"""Namespaced keys and JSON documents stored under them."""

import json
from typing import Any

import structlog

from storefront.storage.port import KeyValueStore

logger = structlog.get_logger(__name__)

PRODUCTS_KEY = "purefood_products"
ORDERS_KEY = "purefood_orders"
CART_KEY = "purefood_cart"
ADMIN_KEY = "purefood_admin"
TOKEN_KEY = "purefood_token"


def load_document(store: KeyValueStore, key: str, default: Any = None) -> Any:
    """Read and decode the JSON document under ``key``.

    A missing or unreadable document yields ``default``.
    """
    raw = store.get(key)
    if raw is None:
        return default
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("Discarding unreadable document", key=key)
        return default


def save_document(store: KeyValueStore, key: str, document: Any) -> None:
    store.set(key, json.dumps(document))
