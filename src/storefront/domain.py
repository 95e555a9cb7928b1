"""Storefront domain: catalogue, cart, orders and admin access.

A single bounded context: products, the customer's cart, the orders placed
from it and the admin credential. Persistence lives behind the key-value
store in ``storefront.storage``; the UI talks to one of the backends in
``storefront.backends``.
"""

import structlog
from protean.domain import Domain

from storefront.utils.logging import configure_logging

configure_logging()

storefront = Domain(name="storefront")

logger = structlog.get_logger(__name__)

_initialized = False


def init_domain() -> Domain:
    """Initialize the domain once per process; later calls are no-ops."""
    global _initialized
    if not _initialized:
        storefront.init()
        _initialized = True
        logger.info("Domain initialized", domain=storefront.name)
    return storefront
