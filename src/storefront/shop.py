"""Storefront composition root.

Builds the store, the backend, the cart and the admin session once and
hands the same store instance to all of them. The UI layer calls the
methods here; stock checks happen here, before the cart is touched.
"""

import structlog

from storefront.backends import build_backend
from storefront.backends.port import StorefrontBackend
from storefront.cart.capacity import ensure_within_stock
from storefront.cart.manager import CartManager
from storefront.config import Settings, load_settings
from storefront.identity.session import AdminSession
from storefront.ordering.checkout import place_order
from storefront.ordering.order import Order
from storefront.storage import open_store
from storefront.storage.port import KeyValueStore

logger = structlog.get_logger(__name__)


class Shop:
    def __init__(self, store: KeyValueStore, backend: StorefrontBackend) -> None:
        self.store = store
        self.backend = backend
        self.cart = CartManager(store)
        self.admin = AdminSession(backend, store)

    @classmethod
    def from_settings(cls, settings: Settings | None = None, session=None) -> "Shop":
        settings = settings or load_settings()
        store = open_store(settings.store_uri)
        backend = build_backend(settings, store, session=session)
        logger.info("Storefront ready", backend=settings.backend.value)
        return cls(store, backend)

    # -------------------------------------------------------------------
    # Customer flows
    # -------------------------------------------------------------------
    def add_to_cart(self, product_id: str, quantity: int = 1) -> None:
        """Add ``quantity`` units after checking the request against stock."""
        product = self.backend.get_product(product_id)
        ensure_within_stock(product.id, product.stock, quantity)
        self.cart.add(product, quantity)

    def change_cart_quantity(self, product_id: str, quantity: int) -> None:
        line = self.cart.cart.line_for(product_id)
        if line is not None and quantity > 0:
            ensure_within_stock(product_id, line.product.stock, quantity)
        self.cart.set_quantity(product_id, quantity)

    def checkout(self, customer_name, phone, address, notes=None) -> Order:
        return place_order(self.backend, self.cart, customer_name, phone, address, notes=notes)
