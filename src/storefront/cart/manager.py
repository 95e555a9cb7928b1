"""Cart manager: the cart as seen by the storefront UI.

Every mutation writes the whole cart back to the store straight away; cart
sizes are small and changes are human-paced.
"""

import structlog
from protean.exceptions import ValidationError

from storefront.cart.cart import ACTIVE_CART_ID, Cart, CartLine, ProductSnapshot
from storefront.storage.documents import CART_KEY, load_document, save_document
from storefront.storage.port import KeyValueStore

logger = structlog.get_logger(__name__)


class CartManager:
    def __init__(self, store: KeyValueStore) -> None:
        self._store = store
        self._cart = self._load()

    def _load(self) -> Cart:
        lines = []
        for document in load_document(self._store, CART_KEY, []):
            try:
                lines.append(
                    CartLine(
                        product=ProductSnapshot.from_document(document["product"]),
                        quantity=document["quantity"],
                    )
                )
            except (KeyError, TypeError, ValidationError) as exc:
                logger.warning("Dropping unreadable cart line", document=document, error=str(exc))
        return Cart(id=ACTIVE_CART_ID, lines=lines)

    def _persist(self) -> None:
        save_document(self._store, CART_KEY, self._cart.to_document())
        self._mark_saved()

    def _mark_saved(self) -> None:
        # Drop raised events and the in-transit line changes once the cart is written
        self._cart._events.clear()
        for change in ("added", "updated", "removed"):
            self._cart._temp_cache["lines"][change] = {}

    # -------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------
    @property
    def cart(self) -> Cart:
        return self._cart

    @property
    def lines(self) -> list[CartLine]:
        return list(self._cart.lines)

    @property
    def total(self) -> float:
        return self._cart.total

    @property
    def item_count(self) -> int:
        return self._cart.item_count

    @property
    def is_empty(self) -> bool:
        return not self._cart.lines

    def quantity_of(self, product_id: str) -> int:
        line = self._cart.line_for(product_id)
        return line.quantity if line else 0

    # -------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------
    def add(self, product, quantity: int = 1) -> None:
        self._cart.add(product, quantity)
        self._persist()

    def remove(self, product_id: str) -> None:
        self._cart.remove(product_id)
        self._persist()

    def set_quantity(self, product_id: str, quantity: int) -> None:
        self._cart.set_quantity(product_id, quantity)
        self._persist()

    def clear(self) -> None:
        self._cart.clear()
        self._store.remove(CART_KEY)
        self._mark_saved()
        logger.info("Cart cleared")
