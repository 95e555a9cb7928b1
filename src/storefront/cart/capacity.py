"""Stock check performed by callers before they grow a cart line."""

from storefront.exceptions import CapacityExceeded


def ensure_within_stock(product_id: str, available: int, quantity: int) -> None:
    """Raise CapacityExceeded when ``quantity`` is above ``available``.

    The quantity is never adjusted; the caller reports the failure.
    """
    if quantity > available:
        raise CapacityExceeded(product_id=str(product_id), requested=quantity, available=available)
