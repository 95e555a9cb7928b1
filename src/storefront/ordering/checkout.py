"""Checkout: turn the cart into a cash-on-delivery order.

The order's items and total are copied from the cart as it is now, so later
catalog edits never reach the order. The cart is cleared only after the
order was accepted; on any failure it is left as it was.
"""

import structlog
from protean.exceptions import ValidationError

from storefront.cart.manager import CartManager
from storefront.ordering.order import Order

logger = structlog.get_logger(__name__)


def snapshot_items(cart: CartManager) -> list[dict]:
    return [
        {
            "product_id": str(line.product.product_id),
            "product_name": line.product.name,
            "price": line.product.price,
            "quantity": line.quantity,
        }
        for line in cart.lines
    ]


def place_order(backend, cart: CartManager, customer_name, phone, address, notes=None) -> Order:
    if cart.is_empty:
        raise ValidationError({"cart": ["Your cart is empty"]})

    order = backend.create_order(
        customer_name=customer_name,
        phone=phone,
        address=address,
        items=snapshot_items(cart),
        total_amount=cart.total,
        notes=notes,
    )
    cart.clear()

    logger.info("Checkout complete", order_id=str(order.id), total_amount=order.total_amount)
    return order
