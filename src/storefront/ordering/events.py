"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """A cash-on-delivery order was placed from the cart."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    customer_name = String(required=True, max_length=255)
    phone = String(required=True, max_length=30)
    item_count = Integer(required=True)
    total_amount = Float(required=True)
    created_at = DateTime(required=True)


@storefront.event(part_of="Order")
class OrderStatusChanged:
    """An admin moved the order to another status."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    previous_status = String(required=True, max_length=20)
    new_status = String(required=True, max_length=20)
    changed_at = DateTime(required=True)
