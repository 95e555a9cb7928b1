"""Order filters for the admin list and customer order tracking."""

from protean.exceptions import ValidationError

from storefront.ordering.order import Order, OrderStatus

ALL_STATUSES = "all"


def search_orders(orders: list[Order], query: str | None = None, status: str | None = None) -> list[Order]:
    """Admin order filter: name or id (case-insensitive), phone (substring), status.

    ``all`` or no status means no status filter; any other value must be a
    known order status.
    """
    if query:
        needle = query.lower()
        orders = [
            o
            for o in orders
            if needle in (o.customer_name or "").lower() or query in (o.phone or "") or needle in str(o.id).lower()
        ]

    if status and status != ALL_STATUSES:
        try:
            wanted = OrderStatus(status).value
        except ValueError:
            raise ValidationError({"status": [f"Unknown order status: {status}"]}) from None
        orders = [o for o in orders if o.status == wanted]

    return list(orders)


def track_orders(orders: list[Order], phone: str | None) -> list[Order]:
    """Orders whose phone number contains ``phone``; blank input finds nothing."""
    needle = (phone or "").strip()
    if not needle:
        return []
    return [o for o in orders if needle in (o.phone or "")]
