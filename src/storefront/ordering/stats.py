"""Sales figures for the admin dashboard, computed from the order list."""

from dataclasses import dataclass, field
from datetime import date, timedelta

from storefront.ordering.order import Order, OrderStatus

RECENT_ORDERS_LIMIT = 10


@dataclass(frozen=True)
class SalesStats:
    total_orders: int
    total_sales: float
    pending_orders: int
    completed_orders: int
    recent_orders: list[Order] = field(default_factory=list)


@dataclass(frozen=True)
class DailySales:
    day: date
    sales: float
    orders: int


def sales_stats(orders: list[Order]) -> SalesStats:
    """Aggregate over ``orders`` given in storage (insertion) order.

    Sales only count completed orders. Recent orders are the last ten by
    storage order, newest first; ``created_at`` is not consulted.
    """
    completed = [o for o in orders if o.status == OrderStatus.COMPLETED.value]
    return SalesStats(
        total_orders=len(orders),
        total_sales=sum(o.total_amount for o in completed),
        pending_orders=sum(1 for o in orders if o.status == OrderStatus.PENDING.value),
        completed_orders=len(completed),
        recent_orders=list(reversed(orders[-RECENT_ORDERS_LIMIT:])),
    )


def status_breakdown(orders: list[Order]) -> dict[str, int]:
    counts = {status.value: 0 for status in OrderStatus}
    for order in orders:
        counts[order.status] = counts.get(order.status, 0) + 1
    return counts


def daily_sales(orders: list[Order], days: int = 7, today: date | None = None) -> list[DailySales]:
    """Completed sales per calendar day for the trailing ``days`` days, oldest first."""
    today = today or date.today()
    window = [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]

    result = []
    for day in window:
        day_orders = [
            o
            for o in orders
            if o.status == OrderStatus.COMPLETED.value and o.created_at is not None and o.created_at.date() == day
        ]
        result.append(DailySales(day=day, sales=sum(o.total_amount for o in day_orders), orders=len(day_orders)))
    return result
