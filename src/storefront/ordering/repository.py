"""Order repository over the key-value store.

Orders are kept as one JSON list under ``purefood_orders`` in the order they
were placed. That order is meaningful: "recent orders" are read from the end
of the list.
"""

from __future__ import annotations

from datetime import date

import structlog
from protean.exceptions import ObjectNotFoundError

from storefront.ordering.order import Order
from storefront.ordering.queries import search_orders, track_orders
from storefront.ordering.stats import DailySales, SalesStats, daily_sales, sales_stats, status_breakdown
from storefront.storage.documents import ORDERS_KEY, load_document, save_document
from storefront.storage.port import KeyValueStore

logger = structlog.get_logger(__name__)


class OrderRepository:
    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def _documents(self) -> list[dict]:
        return load_document(self._store, ORDERS_KEY, [])

    def _save(self, documents: list[dict]) -> None:
        save_document(self._store, ORDERS_KEY, documents)

    def list(self) -> list[Order]:
        return [Order.from_document(document) for document in self._documents()]

    def get(self, order_id: str) -> Order:
        document = next((d for d in self._documents() if d["id"] == str(order_id)), None)
        if document is None:
            raise ObjectNotFoundError({"_entity": f"Order {order_id} does not exist"})
        return Order.from_document(document)

    def create(self, customer_name, phone, address, items, total_amount, notes=None) -> Order:
        """Place a pending order. Nothing is stored when validation fails."""
        order = Order.place(
            customer_name=customer_name,
            phone=phone,
            address=address,
            items_data=items,
            total_amount=total_amount,
            notes=notes,
        )
        documents = self._documents()
        documents.append(order.to_document())
        self._save(documents)

        logger.info("Order placed", order_id=str(order.id), total_amount=order.total_amount, items=len(order.items))
        return order

    def set_status(self, order_id: str, status) -> Order | None:
        """Move an order to ``status``; None when the id is unknown."""
        documents = self._documents()
        index = next((i for i, d in enumerate(documents) if d["id"] == str(order_id)), None)
        if index is None:
            logger.info("Order status change skipped, no such order", order_id=str(order_id))
            return None

        order = Order.from_document(documents[index])
        previous_status = order.status
        order.change_status(status)
        documents[index] = order.to_document()
        self._save(documents)

        logger.info("Order status changed", order_id=str(order_id), previous=previous_status, new=order.status)
        return order

    def delete(self, order_id: str) -> bool:
        documents = self._documents()
        remaining = [d for d in documents if d["id"] != str(order_id)]
        if len(remaining) == len(documents):
            return False

        self._save(remaining)
        logger.info("Order deleted", order_id=str(order_id))
        return True

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def stats(self) -> SalesStats:
        return sales_stats(self.list())

    def status_breakdown(self) -> dict[str, int]:
        return status_breakdown(self.list())

    def daily_sales(self, days: int = 7, today: date | None = None) -> list[DailySales]:
        return daily_sales(self.list(), days=days, today=today)

    def search(self, query: str | None = None, status: str | None = None) -> list[Order]:
        return search_orders(self.list(), query=query, status=status)

    def track(self, phone: str) -> list[Order]:
        return track_orders(self.list(), phone)
