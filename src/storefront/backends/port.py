"""Storefront backend port (abstract interface).

Defines the one operation set the UI layer calls. Two adapters implement
it: LocalBackend (repositories over the local store) and RemoteBackend
(the same operations over HTTP). Which one runs is decided once at startup.
"""

from abc import ABC, abstractmethod
from datetime import date

from storefront.catalogue.product import Product, ProductPatch
from storefront.catalogue.queries import LOW_STOCK_THRESHOLD, low_stock, product_categories, search_products
from storefront.ordering.order import Order
from storefront.ordering.queries import search_orders, track_orders
from storefront.ordering.stats import DailySales, SalesStats, daily_sales, status_breakdown


class StorefrontBackend(ABC):
    """Abstract storefront backend."""

    # -------------------------------------------------------------------
    # Catalog
    # -------------------------------------------------------------------
    @abstractmethod
    def list_products(self) -> list[Product]:
        """Return the whole catalog."""
        ...

    @abstractmethod
    def get_product(self, product_id: str) -> Product:
        """Return one product or raise ObjectNotFoundError."""
        ...

    @abstractmethod
    def create_product(
        self,
        name: str,
        price: float,
        description: str | None = None,
        image: str | None = None,
        category: str | None = None,
        stock: int = 0,
    ) -> Product:
        """Add a product; the backend assigns its id and creation time."""
        ...

    @abstractmethod
    def update_product(self, product_id: str, patch: ProductPatch) -> Product | None:
        """Apply ``patch``; None when the product does not exist."""
        ...

    @abstractmethod
    def delete_product(self, product_id: str) -> bool:
        """Delete a product; False when it did not exist."""
        ...

    # -------------------------------------------------------------------
    # Orders
    # -------------------------------------------------------------------
    @abstractmethod
    def list_orders(self) -> list[Order]:
        """Return all orders in the order they were placed."""
        ...

    @abstractmethod
    def get_order(self, order_id: str) -> Order:
        """Return one order or raise ObjectNotFoundError."""
        ...

    @abstractmethod
    def create_order(
        self,
        customer_name: str,
        phone: str,
        address: str,
        items: list[dict],
        total_amount: float,
        notes: str | None = None,
    ) -> Order:
        """Place a pending order from an item snapshot."""
        ...

    @abstractmethod
    def update_order_status(self, order_id: str, status: str) -> Order | None:
        """Move an order to ``status``; None when the order does not exist."""
        ...

    @abstractmethod
    def delete_order(self, order_id: str) -> bool:
        """Delete an order; False when it did not exist."""
        ...

    @abstractmethod
    def get_order_stats(self) -> SalesStats:
        """Sales figures over all orders."""
        ...

    # -------------------------------------------------------------------
    # Queries, computed from the lists above
    # -------------------------------------------------------------------
    def search_products(self, query: str | None = None, category: str | None = None) -> list[Product]:
        return search_products(self.list_products(), query=query, category=category)

    def categories(self) -> list[str]:
        return product_categories(self.list_products())

    def low_stock_products(self, threshold: int = LOW_STOCK_THRESHOLD) -> list[Product]:
        return low_stock(self.list_products(), threshold=threshold)

    def search_orders(self, query: str | None = None, status: str | None = None) -> list[Order]:
        return search_orders(self.list_orders(), query=query, status=status)

    def track_orders(self, phone: str) -> list[Order]:
        """Orders placed with a phone number containing ``phone``."""
        return track_orders(self.list_orders(), phone)

    def order_status_breakdown(self) -> dict[str, int]:
        return status_breakdown(self.list_orders())

    def daily_sales(self, days: int = 7, today: date | None = None) -> list[DailySales]:
        return daily_sales(self.list_orders(), days=days, today=today)

    # -------------------------------------------------------------------
    # Admin access
    # -------------------------------------------------------------------
    @abstractmethod
    def login(self, username: str, password: str) -> str:
        """Exchange admin credentials for a bearer token and keep it.

        Raises AuthFailure when the credentials are rejected.
        """
        ...

    @abstractmethod
    def logout(self) -> None:
        """Forget the bearer token."""
        ...
