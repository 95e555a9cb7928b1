"""Remote backend: the storefront operations over the HTTP API.

The remote service identifies documents with ``_id`` and may nest the
customer's details under ``customerDetails``; both are mapped onto the
local document shape before the aggregates are built. Calls block until
the response arrives. Nothing is retried.
"""

import requests
import structlog
from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.backends.port import StorefrontBackend
from storefront.catalogue.product import Product, ProductPatch
from storefront.exceptions import AuthFailure, TransportFailure
from storefront.ordering.order import Order
from storefront.ordering.stats import SalesStats
from storefront.storage.documents import TOKEN_KEY
from storefront.storage.port import KeyValueStore

logger = structlog.get_logger(__name__)


def map_identifier(document: dict) -> dict:
    """Copy ``document`` with the remote ``_id`` renamed to ``id``."""
    mapped = dict(document)
    if "_id" in mapped:
        mapped["id"] = str(mapped.pop("_id"))
    return mapped


def map_order(document: dict) -> dict:
    mapped = map_identifier(document)
    details = mapped.pop("customerDetails", None) or {}
    mapped["customerName"] = details.get("name") or mapped.get("customerName")
    mapped["phone"] = details.get("phone") or mapped.get("phone")
    mapped["address"] = details.get("address") or mapped.get("address")
    return mapped


class RemoteBackend(StorefrontBackend):
    def __init__(self, base_url: str, store: KeyValueStore, session=None) -> None:
        self.base_url = base_url.rstrip("/")
        self._store = store
        self._session = session or requests.Session()

    # -------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------
    def _headers(self, authenticated: bool) -> dict:
        headers = {"Content-Type": "application/json"}
        token = self._store.get(TOKEN_KEY)
        if authenticated and token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _send(self, method: str, path: str, payload=None, authenticated: bool = False):
        url = f"{self.base_url}{path}"
        try:
            return self._session.request(method, url, json=payload, headers=self._headers(authenticated))
        except requests.RequestException as exc:
            logger.error("Remote backend unreachable", method=method, url=url, error=str(exc))
            raise TransportFailure(f"{method} {url} failed: {exc}") from exc

    def _check(self, response, method: str, path: str) -> None:
        status = response.status_code
        if 200 <= status < 300:
            return

        if status == 401:
            raise AuthFailure("Admin login required")
        if status in (400, 422):
            errors = self._body(response, method, path, strict=False)
            if isinstance(errors, dict) and isinstance(errors.get("errors"), dict):
                raise ValidationError(errors["errors"])

        logger.error("Remote backend returned an error", method=method, path=path, status_code=status)
        raise TransportFailure(f"{method} {path} returned {status}", status_code=status)

    @staticmethod
    def _body(response, method: str, path: str, strict: bool = True):
        try:
            return response.json()
        except ValueError:
            if strict:
                raise TransportFailure(f"{method} {path} returned a body that is not JSON") from None
            return None

    def _call(self, method: str, path: str, payload=None, authenticated: bool = False, not_found: str | None = None):
        response = self._send(method, path, payload=payload, authenticated=authenticated)
        if response.status_code == 404 and not_found:
            raise ObjectNotFoundError({"_entity": not_found})
        self._check(response, method, path)
        return self._body(response, method, path)

    def _update(self, path: str, payload: dict):
        """PUT ``payload``; None when the remote answers 404."""
        response = self._send("PUT", path, payload=payload, authenticated=True)
        if response.status_code == 404:
            return None
        self._check(response, "PUT", path)
        return self._body(response, "PUT", path)

    # -------------------------------------------------------------------
    # Catalog
    # -------------------------------------------------------------------
    def list_products(self) -> list[Product]:
        documents = self._call("GET", "/products")
        return [Product.from_document(map_identifier(d)) for d in documents]

    def get_product(self, product_id: str) -> Product:
        document = self._call("GET", f"/products/{product_id}", not_found=f"Product {product_id} does not exist")
        return Product.from_document(map_identifier(document))

    def create_product(self, name, price, description=None, image=None, category=None, stock=0) -> Product:
        payload = {
            "name": name,
            "description": description or "",
            "price": price,
            "image": image or "",
            "category": category or "",
            "stock": stock,
        }
        document = self._call("POST", "/products", payload=payload, authenticated=True)
        return Product.from_document(map_identifier(document))

    def update_product(self, product_id: str, patch: ProductPatch) -> Product | None:
        document = self._update(f"/products/{product_id}", patch.changes())
        if document is None:
            return None
        return Product.from_document(map_identifier(document))

    def delete_product(self, product_id: str) -> bool:
        response = self._send("DELETE", f"/products/{product_id}", authenticated=True)
        if response.status_code == 404:
            return False
        self._check(response, "DELETE", f"/products/{product_id}")
        return True

    # -------------------------------------------------------------------
    # Orders
    # -------------------------------------------------------------------
    def list_orders(self) -> list[Order]:
        documents = self._call("GET", "/orders", authenticated=True)
        return [Order.from_document(map_order(d)) for d in documents]

    def get_order(self, order_id: str) -> Order:
        document = self._call("GET", f"/orders/{order_id}", not_found=f"Order {order_id} does not exist")
        return Order.from_document(map_order(document))

    def create_order(self, customer_name, phone, address, items, total_amount, notes=None) -> Order:
        payload = {
            "customerName": customer_name,
            "phone": phone,
            "address": address,
            "items": [
                {
                    "productId": str(item["product_id"]),
                    "productName": item["product_name"],
                    "price": item["price"],
                    "quantity": item["quantity"],
                }
                for item in items
            ],
            "totalAmount": total_amount,
            "notes": notes,
        }
        document = self._call("POST", "/orders", payload=payload)
        return Order.from_document(map_order(document))

    def update_order_status(self, order_id: str, status: str) -> Order | None:
        document = self._update(f"/orders/{order_id}", {"status": status})
        if document is None:
            return None
        return Order.from_document(map_order(document))

    def delete_order(self, order_id: str) -> bool:
        response = self._send("DELETE", f"/orders/{order_id}", authenticated=True)
        if response.status_code == 404:
            return False
        self._check(response, "DELETE", f"/orders/{order_id}")
        return True

    def get_order_stats(self) -> SalesStats:
        data = self._call("GET", "/orders/stats", authenticated=True)
        return SalesStats(
            total_orders=data["totalOrders"],
            total_sales=data["totalSales"],
            pending_orders=data["pendingOrders"],
            completed_orders=data["completedOrders"],
            recent_orders=[Order.from_document(map_order(d)) for d in data.get("recentOrders", [])],
        )

    # -------------------------------------------------------------------
    # Admin access
    # -------------------------------------------------------------------
    def login(self, username: str, password: str) -> str:
        response = self._send("POST", "/auth/login", payload={"username": username, "password": password})
        if response.status_code in (400, 401):
            raise AuthFailure("Invalid credentials")
        self._check(response, "POST", "/auth/login")

        token = self._body(response, "POST", "/auth/login")["token"]
        self._store.set(TOKEN_KEY, token)
        return token

    def logout(self) -> None:
        self._store.remove(TOKEN_KEY)
