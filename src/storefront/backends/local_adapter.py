"""Local backend: repositories over the injected key-value store."""

from uuid import uuid4

from storefront.backends.port import StorefrontBackend
from storefront.catalogue.product import Product, ProductPatch
from storefront.catalogue.repository import ProductRepository
from storefront.exceptions import AuthFailure
from storefront.identity.admin import AdminRegistry
from storefront.ordering.order import Order
from storefront.ordering.repository import OrderRepository
from storefront.ordering.stats import SalesStats
from storefront.storage.documents import TOKEN_KEY
from storefront.storage.port import KeyValueStore


class LocalBackend(StorefrontBackend):
    def __init__(self, store: KeyValueStore) -> None:
        self._store = store
        self.products = ProductRepository(store)
        self.orders = OrderRepository(store)
        self.admins = AdminRegistry(store)

    def list_products(self) -> list[Product]:
        return self.products.list()

    def get_product(self, product_id: str) -> Product:
        return self.products.get(product_id)

    def create_product(self, name, price, description=None, image=None, category=None, stock=0) -> Product:
        return self.products.create(
            name=name,
            price=price,
            description=description,
            image=image,
            category=category,
            stock=stock,
        )

    def update_product(self, product_id: str, patch: ProductPatch) -> Product | None:
        return self.products.update(product_id, patch)

    def delete_product(self, product_id: str) -> bool:
        return self.products.delete(product_id)

    def list_orders(self) -> list[Order]:
        return self.orders.list()

    def get_order(self, order_id: str) -> Order:
        return self.orders.get(order_id)

    def create_order(self, customer_name, phone, address, items, total_amount, notes=None) -> Order:
        return self.orders.create(
            customer_name=customer_name,
            phone=phone,
            address=address,
            items=items,
            total_amount=total_amount,
            notes=notes,
        )

    def update_order_status(self, order_id: str, status: str) -> Order | None:
        return self.orders.set_status(order_id, status)

    def delete_order(self, order_id: str) -> bool:
        return self.orders.delete(order_id)

    def get_order_stats(self) -> SalesStats:
        return self.orders.stats()

    def login(self, username: str, password: str) -> str:
        if not self.admins.verify(username, password):
            raise AuthFailure("Invalid credentials")
        token = uuid4().hex
        self._store.set(TOKEN_KEY, token)
        return token

    def logout(self) -> None:
        self._store.remove(TOKEN_KEY)
