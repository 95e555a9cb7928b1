"""Catalog repository over the key-value store.

The whole catalog is one JSON list under ``purefood_products``; every write
rewrites it.
"""

from __future__ import annotations

import structlog
from protean.exceptions import ObjectNotFoundError

from storefront.catalogue.product import Product, ProductPatch
from storefront.catalogue.queries import LOW_STOCK_THRESHOLD, low_stock, product_categories, search_products
from storefront.catalogue.samples import SAMPLE_PRODUCTS, sample_products
from storefront.storage.documents import PRODUCTS_KEY, load_document, save_document
from storefront.storage.port import KeyValueStore

logger = structlog.get_logger(__name__)


class ProductRepository:
    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def _documents(self) -> list[dict]:
        return load_document(self._store, PRODUCTS_KEY, [])

    def _save(self, documents: list[dict]) -> None:
        save_document(self._store, PRODUCTS_KEY, documents)

    def list(self) -> list[Product]:
        """All stored products, or the sample catalog when none are stored.

        The sample catalog is returned as-is and not written to the store.
        """
        documents = self._documents()
        if not documents:
            return sample_products()
        return [Product.from_document(document) for document in documents]

    def get(self, product_id: str) -> Product:
        product = next((p for p in self.list() if str(p.id) == str(product_id)), None)
        if product is None:
            raise ObjectNotFoundError({"_entity": f"Product {product_id} does not exist"})
        return product

    def create(self, name, price, description=None, image=None, category=None, stock=0) -> Product:
        product = Product.create(
            name=name,
            price=price,
            description=description,
            image=image,
            category=category,
            stock=stock,
        )
        documents = self._documents()
        documents.append(product.to_document())
        self._save(documents)

        logger.info("Product created", product_id=str(product.id), name=product.name)
        return product

    def update(self, product_id: str, patch: ProductPatch) -> Product | None:
        """Apply ``patch`` to a stored product; None when the id is unknown."""
        documents = self._documents()
        index = next((i for i, d in enumerate(documents) if d["id"] == str(product_id)), None)
        if index is None:
            logger.info("Product update skipped, no such product", product_id=str(product_id))
            return None

        product = Product.from_document(documents[index])
        changed = product.apply_patch(patch)
        documents[index] = product.to_document()
        self._save(documents)

        logger.info("Product updated", product_id=str(product_id), changed_fields=changed)
        return product

    def delete(self, product_id: str) -> bool:
        documents = self._documents()
        remaining = [d for d in documents if d["id"] != str(product_id)]
        if len(remaining) == len(documents):
            return False

        self._save(remaining)
        logger.info("Product deleted", product_id=str(product_id))
        return True

    def initialize_samples(self) -> list[Product]:
        """Persist the sample catalog once, when the store holds no products."""
        if self._documents():
            return []
        return [self.create(**data) for data in SAMPLE_PRODUCTS]

    def search(self, query: str | None = None, category: str | None = None) -> list[Product]:
        return search_products(self.list(), query=query, category=category)

    def categories(self) -> list[str]:
        return product_categories(self.list())

    def low_stock(self, threshold: int = LOW_STOCK_THRESHOLD) -> list[Product]:
        return low_stock(self.list(), threshold=threshold)
