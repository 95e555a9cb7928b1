"""Catalog filters used by the shop and admin screens.

They work on a product list, so either backend can serve them from
``list_products()``.
"""

from storefront.catalogue.product import Product

ALL_CATEGORIES = "All"
LOW_STOCK_THRESHOLD = 10


def search_products(products: list[Product], query: str | None = None, category: str | None = None) -> list[Product]:
    """Filter by a case-insensitive text query and an exact category."""
    if query:
        needle = query.lower()
        products = [p for p in products if needle in (p.name or "").lower() or needle in (p.description or "").lower()]

    if category and category != ALL_CATEGORIES:
        products = [p for p in products if p.category == category]

    return list(products)


def product_categories(products: list[Product]) -> list[str]:
    """``All`` followed by each distinct category, in catalog order."""
    seen: list[str] = []
    for product in products:
        if product.category and product.category not in seen:
            seen.append(product.category)
    return [ALL_CATEGORIES, *seen]


def low_stock(products: list[Product], threshold: int = LOW_STOCK_THRESHOLD) -> list[Product]:
    return sorted((p for p in products if p.stock < threshold), key=lambda p: p.stock)
