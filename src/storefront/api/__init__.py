"""Storefront HTTP API package."""

from storefront.api.routes import auth_router, order_router, product_router

__all__ = ["auth_router", "product_router", "order_router"]
