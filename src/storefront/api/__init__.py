"""Storefront API package."""

from storefront.api.routes import admin_router, cart_router, checkout_router, product_router

__all__ = ["product_router", "cart_router", "checkout_router", "admin_router"]
