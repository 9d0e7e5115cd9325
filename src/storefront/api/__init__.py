"""Storefront API package."""

from storefront.api.errors import register_error_handlers
from storefront.api.routes import (
    cart_router,
    category_router,
    collection_router,
    order_router,
    product_router,
    quiz_router,
)

routers = [product_router, collection_router, category_router, cart_router, order_router, quiz_router]

__all__ = [
    "cart_router",
    "category_router",
    "collection_router",
    "order_router",
    "product_router",
    "quiz_router",
    "register_error_handlers",
    "routers",
]
