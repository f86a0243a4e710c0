"""HTML routers for the storefront."""
from .cart import router as cart_router
from .catalog import router as catalog_router
from .pages import router as pages_router

__all__ = [
    "cart_router",
    "catalog_router",
    "pages_router",
]
