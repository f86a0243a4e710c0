"""HTTP middleware for the storefront app."""
from .security import SecurityHeadersMiddleware
from .session import CART_SESSION_COOKIE, CartSessionMiddleware

__all__ = [
    "CART_SESSION_COOKIE",
    "CartSessionMiddleware",
    "SecurityHeadersMiddleware",
]
