"""
Common Error Constants

Centralized error messages shared by routers, services and templates.
"""

# Catalog errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"
ERROR_PRODUCTS_UNAVAILABLE = "Unable to fetch products"
ERROR_NOT_FOUND = "Page not found"

# Configuration errors
ERROR_SUPABASE_NOT_CONFIGURED = "SUPABASE_URL and SUPABASE_ANON_KEY must be set"
ERROR_DATABASE_NOT_INITIALIZED = (
    "Database not initialized. Use 'await get_database_async()' for lazy init, "
    "or call 'await init_database()' at startup."
)

# Cart errors
ERROR_CART_OUTSIDE_PROVIDER = "use_cart() must be called within a cart_provider() scope"
ERROR_CART_SESSION_MISSING = "No cart session on request; is CartSessionMiddleware installed?"


class CartContextError(RuntimeError):
    """Cart accessed outside of a provisioned scope.

    Programming error: raised at the access point and never rendered
    as a user-facing page.
    """

    def __init__(self, message: str = ERROR_CART_OUTSIDE_PROVIDER):
        super().__init__(message)
