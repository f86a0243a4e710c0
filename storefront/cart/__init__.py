"""Cart package: models, reducer, store and session-scoped provisioning."""
from .models import CartLineItem, CartState
from .reducer import AddItem, RemoveItem, UpdateQuantity, ClearCart, cart_reducer
from .service import CartStore
from .context import CartSessions, cart_provider, use_cart
from .adapter import add_to_cart, to_line_item

__all__ = [
    "CartLineItem",
    "CartState",
    "AddItem",
    "RemoveItem",
    "UpdateQuantity",
    "ClearCart",
    "cart_reducer",
    "CartStore",
    "CartSessions",
    "cart_provider",
    "use_cart",
    "add_to_cart",
    "to_line_item",
]
