"""In-memory cart store driven by cart_reducer."""
from decimal import Decimal
from typing import Callable, List, Optional

from storefront.logging import get_logger, sanitize_id_for_logging

from .models import CartLineItem, CartState, ItemId
from .reducer import AddItem, CartAction, ClearCart, RemoveItem, UpdateQuantity, cart_reducer

logger = get_logger(__name__)

Reducer = Callable[[CartState, CartAction], CartState]


class CartStore:
    """
    Holds one session's cart.

    State changes only through ``dispatch``; the convenience methods
    below just build the matching action. Nothing is persisted.
    """

    def __init__(self, reducer: Reducer = cart_reducer, initial: Optional[CartState] = None):
        self._reducer = reducer
        self._state = initial if initial is not None else CartState()

    @property
    def state(self) -> CartState:
        return self._state

    @property
    def items(self) -> List[CartLineItem]:
        return list(self._state.items)

    @property
    def total(self) -> Decimal:
        return self._state.total

    @property
    def item_count(self) -> int:
        return self._state.item_count

    @property
    def is_empty(self) -> bool:
        return self._state.is_empty

    def find(self, item_id: ItemId) -> Optional[CartLineItem]:
        return self._state.find(item_id)

    def dispatch(self, action: CartAction) -> CartState:
        self._state = self._reducer(self._state, action)
        logger.debug(f"{type(action).__name__} -> {len(self._state.items)} line(s)")
        return self._state

    def add_item(self, item: CartLineItem) -> CartState:
        logger.info(f"Adding {item.quantity} x {sanitize_id_for_logging(item.id)} to cart")
        return self.dispatch(AddItem(item))

    def remove_item(self, item_id: ItemId) -> CartState:
        return self.dispatch(RemoveItem(item_id))

    def update_quantity(self, item_id: ItemId, quantity: int) -> CartState:
        return self.dispatch(UpdateQuantity(item_id, quantity))

    def clear_cart(self) -> CartState:
        return self.dispatch(ClearCart())
