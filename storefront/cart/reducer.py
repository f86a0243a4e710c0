"""Cart actions and the state transition function.

All cart mutations go through ``cart_reducer(state, action)`` so every
change can be tested without a store, a request or a template.
"""
from dataclasses import dataclass, replace
from typing import Union

from .models import CartLineItem, CartState, ItemId


@dataclass(frozen=True)
class AddItem:
    item: CartLineItem


@dataclass(frozen=True)
class RemoveItem:
    id: ItemId


@dataclass(frozen=True)
class UpdateQuantity:
    id: ItemId
    quantity: int


@dataclass(frozen=True)
class ClearCart:
    pass


CartAction = Union[AddItem, RemoveItem, UpdateQuantity, ClearCart]


def _add_item(state: CartState, incoming: CartLineItem) -> CartState:
    existing = state.find(incoming.id)
    if existing is None:
        return CartState(items=state.items + (incoming,))

    # Merge into the existing line; only the quantity changes
    merged = replace(existing, quantity=existing.quantity + incoming.quantity)
    return CartState(
        items=tuple(merged if item is existing else item for item in state.items)
    )


def _remove_item(state: CartState, item_id: ItemId) -> CartState:
    if state.find(item_id) is None:
        return state
    return CartState(items=tuple(item for item in state.items if item.id != item_id))


def _update_quantity(state: CartState, item_id: ItemId, quantity: int) -> CartState:
    if state.find(item_id) is None:
        return state
    # No clamping here: zero or negative quantities stay in the cart
    return CartState(
        items=tuple(
            replace(item, quantity=quantity) if item.id == item_id else item
            for item in state.items
        )
    )


def cart_reducer(state: CartState, action: CartAction) -> CartState:
    """Return the state that results from applying ``action`` to ``state``."""
    if isinstance(action, AddItem):
        return _add_item(state, action.item)
    if isinstance(action, RemoveItem):
        return _remove_item(state, action.id)
    if isinstance(action, UpdateQuantity):
        return _update_quantity(state, action.id, action.quantity)
    if isinstance(action, ClearCart):
        return CartState()
    return state
