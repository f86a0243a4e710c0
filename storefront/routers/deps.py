"""
Shared Dependencies for Routers

- ``provide_cart``: finds the visitor's cart and opens a cart_provider
  scope for the rest of the request
- ``get_db``: the Supabase-backed Database singleton
"""

from typing import AsyncIterator

from fastapi import Request

from storefront.cart import CartSessions, CartStore, cart_provider
from storefront.errors import ERROR_CART_SESSION_MISSING
from storefront.services.database import Database, get_database_async


def get_cart_sessions(request: Request) -> CartSessions:
    return request.app.state.cart_sessions


async def provide_cart(request: Request) -> AsyncIterator[CartStore]:
    """
    Provision the session's cart for the duration of the request.

    Sessions without a cart get a fresh one that is only registered if
    the request leaves something in it.
    """
    session_id = getattr(request.state, "cart_session_id", None)
    if not session_id:
        raise RuntimeError(ERROR_CART_SESSION_MISSING)

    sessions = get_cart_sessions(request)
    store = sessions.get(session_id)
    mounted = store is not None
    if not mounted:
        store = CartStore()

    with cart_provider(store):
        yield store

    if not mounted and not store.is_empty:
        sessions.keep(session_id, store)


async def get_db() -> Database:
    return await get_database_async()
