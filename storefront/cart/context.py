"""
Cart provisioning.

A CartStore is never a module-level singleton. Each browser session owns
one store (kept in ``CartSessions``), and request handling code reaches it
through ``use_cart()`` while a ``cart_provider()`` scope is active:

    with cart_provider(store):
        use_cart().add_item(item)

Calling ``use_cart()`` anywhere else raises ``CartContextError``.
"""
import os
import time
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Dict, Iterator, Optional, Tuple

from storefront.errors import CartContextError
from storefront.logging import get_logger, sanitize_id_for_logging

from .service import CartStore

logger = get_logger(__name__)

# Idle sessions are dropped after this many seconds (24 hours)
CART_SESSION_TTL = int(os.environ.get("CART_SESSION_TTL", "86400"))
# Idle carts are looked for at most this often (seconds)
SWEEP_INTERVAL = 60

_current_cart: ContextVar[Optional[CartStore]] = ContextVar("current_cart", default=None)


@contextmanager
def cart_provider(store: CartStore) -> Iterator[CartStore]:
    """Make ``store`` the cart returned by ``use_cart()`` inside the block."""
    token = _current_cart.set(store)
    try:
        yield store
    finally:
        _current_cart.reset(token)


def use_cart() -> CartStore:
    """Return the cart provisioned for the current scope.

    Raises:
        CartContextError: when no ``cart_provider`` is active
    """
    store = _current_cart.get()
    if store is None:
        raise CartContextError()
    return store


class CartSessions:
    """
    Process-local registry of per-session carts.

    - ``get`` returns the session's cart, or None if it has none yet
    - ``keep`` registers a cart; callers do so once it holds something,
      so read-only visits never leave an entry behind
    - ``open`` is ``get`` falling back to registering an empty cart
    - ``release`` unmounts a cart; the session starts empty again
    - carts idle longer than ``ttl`` seconds are dropped, checked at most
      once per ``sweep_interval`` seconds
    """

    def __init__(self, ttl: int = CART_SESSION_TTL, clock=time.monotonic, sweep_interval: float = SWEEP_INTERVAL):
        self.ttl = ttl
        self.sweep_interval = sweep_interval
        self._clock = clock
        self._stores: Dict[str, Tuple[CartStore, float]] = {}
        self._last_sweep = clock()

    def __len__(self) -> int:
        return len(self._stores)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._stores

    def get(self, session_id: str) -> Optional[CartStore]:
        now = self._clock()
        self._evict_idle(now)

        entry = self._stores.get(session_id)
        if entry is None:
            return None
        store, seen = entry
        if 0 < self.ttl < now - seen:
            # Expired but not swept yet
            del self._stores[session_id]
            return None
        self._stores[session_id] = (store, now)
        return store

    def keep(self, session_id: str, store: CartStore) -> CartStore:
        self._stores[session_id] = (store, self._clock())
        logger.debug(f"Mounted cart for session {sanitize_id_for_logging(session_id)}")
        return store

    def open(self, session_id: str) -> CartStore:
        store = self.get(session_id)
        if store is None:
            store = self.keep(session_id, CartStore())
        return store

    def release(self, session_id: str) -> bool:
        """Drop the session's cart. Returns False if there was none."""
        removed = self._stores.pop(session_id, None) is not None
        if removed:
            logger.debug(f"Released cart for session {sanitize_id_for_logging(session_id)}")
        return removed

    def _evict_idle(self, now: float) -> None:
        if self.ttl <= 0 or now - self._last_sweep < self.sweep_interval:
            return
        self._last_sweep = now
        expired = [sid for sid, (_, seen) in self._stores.items() if now - seen > self.ttl]
        for sid in expired:
            del self._stores[sid]
        if expired:
            logger.info(f"Evicted {len(expired)} idle cart session(s)")
