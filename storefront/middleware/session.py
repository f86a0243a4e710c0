"""
Cart Session Middleware

Every browser gets an opaque session id in a cookie. The id only selects
which in-memory cart belongs to the visitor; nothing else is stored.
"""

import os
import secrets

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

CART_SESSION_COOKIE = os.environ.get("CART_SESSION_COOKIE", "storefront_session")
COOKIE_SECURE = os.environ.get("COOKIE_SECURE", "false").lower() in ("1", "true", "yes")

# secrets.token_urlsafe(24) yields 32 characters
_MAX_SESSION_ID_LENGTH = 64


def _is_valid_session_id(value: str | None) -> bool:
    if not value or len(value) > _MAX_SESSION_ID_LENGTH:
        return False
    return all(c.isalnum() or c in "-_" for c in value)


class CartSessionMiddleware(BaseHTTPMiddleware):
    """Expose ``request.state.cart_session_id`` and keep the cookie set."""

    def __init__(self, app, cookie_name: str = CART_SESSION_COOKIE, secure: bool = COOKIE_SECURE):
        super().__init__(app)
        self.cookie_name = cookie_name
        self.secure = secure

    async def dispatch(self, request: Request, call_next):
        session_id = request.cookies.get(self.cookie_name)
        is_new = not _is_valid_session_id(session_id)
        if is_new:
            session_id = secrets.token_urlsafe(24)

        request.state.cart_session_id = session_id
        response: Response = await call_next(request)

        if is_new:
            # Session cookie: the cart goes away with the browser session
            response.set_cookie(
                self.cookie_name,
                session_id,
                httponly=True,
                samesite="lax",
                secure=self.secure,
            )
        return response
