"""Jinja2 page rendering shared by all HTML routers."""
from pathlib import Path
from typing import Any, Optional

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from storefront.cart import CartStore
from storefront.services.money import format_amount, format_usd

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["amount"] = format_amount
templates.env.filters["usd"] = format_usd


def render(
    request: Request,
    name: str,
    ctx: Optional[dict[str, Any]] = None,
    *,
    cart: Optional[CartStore] = None,
    status_code: int = 200,
) -> HTMLResponse:
    """Render ``name``; ``cart`` feeds the item count in the navigation bar."""
    context: dict[str, Any] = {
        "cart_count": cart.item_count if cart is not None else None,
        "search": "",
    }
    context.update(ctx or {})
    return templates.TemplateResponse(request, name, context, status_code=status_code)
