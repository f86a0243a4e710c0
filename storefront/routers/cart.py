"""
Cart Router

Cart page plus the form posts behind its buttons. All mutations go
through the session's CartStore obtained with use_cart().
"""

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse

from storefront.cart import CartStore, use_cart
from storefront.cart.models import ItemId
from storefront.rendering import render

from .deps import provide_cart

router = APIRouter(prefix="/cart", tags=["cart"], dependencies=[Depends(provide_cart)])


def _back_to_cart() -> RedirectResponse:
    return RedirectResponse(url="/cart", status_code=303)


def _resolve_item_id(cart: CartStore, raw_id: str) -> ItemId | None:
    """Map the id from the URL back to the id stored in the cart.

    Ids may be ints in the cart but always arrive as strings in a path.
    """
    for item in cart.items:
        if str(item.id) == raw_id:
            return item.id
    return None


@router.get("")
async def cart_page(request: Request):
    """Current cart contents with line totals and the cart total."""
    cart = use_cart()
    return render(request, "cart.html", {"items": cart.items, "total": cart.total}, cart=cart)


@router.post("/items/{item_id}/quantity")
async def update_item_quantity(item_id: str, quantity: int = Form(...)):
    """Set a line's quantity to whatever was submitted."""
    cart = use_cart()
    resolved = _resolve_item_id(cart, item_id)
    if resolved is not None:
        cart.update_quantity(resolved, quantity)
    return _back_to_cart()


@router.post("/items/{item_id}/remove")
async def remove_item(item_id: str):
    cart = use_cart()
    resolved = _resolve_item_id(cart, item_id)
    if resolved is not None:
        cart.remove_item(resolved)
    return _back_to_cart()


@router.post("/clear")
async def clear_cart():
    use_cart().clear_cart()
    return _back_to_cart()
