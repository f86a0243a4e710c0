"""Placeholder pages for flows handled outside the storefront."""

from fastapi import APIRouter, Depends, Request

from storefront.cart import use_cart
from storefront.rendering import render

from .deps import provide_cart

router = APIRouter(tags=["pages"], dependencies=[Depends(provide_cart)])


@router.get("/checkout")
async def checkout(request: Request):
    return render(request, "checkout.html", cart=use_cart())


@router.get("/account")
async def account(request: Request):
    return render(request, "account.html", cart=use_cart())
